# 容器组装：类型分派、未识别类型处理、序列化顺序

import unittest.mock as mock

import pytest

from container_factory import container as container_module
from container_factory.builders import (
    create_action_row,
    create_button,
    create_file,
    create_media_gallery,
    create_section,
    create_separator,
    create_text,
    create_thumbnail,
)
from container_factory.container import Container, ContainerSlot, build_container, slot_for
from container_factory.errors import ComponentValidationError, ConfigError, UnsupportedComponentKind


def test_build_container_places_each_component_in_its_slot():
    text = create_text("hello")
    row = create_action_row([create_button("a", "🔥")])
    f = create_file("attachment://a.txt")
    container = build_container([text, row, f])
    assert container.components == (text, row, f)
    slots = container.slots()
    assert slots[ContainerSlot.TEXT] == (text,)
    assert slots[ContainerSlot.ACTION_ROW] == (row,)
    assert slots[ContainerSlot.FILE] == (f,)
    assert sum(len(items) for items in slots.values()) == 3


def test_build_container_all_six_kinds():
    components = [
        create_text("标题"),
        create_section("说明", create_thumbnail("https://img.test/t.png")),
        create_separator(),
        create_media_gallery(["https://img.test/1.png"]),
        create_action_row([create_button("a", "🔥")]),
        create_file("attachment://a.txt"),
    ]
    container = build_container(components)
    assert [slot_for(c) for c in container.components] == list(ContainerSlot)
    assert [c["type"] for c in container.to_dict()["components"]] == [10, 9, 14, 12, 1, 13]


def test_build_container_drops_unrecognized_by_default():
    # 兼容旧行为：未识别类型被丢弃，只记录 warning
    text = create_text("hello")
    thumb = create_thumbnail("https://img.test/t.png")
    with mock.patch.object(container_module, "UNSUPPORTED_COMPONENT_POLICY", "drop"):
        container = build_container([text, thumb, "plain string", create_separator()])
    assert len(container.components) == 2
    assert thumb not in container.components


def test_build_container_drop_logs_warning(caplog):
    with caplog.at_level("WARNING", logger="container_factory.container"):
        build_container([create_text("a"), object()], on_unsupported="drop")
    assert any("object" in record.getMessage() for record in caplog.records)


def test_build_container_raise_policy():
    with pytest.raises(UnsupportedComponentKind) as exc:
        build_container([create_text("a"), create_button("b", "🔥")], on_unsupported="raise")
    assert exc.value.component.custom_id == "b"


def test_build_container_raise_policy_from_config():
    with mock.patch.object(container_module, "UNSUPPORTED_COMPONENT_POLICY", "raise"):
        with pytest.raises(UnsupportedComponentKind):
            build_container([42])


def test_build_container_invalid_policy():
    with pytest.raises(ConfigError):
        build_container([], on_unsupported="ignore")


def test_container_accent_color_and_spoiler():
    container = build_container([create_text("a")], accent_color=0x5865F2, spoiler=True)
    out = container.to_dict()
    assert out["type"] == 17
    assert out["accent_color"] == 0x5865F2
    assert out["spoiler"] is True


def test_container_accent_color_out_of_range():
    with pytest.raises(ComponentValidationError):
        build_container([create_text("a")], accent_color=0x1000000)


def test_container_direct_construction_rejects_unknown():
    with pytest.raises(UnsupportedComponentKind):
        Container((create_text("a"), "x"))


def test_empty_container():
    container = build_container([])
    assert container.components == ()
    assert container.to_dict() == {"type": 17, "components": []}


def test_section_keeps_single_accessory_inside_container():
    section = create_section("正文", create_button("b1", "🔥"))
    out = build_container([section]).to_dict()
    assert out["components"][0]["accessory"]["custom_id"] == "b1"
