# 容器组装：按组件类型分派到对应槽位
# 六种可放入容器的类型：文本、Section、分隔线、媒体画廊、交互行、文件

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, Optional, Tuple, Union

from container_factory.components import (
    ACCENT_COLOR_MAX,
    ActionRow,
    File,
    MediaGallery,
    Section,
    Separator,
    TextDisplay,
)
from container_factory.config import UNSUPPORTED_COMPONENT_POLICIES, UNSUPPORTED_COMPONENT_POLICY
from container_factory.enums import ComponentType
from container_factory.errors import ConfigError, UnsupportedComponentKind
from container_factory.validation import check_range, freeze_field

logger = logging.getLogger(__name__)

ContainerChild = Union[TextDisplay, Section, Separator, MediaGallery, ActionRow, File]


class ContainerSlot(str, Enum):
    TEXT = "text"
    SECTION = "section"
    SEPARATOR = "separator"
    MEDIA_GALLERY = "media_gallery"
    ACTION_ROW = "action_row"
    FILE = "file"


# 描述符类型 -> 容器槽位
_SLOTS: Dict[type, ContainerSlot] = {
    TextDisplay: ContainerSlot.TEXT,
    Section: ContainerSlot.SECTION,
    Separator: ContainerSlot.SEPARATOR,
    MediaGallery: ContainerSlot.MEDIA_GALLERY,
    ActionRow: ContainerSlot.ACTION_ROW,
    File: ContainerSlot.FILE,
}


def slot_for(component: Any) -> Optional[ContainerSlot]:
    """返回组件应放入的槽位；不支持的类型返回 None。"""
    for kind, slot in _SLOTS.items():
        if isinstance(component, kind):
            return slot
    return None


@dataclass(frozen=True)
class Container:
    """
    顶层容器。

    components 保持调用顺序（即序列化顺序）；slots() 给出按槽位分组的视图。
    直接构造时遇到不支持的组件类型会抛 UnsupportedComponentKind。
    """
    components: Tuple[ContainerChild, ...] = ()
    accent_color: Optional[int] = None
    spoiler: bool = False

    type: ClassVar[ComponentType] = ComponentType.CONTAINER

    def __post_init__(self):
        freeze_field(self, "components")
        for component in self.components:
            if slot_for(component) is None:
                raise UnsupportedComponentKind(component)
        if self.accent_color is not None:
            check_range("accent_color", self.accent_color, 0, ACCENT_COLOR_MAX)

    def slots(self) -> Dict[ContainerSlot, Tuple[ContainerChild, ...]]:
        grouped: Dict[ContainerSlot, list] = {slot: [] for slot in ContainerSlot}
        for component in self.components:
            grouped[slot_for(component)].append(component)
        return {slot: tuple(items) for slot, items in grouped.items()}

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": int(self.type),
            "components": [component.to_dict() for component in self.components],
        }
        if self.accent_color is not None:
            data["accent_color"] = self.accent_color
        if self.spoiler:
            data["spoiler"] = True
        return data


def build_container(
    components: Iterable[Any],
    *,
    accent_color: Optional[int] = None,
    spoiler: bool = False,
    on_unsupported: Optional[str] = None,
) -> Container:
    """
    将组件依次放入同一个容器。

    Args:
        components: 有序组件序列
        accent_color: 容器左侧强调色（0xRRGGBB）
        spoiler: 是否整体折叠为剧透
        on_unsupported: 不支持类型的处理方式 "drop" | "raise"，默认取配置
            UNSUPPORTED_COMPONENT_POLICY

    Returns:
        Container，所有可识别组件恰好出现一次
    """
    policy = (on_unsupported or UNSUPPORTED_COMPONENT_POLICY).lower()
    if policy not in UNSUPPORTED_COMPONENT_POLICIES:
        raise ConfigError(f"on_unsupported={policy!r} 不合法，可选值: {', '.join(UNSUPPORTED_COMPONENT_POLICIES)}")

    accepted = []
    for component in components:
        if slot_for(component) is None:
            if policy == "raise":
                raise UnsupportedComponentKind(component)
            logger.warning("丢弃容器不支持的组件: %s", type(component).__name__)
            continue
        accepted.append(component)

    container = Container(tuple(accepted), accent_color=accent_color, spoiler=spoiler)
    logger.debug("容器组装完成: %d 个组件", len(container.components))
    return container
