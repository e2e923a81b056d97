"""组件描述符 - 不可变值对象

每个描述符对应一种 UI 元素，构造后不可修改；to_dict() 输出平台 wire JSON。
构造时只做单字段取值检查（空 label、超长 custom_id 等），跨字段约束
（min>max、空选项列表、行内按钮与菜单混放）交给平台在发送时校验。
"""
import re
from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from container_factory.enums import ButtonStyle, ChannelType, ComponentType, SeparatorSpacing
from container_factory.errors import ComponentValidationError
from container_factory.validation import check_length, check_range, check_url, freeze_field

CUSTOM_ID_MAX = 100
BUTTON_LABEL_MAX = 80
PLACEHOLDER_MAX = 150
OPTION_TEXT_MAX = 100
MEDIA_DESCRIPTION_MAX = 1024
SELECT_VALUES_MAX = 25
ACCENT_COLOR_MAX = 0xFFFFFF

# <:name:id> 或 <a:name:id>
_CUSTOM_EMOJI_RE = re.compile(r"^<(a)?:(\w+):(\d+)>$")

Emoji = Union[str, Dict[str, Any]]

_EMOJI_KEYS = ("id", "name", "animated")


@dataclass(frozen=True)
class PartialEmoji:
    """平台的 partial emoji；构造描述符时从字符串或 dict 解析得到。"""
    id: Optional[str] = None
    name: Optional[str] = None
    animated: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, key) for key in _EMOJI_KEYS if getattr(self, key) is not None}


def parse_partial_emoji(emoji: Union[Emoji, PartialEmoji]) -> PartialEmoji:
    """
    解析 emoji。

    - unicode 字符: name
    - 自定义表情 <:name:id> / <a:name:id>: id + name + animated
    - 纯数字 ID: id
    - dict: 只接受 id / name / animated 三个键，内容复制，不保留引用
    """
    if isinstance(emoji, PartialEmoji):
        return emoji
    if isinstance(emoji, dict):
        unknown = set(emoji) - set(_EMOJI_KEYS)
        if unknown:
            raise ComponentValidationError("emoji", f"未知字段 {', '.join(sorted(unknown))}")
        if emoji.get("id") is None and not emoji.get("name"):
            raise ComponentValidationError("emoji", "需要 id 或 name")
        return PartialEmoji(
            id=None if emoji.get("id") is None else str(emoji["id"]),
            name=emoji.get("name"),
            animated=emoji.get("animated"),
        )
    if not isinstance(emoji, str):
        raise ComponentValidationError("emoji", f"需要字符串或 dict，得到 {type(emoji).__name__}")
    if not emoji:
        raise ComponentValidationError("emoji", "不能为空")
    match = _CUSTOM_EMOJI_RE.match(emoji)
    if match:
        return PartialEmoji(id=match.group(3), name=match.group(2), animated=bool(match.group(1)))
    if emoji.isdigit():
        return PartialEmoji(id=emoji)
    return PartialEmoji(name=emoji)


def parse_emoji(emoji: Union[Emoji, PartialEmoji]) -> Dict[str, Any]:
    """将 emoji 转为 partial emoji 的 wire 结构。"""
    return parse_partial_emoji(emoji).to_dict()


# ========== 内容类 ==========


@dataclass(frozen=True)
class TextDisplay:
    """文本块（长度不在本地校验）。"""
    content: str

    type: ClassVar[ComponentType] = ComponentType.TEXT_DISPLAY

    def to_dict(self) -> Dict[str, Any]:
        return {"type": int(self.type), "content": self.content}


@dataclass(frozen=True)
class Separator:
    """分隔线；spacing 为 None 时不输出 spacing 字段。"""
    spacing: Optional[SeparatorSpacing] = None
    divider: bool = True

    type: ClassVar[ComponentType] = ComponentType.SEPARATOR

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": int(self.type), "divider": self.divider}
        if self.spacing is not None:
            data["spacing"] = int(self.spacing)
        return data


@dataclass(frozen=True)
class Thumbnail:
    """缩略图，只能作为 Section 的 accessory。"""
    url: str
    description: Optional[str] = None
    spoiler: bool = False

    type: ClassVar[ComponentType] = ComponentType.THUMBNAIL

    def __post_init__(self):
        check_url("url", self.url)
        if self.description is not None:
            check_length("description", self.description, MEDIA_DESCRIPTION_MAX)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": int(self.type), "media": {"url": self.url}}
        if self.description is not None:
            data["description"] = self.description
        if self.spoiler:
            data["spoiler"] = True
        return data


@dataclass(frozen=True)
class MediaGalleryItem:
    url: str
    description: Optional[str] = None
    spoiler: bool = False

    def __post_init__(self):
        check_url("url", self.url)
        if self.description is not None:
            check_length("description", self.description, MEDIA_DESCRIPTION_MAX)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"media": {"url": self.url}}
        if self.description is not None:
            data["description"] = self.description
        if self.spoiler:
            data["spoiler"] = True
        return data


@dataclass(frozen=True)
class MediaGallery:
    """媒体画廊，条目按传入顺序保存。"""
    items: Tuple[MediaGalleryItem, ...] = ()

    type: ClassVar[ComponentType] = ComponentType.MEDIA_GALLERY

    def __post_init__(self):
        freeze_field(self, "items")

    def to_dict(self) -> Dict[str, Any]:
        return {"type": int(self.type), "items": [item.to_dict() for item in self.items]}


@dataclass(frozen=True)
class File:
    """文件组件；spoiler 为 True 时客户端点击后才显示。"""
    url: str
    description: Optional[str] = None
    spoiler: bool = False

    type: ClassVar[ComponentType] = ComponentType.FILE

    def __post_init__(self):
        check_url("url", self.url)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": int(self.type), "file": {"url": self.url}}
        if self.description is not None:
            data["description"] = self.description
        if self.spoiler:
            data["spoiler"] = True
        return data


# ========== 交互类 ==========


@dataclass(frozen=True)
class Button:
    """
    按钮。

    LINK 样式必须带 url 且不能有 custom_id（链接不回传交互标识）；
    其余样式必须带 custom_id 且不能有 url。
    """
    style: ButtonStyle
    custom_id: Optional[str] = None
    label: Optional[str] = None
    emoji: Optional[PartialEmoji] = None
    url: Optional[str] = None
    disabled: bool = False

    type: ClassVar[ComponentType] = ComponentType.BUTTON

    def __post_init__(self):
        try:
            object.__setattr__(self, "style", ButtonStyle(self.style))
        except ValueError:
            raise ComponentValidationError("style", f"未知按钮样式 {self.style!r}") from None
        if self.emoji is not None:
            object.__setattr__(self, "emoji", parse_partial_emoji(self.emoji))
        if self.label is not None:
            check_length("label", self.label, BUTTON_LABEL_MAX)
        if self.style is ButtonStyle.LINK:
            check_url("url", self.url)
            if self.custom_id is not None:
                raise ComponentValidationError("custom_id", "链接按钮不能设置 custom_id")
        else:
            check_length("custom_id", self.custom_id, CUSTOM_ID_MAX)
            if self.url is not None:
                raise ComponentValidationError("url", "只有链接按钮可以设置 url")

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": int(self.type), "style": int(self.style)}
        if self.custom_id is not None:
            data["custom_id"] = self.custom_id
        if self.label is not None:
            data["label"] = self.label
        if self.emoji is not None:
            data["emoji"] = self.emoji.to_dict()
        if self.url is not None:
            data["url"] = self.url
        data["disabled"] = self.disabled
        return data


@dataclass(frozen=True)
class SelectOption:
    """字符串选择菜单的选项；同一菜单内 value 应唯一（不在本地检查）。"""
    label: str
    value: str
    description: Optional[str] = None
    emoji: Optional[PartialEmoji] = None
    default: bool = False

    def __post_init__(self):
        check_length("label", self.label, OPTION_TEXT_MAX)
        check_length("value", self.value, OPTION_TEXT_MAX)
        if self.description is not None:
            check_length("description", self.description, OPTION_TEXT_MAX)
        if self.emoji is not None:
            object.__setattr__(self, "emoji", parse_partial_emoji(self.emoji))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"label": self.label, "value": self.value}
        if self.description is not None:
            data["description"] = self.description
        if self.emoji is not None:
            data["emoji"] = self.emoji.to_dict()
        if self.default:
            data["default"] = True
        return data


@dataclass(frozen=True)
class SelectMenu:
    """选择菜单公共字段，具体类型由子类的 type 决定。"""
    custom_id: str
    placeholder: Optional[str] = None
    min_values: int = 1
    max_values: int = 1
    disabled: bool = False

    type: ClassVar[ComponentType]

    def __post_init__(self):
        if getattr(self.__class__, "type", None) is None:
            raise TypeError("SelectMenu 是基类，请使用具体的选择菜单类型")
        check_length("custom_id", self.custom_id, CUSTOM_ID_MAX)
        if self.placeholder is not None:
            check_length("placeholder", self.placeholder, PLACEHOLDER_MAX, min_len=0)
        check_range("min_values", self.min_values, 0, SELECT_VALUES_MAX)
        check_range("max_values", self.max_values, 0, SELECT_VALUES_MAX)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": int(self.type), "custom_id": self.custom_id}
        if self.placeholder is not None:
            data["placeholder"] = self.placeholder
        data["min_values"] = self.min_values
        data["max_values"] = self.max_values
        data["disabled"] = self.disabled
        return data


@dataclass(frozen=True)
class StringSelectMenu(SelectMenu):
    options: Tuple[SelectOption, ...] = ()

    type: ClassVar[ComponentType] = ComponentType.STRING_SELECT

    def __post_init__(self):
        super().__post_init__()
        freeze_field(self, "options")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["options"] = [option.to_dict() for option in self.options]
        return data


@dataclass(frozen=True)
class UserSelectMenu(SelectMenu):
    type: ClassVar[ComponentType] = ComponentType.USER_SELECT


@dataclass(frozen=True)
class RoleSelectMenu(SelectMenu):
    type: ClassVar[ComponentType] = ComponentType.ROLE_SELECT


@dataclass(frozen=True)
class MentionableSelectMenu(SelectMenu):
    type: ClassVar[ComponentType] = ComponentType.MENTIONABLE_SELECT


@dataclass(frozen=True)
class ChannelSelectMenu(SelectMenu):
    """频道选择菜单；channel_types 为空表示不过滤。"""
    channel_types: Tuple[ChannelType, ...] = ()

    type: ClassVar[ComponentType] = ComponentType.CHANNEL_SELECT

    def __post_init__(self):
        super().__post_init__()
        try:
            channel_types = tuple(ChannelType(t) for t in self.channel_types)
        except ValueError as exc:
            raise ComponentValidationError("channel_types", str(exc)) from None
        object.__setattr__(self, "channel_types", channel_types)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if self.channel_types:
            data["channel_types"] = [int(t) for t in self.channel_types]
        return data


# ========== 布局类 ==========

Accessory = Union[Button, Thumbnail]


@dataclass(frozen=True)
class Section:
    """文本 + 至多一个 accessory（按钮或缩略图）。"""
    texts: Tuple[TextDisplay, ...] = ()
    accessory: Optional[Accessory] = None

    type: ClassVar[ComponentType] = ComponentType.SECTION

    def __post_init__(self):
        freeze_field(self, "texts")

    def with_accessory(self, accessory: Accessory) -> "Section":
        """返回替换了 accessory 的新 Section（覆盖，不追加）。"""
        return replace(self, accessory=accessory)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": int(self.type),
            "components": [text.to_dict() for text in self.texts],
        }
        if self.accessory is not None:
            data["accessory"] = self.accessory.to_dict()
        return data


@dataclass(frozen=True)
class ActionRow:
    """交互组件行：最多 5 个按钮或 1 个选择菜单（由平台校验）。"""
    components: Tuple[Union[Button, SelectMenu], ...] = field(default_factory=tuple)

    type: ClassVar[ComponentType] = ComponentType.ACTION_ROW

    def __post_init__(self):
        freeze_field(self, "components")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": int(self.type),
            "components": [component.to_dict() for component in self.components],
        }
