# 组件工厂：由基础参数构造描述符
# 所有函数只构造并返回新对象，没有其他副作用

from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from container_factory.components import (
    Accessory,
    ActionRow,
    Button,
    ChannelSelectMenu,
    Emoji,
    File,
    MediaGallery,
    MediaGalleryItem,
    MentionableSelectMenu,
    RoleSelectMenu,
    Section,
    SelectMenu,
    SelectOption,
    Separator,
    StringSelectMenu,
    TextDisplay,
    Thumbnail,
    UserSelectMenu,
)
from container_factory.config import GALLERY_DESCRIPTION_MODE, GALLERY_DESCRIPTION_MODES
from container_factory.enums import ButtonStyle, ChannelType, SeparatorSpacing
from container_factory.errors import ConfigError

DEFAULT_BUTTON_STYLE = ButtonStyle.SECONDARY
DEFAULT_MIN_VALUES = 1
DEFAULT_MAX_VALUES = 1


# ========== 内容类 ==========


def create_text(content: str) -> TextDisplay:
    """文本块，内容原样保留。"""
    return TextDisplay(content)


def create_separator(spacing: bool = True) -> Separator:
    """分隔线；spacing 为 True 时使用小间距，否则不设置间距。"""
    return Separator(spacing=SeparatorSpacing.SMALL if spacing else None)


def create_thumbnail(url: str, description: Optional[str] = None, spoiler: bool = False) -> Thumbnail:
    return Thumbnail(url, description=description or None, spoiler=spoiler)


def create_section(text: str, accessory: Optional[Accessory] = None) -> Section:
    """
    构建 Section。

    Args:
        text: Section 正文
        accessory: 可选的按钮或缩略图，仅支持一个
    """
    return Section(texts=(create_text(text),), accessory=accessory)


def create_media_gallery(
    url_or_urls: Union[str, Sequence[str]],
    description: Optional[str] = None,
    *,
    description_mode: Optional[str] = None,
) -> MediaGallery:
    """
    构建媒体画廊，每个 URL 一个条目。

    Args:
        url_or_urls: 单个 URL 或 URL 列表
        description: 可选描述
        description_mode: "first" 只挂到第一个条目，"all" 挂到每个条目；
            默认取配置 GALLERY_DESCRIPTION_MODE

    Returns:
        MediaGallery
    """
    urls = [url_or_urls] if isinstance(url_or_urls, str) else list(url_or_urls)
    mode = (description_mode or GALLERY_DESCRIPTION_MODE).lower()
    if mode not in GALLERY_DESCRIPTION_MODES:
        raise ConfigError(f"description_mode={mode!r} 不合法，可选值: {', '.join(GALLERY_DESCRIPTION_MODES)}")

    items = []
    for index, url in enumerate(urls):
        attach = description and (mode == "all" or index == 0)
        items.append(MediaGalleryItem(url, description=description if attach else None))
    return MediaGallery(items=tuple(items))


def create_file(url: str, description: Optional[str] = None, spoiler: bool = False) -> File:
    """文件组件，url 通常为 attachment://<文件名>。"""
    return File(url, description=description or None, spoiler=spoiler)


# ========== 按钮 ==========


def create_button(
    custom_id: str,
    emoji: Emoji,
    style: ButtonStyle = DEFAULT_BUTTON_STYLE,
    disabled: bool = False,
) -> Button:
    """只有 emoji、没有文字的按钮。"""
    return Button(style=style, custom_id=custom_id, emoji=emoji, disabled=disabled)


def create_label_button(
    custom_id: str,
    label: str,
    style: ButtonStyle = DEFAULT_BUTTON_STYLE,
    emoji: Optional[Emoji] = None,
    disabled: bool = False,
) -> Button:
    """带文字的按钮，emoji 可选。"""
    return Button(style=style, custom_id=custom_id, label=label, emoji=emoji or None, disabled=disabled)


def create_link_button(label: str, url: str, emoji: Optional[Emoji] = None) -> Button:
    """链接按钮：样式固定为 LINK，没有 custom_id。"""
    return Button(style=ButtonStyle.LINK, label=label, url=url, emoji=emoji or None)


# ========== 选择菜单 ==========


def create_select_option(
    label: str,
    value: str,
    description: Optional[str] = None,
    emoji: Optional[Emoji] = None,
    default: bool = False,
) -> SelectOption:
    return SelectOption(
        label=label,
        value=value,
        description=description or None,
        emoji=emoji or None,
        default=bool(default),
    )


def build_options(options: Iterable[Union[SelectOption, Mapping[str, Any]]]) -> tuple:
    """
    构建选项列表。

    options 中每项可以是 SelectOption，或者形如
    {"label": ..., "value": ..., "description"?: ..., "emoji"?: ..., "default"?: bool} 的 dict。
    """
    built = []
    for opt in options:
        if isinstance(opt, SelectOption):
            built.append(opt)
            continue
        built.append(
            create_select_option(
                opt["label"],
                opt["value"],
                description=opt.get("description"),
                emoji=opt.get("emoji"),
                default=opt.get("default", False),
            )
        )
    return tuple(built)


def create_string_select_menu(
    custom_id: str,
    placeholder: str,
    options: Iterable[Union[SelectOption, Mapping[str, Any]]],
    *,
    min_values: int = DEFAULT_MIN_VALUES,
    max_values: int = DEFAULT_MAX_VALUES,
    disabled: bool = False,
) -> StringSelectMenu:
    """字符串选项菜单；空选项列表、min>max 不在本地检查。"""
    return StringSelectMenu(
        custom_id=custom_id,
        placeholder=placeholder,
        options=build_options(options),
        min_values=min_values,
        max_values=max_values,
        disabled=disabled,
    )


def create_user_select_menu(
    custom_id: str,
    placeholder: str,
    *,
    min_values: int = DEFAULT_MIN_VALUES,
    max_values: int = DEFAULT_MAX_VALUES,
    disabled: bool = False,
) -> UserSelectMenu:
    return UserSelectMenu(custom_id, placeholder, min_values, max_values, disabled)


def create_role_select_menu(
    custom_id: str,
    placeholder: str,
    *,
    min_values: int = DEFAULT_MIN_VALUES,
    max_values: int = DEFAULT_MAX_VALUES,
    disabled: bool = False,
) -> RoleSelectMenu:
    return RoleSelectMenu(custom_id, placeholder, min_values, max_values, disabled)


def create_channel_select_menu(
    custom_id: str,
    placeholder: str,
    channel_types: Iterable[ChannelType] = (),
    *,
    min_values: int = DEFAULT_MIN_VALUES,
    max_values: int = DEFAULT_MAX_VALUES,
    disabled: bool = False,
) -> ChannelSelectMenu:
    """频道选择菜单；channel_types 为空时所有频道类型均可选。"""
    return ChannelSelectMenu(
        custom_id=custom_id,
        placeholder=placeholder,
        min_values=min_values,
        max_values=max_values,
        disabled=disabled,
        channel_types=tuple(channel_types or ()),
    )


def create_mentionable_select_menu(
    custom_id: str,
    placeholder: str,
    *,
    min_values: int = DEFAULT_MIN_VALUES,
    max_values: int = DEFAULT_MAX_VALUES,
    disabled: bool = False,
) -> MentionableSelectMenu:
    return MentionableSelectMenu(custom_id, placeholder, min_values, max_values, disabled)


# ========== 交互行 ==========


def create_action_row(components: Iterable[Union[Button, SelectMenu]]) -> ActionRow:
    """
    按顺序把按钮/选择菜单放进一行。

    平台规定一行最多 5 个按钮或 1 个选择菜单，本地不做检查，违规时由平台拒绝。
    """
    return ActionRow(components=tuple(components))
