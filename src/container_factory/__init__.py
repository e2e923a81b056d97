"""Discord Components V2 消息组件工厂

builders: 叶子组件工厂与交互行
container: 容器组装（按类型分派槽位）
payload: 消息 payload（Components V2 标志位）
"""

import logging

from .builders import (
    build_options,
    create_action_row,
    create_button,
    create_channel_select_menu,
    create_file,
    create_label_button,
    create_link_button,
    create_media_gallery,
    create_mentionable_select_menu,
    create_role_select_menu,
    create_section,
    create_select_option,
    create_separator,
    create_string_select_menu,
    create_text,
    create_thumbnail,
    create_user_select_menu,
)
from .components import (
    ActionRow,
    Button,
    ChannelSelectMenu,
    File,
    MediaGallery,
    MediaGalleryItem,
    MentionableSelectMenu,
    PartialEmoji,
    RoleSelectMenu,
    Section,
    SelectOption,
    Separator,
    StringSelectMenu,
    TextDisplay,
    Thumbnail,
    UserSelectMenu,
    parse_emoji,
)
from .container import Container, ContainerSlot, build_container
from .enums import ButtonStyle, ChannelType, ComponentType, MessageFlags, SeparatorSpacing
from .errors import ComponentError, ComponentValidationError, ConfigError, UnsupportedComponentKind
from .payload import MessagePayload, create_message_payload

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Builders
    "create_text",
    "create_separator",
    "create_section",
    "create_thumbnail",
    "create_media_gallery",
    "create_file",
    "create_button",
    "create_label_button",
    "create_link_button",
    "create_select_option",
    "build_options",
    "create_string_select_menu",
    "create_user_select_menu",
    "create_role_select_menu",
    "create_channel_select_menu",
    "create_mentionable_select_menu",
    "create_action_row",
    # Container / Payload
    "build_container",
    "Container",
    "ContainerSlot",
    "create_message_payload",
    "MessagePayload",
    # Components
    "TextDisplay",
    "Separator",
    "Thumbnail",
    "Section",
    "MediaGalleryItem",
    "MediaGallery",
    "File",
    "Button",
    "SelectOption",
    "StringSelectMenu",
    "UserSelectMenu",
    "RoleSelectMenu",
    "ChannelSelectMenu",
    "MentionableSelectMenu",
    "ActionRow",
    "PartialEmoji",
    "parse_emoji",
    # Enums
    "ComponentType",
    "ButtonStyle",
    "SeparatorSpacing",
    "ChannelType",
    "MessageFlags",
    # Errors
    "ComponentError",
    "ComponentValidationError",
    "UnsupportedComponentKind",
    "ConfigError",
]
