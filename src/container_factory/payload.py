# 消息 payload：单个容器 + 附件 + Components V2 标志位
# 结构化组件消息不能再带 content / embeds，标志位必须始终设置

import logging
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from container_factory.container import Container
from container_factory.enums import MessageFlags

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MessagePayload:
    """发送接口所需的消息体；files 由调用方的发送端作为附件上传。"""
    container: Container
    files: Tuple[Any, ...] = ()
    flags: MessageFlags = MessageFlags.IS_COMPONENTS_V2

    def __post_init__(self):
        object.__setattr__(self, "files", tuple(self.files))
        object.__setattr__(self, "flags", MessageFlags(self.flags) | MessageFlags.IS_COMPONENTS_V2)

    @property
    def is_components_v2(self) -> bool:
        return bool(self.flags & MessageFlags.IS_COMPONENTS_V2)

    def to_dict(self) -> Dict[str, Any]:
        """消息 JSON 主体（不含附件二进制）。"""
        return {
            "components": [self.container.to_dict()],
            "flags": int(self.flags),
        }


def create_message_payload(container: Container, files: Sequence[Any] = ()) -> MessagePayload:
    """
    将容器包装为消息 payload。

    Args:
        container: build_container 的结果
        files: 附件列表，顺序保持不变

    Returns:
        MessagePayload，flags 始终包含 IS_COMPONENTS_V2
    """
    payload = MessagePayload(container=container, files=tuple(files or ()))
    logger.debug("payload 组装完成: %d 个组件, %d 个附件", len(container.components), len(payload.files))
    return payload
