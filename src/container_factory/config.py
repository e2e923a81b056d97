import os
from dotenv import load_dotenv

from container_factory.errors import ConfigError

load_dotenv()  # 从 .env 文件加载


def _choice(name: str, default: str, allowed: tuple) -> str:
    """读取枚举型配置项，非法取值直接报错。"""
    value = (os.getenv(name) or default).strip().lower()
    if value not in allowed:
        raise ConfigError(f"{name}={value!r} 不合法，可选值: {', '.join(allowed)}")
    return value


# ---------- 媒体画廊 ----------
# description 的挂载方式：first 只挂第一个条目（兼容旧行为），all 挂到每个条目
GALLERY_DESCRIPTION_MODES = ("first", "all")
GALLERY_DESCRIPTION_MODE = _choice("GALLERY_DESCRIPTION_MODE", "first", GALLERY_DESCRIPTION_MODES)

# ---------- 容器 ----------
# 未识别的组件类型：drop 丢弃并记录 warning，raise 抛 UnsupportedComponentKind
UNSUPPORTED_COMPONENT_POLICIES = ("drop", "raise")
UNSUPPORTED_COMPONENT_POLICY = _choice(
    "UNSUPPORTED_COMPONENT_POLICY", "drop", UNSUPPORTED_COMPONENT_POLICIES
)
