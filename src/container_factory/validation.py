# 描述符构造时的单字段检查
# 失败一律抛 ComponentValidationError

from typing import Any

from container_factory.errors import ComponentValidationError


def check_length(name: str, value: Any, max_len: int, min_len: int = 1) -> None:
    if not isinstance(value, str):
        raise ComponentValidationError(name, f"需要字符串，得到 {type(value).__name__}")
    if not min_len <= len(value) <= max_len:
        raise ComponentValidationError(name, f"长度需在 {min_len}..{max_len}，当前 {len(value)}")


def check_range(name: str, value: Any, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ComponentValidationError(name, f"需要整数，得到 {type(value).__name__}")
    if not low <= value <= high:
        raise ComponentValidationError(name, f"取值需在 {low}..{high}，当前 {value}")


def check_url(name: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ComponentValidationError(name, "URL 不能为空")


def freeze_field(obj: Any, name: str) -> None:
    """把可变序列字段转成 tuple（frozen dataclass 内部使用）。"""
    object.__setattr__(obj, name, tuple(getattr(obj, name)))
