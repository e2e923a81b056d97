# 组件工厂异常
# 本地不做任何恢复，异常一律抛给调用方


class ComponentError(Exception):
    """组件工厂异常基类。"""


class ComponentValidationError(ComponentError, ValueError):
    """构造描述符时字段取值越界（如空 label、超长 custom_id）。"""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class UnsupportedComponentKind(ComponentError, TypeError):
    """容器无法放置的组件类型。"""

    def __init__(self, component):
        self.component = component
        super().__init__(f"容器不支持的组件类型: {type(component).__name__}")


class ConfigError(ComponentError, ValueError):
    """配置项取值非法。"""
