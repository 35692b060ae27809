"""项目内使用的自定义异常定义。"""


class HeroiconsError(Exception):
    """基础异常类型。"""


class InvalidConfigurationError(HeroiconsError):
    """配置不合法时抛出。"""


class GenerationError(HeroiconsError):
    """生成过程中出现无法继续的 I/O 错误。"""


class IconNotFoundError(HeroiconsError, LookupError):
    """运行时找不到图标且开启了 fail_on_error。"""

    def __init__(self, key: str, message: str | None = None) -> None:
        super().__init__(message or f"图标不存在: {key}")
        self.key = key


class ProviderNotInitializedError(HeroiconsError):
    """在 initialize() 之前调用渲染函数。"""


class ProviderAlreadyInitializedError(HeroiconsError):
    """重复调用 initialize()。"""
