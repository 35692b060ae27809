"""进程级的 IconProvider 注册。

启动时调用一次 initialize()，之后所有 render_icon() 调用共享同一个 provider。
不支持重新初始化。
"""

from __future__ import annotations

import threading
from typing import Optional

from markupsafe import Markup

from heroicons_kit.core.config import IconType
from heroicons_kit.core.exceptions import ProviderAlreadyInitializedError, ProviderNotInitializedError
from heroicons_kit.runtime.provider import IconProvider, IconRenderer

_LOCK = threading.Lock()
_RENDERER: Optional[IconRenderer] = None


def initialize(provider: IconProvider) -> None:
    """注册进程级 provider，只能调用一次。"""

    global _RENDERER
    with _LOCK:
        if _RENDERER is not None:
            raise ProviderAlreadyInitializedError("heroicons 已经初始化，不支持重复注册 IconProvider")
        _RENDERER = IconRenderer(provider)


def is_initialized() -> bool:
    return _RENDERER is not None


def render_icon(name: str, icon_type: IconType, class_: str = "") -> Markup:
    """使用已注册的 provider 渲染图标。"""

    renderer = _RENDERER
    if renderer is None:
        raise ProviderNotInitializedError("heroicons 尚未通过 IconProvider 初始化")
    return renderer.render(name, icon_type, class_)
