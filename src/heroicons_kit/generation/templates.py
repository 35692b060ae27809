"""生成 provider 模块的源码模板。"""

from __future__ import annotations

from string import Template
from typing import Mapping

PROVIDER_TEMPLATE = Template(
    '''# Code generated by heroicons-kit; DO NOT EDIT.
"""$package_name 图标集合。"""

from __future__ import annotations

from markupsafe import Markup

from heroicons_kit.core.config import IconType
from heroicons_kit.runtime.provider import EmbeddedIconProvider, IconRenderer

__all__ = ["FAIL_ON_ERROR", "ICON_PATHS", "IconType", "PROVIDER", "get_icon", "render_icon"]

# 为真时缺失的图标会抛出 IconNotFoundError，否则返回缺省图标
FAIL_ON_ERROR = $fail_on_error

ICON_PATHS = {
$icon_paths}

PROVIDER = EmbeddedIconProvider.from_package(__package__, ICON_PATHS, fail_on_error=FAIL_ON_ERROR)
_RENDERER = IconRenderer(PROVIDER)


def get_icon(name: str, icon_type: IconType) -> str:
    return PROVIDER.get_icon(name, icon_type)


def render_icon(name: str, icon_type: IconType, class_: str = "") -> Markup:
    """返回指定图标的 SVG，并注入 class_。"""

    return _RENDERER.render(name, icon_type, class_)
'''
)


def render_provider_source(package_name: str, icon_paths: Mapping[str, str], fail_on_error: bool) -> str:
    """将查找表与配置填入模板，返回 provider 模块源码。"""

    entries = "".join(f"    {key!r}: {filename!r},\n" for key, filename in sorted(icon_paths.items()))
    return PROVIDER_TEMPLATE.substitute(
        package_name=package_name,
        fail_on_error=repr(bool(fail_on_error)),
        icon_paths=entries,
    )
