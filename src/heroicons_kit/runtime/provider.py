"""运行时图标提供者：基于内嵌查找表返回 SVG 内容。"""

from __future__ import annotations

import logging
from importlib import resources
from typing import Callable, Mapping, Protocol

from markupsafe import Markup

from heroicons_kit.core.config import IconType, icon_key
from heroicons_kit.core.exceptions import IconNotFoundError
from heroicons_kit.core.output_manager import ICONS_DIRNAME, MISSING_ICON_FILENAME
from heroicons_kit.runtime.markup import render_svg

LOGGER = logging.getLogger(__name__)

AssetLoader = Callable[[str], str]


class IconProvider(Protocol):
    """能够按名称与类型返回 SVG 内容的对象。"""

    def get_icon(self, name: str, icon_type: IconType) -> str:
        ...


class EmbeddedIconProvider:
    """从生成时固化的查找表中读取图标。

    icon_paths 将 `type/name` 映射到资源文件名，load_asset 负责按文件名读取内容。
    查找失败时，fail_on_error 为真则抛出 IconNotFoundError，否则返回缺省图标。
    """

    def __init__(
        self,
        icon_paths: Mapping[str, str],
        load_asset: AssetLoader,
        fail_on_error: bool = False,
        missing_filename: str = MISSING_ICON_FILENAME,
    ) -> None:
        self.icon_paths = dict(icon_paths)
        self.fail_on_error = fail_on_error
        self._load_asset = load_asset
        self._missing_filename = missing_filename

    @classmethod
    def from_package(
        cls,
        package: str,
        icon_paths: Mapping[str, str],
        fail_on_error: bool = False,
    ) -> "EmbeddedIconProvider":
        """从包内 `icons/` 目录读取资源（随包分发，不依赖图标库）。"""

        icons_root = resources.files(package).joinpath(ICONS_DIRNAME)

        def load_asset(filename: str) -> str:
            return icons_root.joinpath(filename).read_bytes().decode("utf-8", errors="surrogateescape")

        return cls(icon_paths, load_asset, fail_on_error=fail_on_error)

    def get_icon(self, name: str, icon_type: IconType) -> str:
        try:
            key = icon_key(name, icon_type)
        except ValueError:
            # 未知类型按未命中处理
            key = f"{icon_type}/{name}"
        filename = self.icon_paths.get(key)
        if filename is None:
            if self.fail_on_error:
                raise IconNotFoundError(key)
            return self.missing_icon()

        try:
            return self._load_asset(filename)
        except (OSError, UnicodeDecodeError) as exc:
            if self.fail_on_error:
                raise IconNotFoundError(key, f"读取图标失败 {filename}: {exc}") from exc
            LOGGER.warning("读取图标失败，使用缺省图标：%s", filename)
            return self.missing_icon()

    def missing_icon(self) -> str:
        """返回缺省图标；读取失败时返回空字符串，保证不抛异常。"""

        try:
            return self._load_asset(self._missing_filename)
        except (OSError, UnicodeDecodeError):
            LOGGER.warning("缺省图标不可读：%s", self._missing_filename)
            return ""


class IconRenderer:
    """通过注入的 IconProvider 渲染图标。"""

    def __init__(self, provider: IconProvider) -> None:
        self.provider = provider

    def render(self, name: str, icon_type: IconType, class_: str = "") -> Markup:
        svg = self.provider.get_icon(name, icon_type)
        return render_svg(svg, class_)
