"""Heroicons 图标库的目录约定。"""

from __future__ import annotations

from pathlib import Path

from heroicons_kit.core.config import IconSet

CATALOG_SUBDIR = "optimized"
ICON_EXTENSION = ".svg"


def resolve_icon_path(heroicons_path: Path, icon: IconSet) -> Path:
    """返回图标在图标库中的源文件路径。

    路径形如 `<root>/optimized/<尺寸>/<风格>/<name>.svg`，与 Heroicons 仓库的布局一致，
    不检查文件是否存在。
    """

    return heroicons_path / CATALOG_SUBDIR / icon.icon_type.catalog_dir / f"{icon.name}{ICON_EXTENSION}"
