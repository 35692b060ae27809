"""测试共用的图标库构造工具。"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest

from heroicons_kit.core.catalog import resolve_icon_path
from heroicons_kit.core.config import IconSet, IconType


def add_catalog_icon(root: Path, name: str, icon_type: IconType, content: bytes) -> Path:
    path = resolve_icon_path(root, IconSet(name=name, icon_type=icon_type))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


@pytest.fixture
def catalog(tmp_path: Path) -> Path:
    root = tmp_path / "heroicons"
    add_catalog_icon(root, "home", IconType.OUTLINE, b"<svg>H</svg>")
    add_catalog_icon(root, "user", IconType.SOLID, b'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path/></svg>')
    add_catalog_icon(root, "bell", IconType.MINI, b'<svg class="base" viewBox="0 0 20 20"></svg>')
    add_catalog_icon(root, "star", IconType.MICRO, b'<svg viewBox="0 0 16 16">\r\n<path d="M1 1"/>\r\n</svg>\n')
    return root


@pytest.fixture
def import_generated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[str], object]]:
    """将 tmp_path 加入 sys.path，按包名导入生成的 provider 模块。"""

    monkeypatch.syspath_prepend(str(tmp_path))
    imported: list[str] = []

    def _import(package_name: str):
        importlib.invalidate_caches()
        imported.append(package_name)
        return importlib.import_module(f"{package_name}.provider")

    yield _import

    for module_name in list(sys.modules):
        if module_name.split(".")[0] in imported:
            del sys.modules[module_name]
