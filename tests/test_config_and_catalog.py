"""配置解析与图标库路径约定测试。"""

from __future__ import annotations

from pathlib import Path

import pytest

from heroicons_kit.core.catalog import resolve_icon_path
from heroicons_kit.core.config import IconSet, IconType, icon_key, load_icon_list, parse_icon_set
from heroicons_kit.core.exceptions import InvalidConfigurationError


@pytest.mark.parametrize(
    ("icon_type", "expected"),
    [
        (IconType.OUTLINE, "optimized/24/outline/home.svg"),
        (IconType.SOLID, "optimized/24/solid/home.svg"),
        (IconType.MINI, "optimized/20/solid/home.svg"),
        (IconType.MICRO, "optimized/16/solid/home.svg"),
    ],
)
def test_resolve_icon_path_follows_catalog_layout(icon_type: IconType, expected: str) -> None:
    root = Path("/catalog")

    path = resolve_icon_path(root, IconSet(name="home", icon_type=icon_type))

    assert path == root / expected


def test_icon_set_key_and_filename() -> None:
    icon = IconSet(name="arrow-left", icon_type=IconType.MINI)

    assert icon.key == "mini/arrow-left"
    assert icon.filename == "mini_arrow-left.svg"


def test_icon_set_accepts_plain_string_type() -> None:
    icon = IconSet(name="home", icon_type="outline")

    assert icon.icon_type is IconType.OUTLINE
    assert icon_key("home", "outline") == icon.key


def test_parse_icon_set() -> None:
    assert parse_icon_set(" micro/check ") == IconSet(name="check", icon_type=IconType.MICRO)


@pytest.mark.parametrize("value", ["home", "outline/", "tiny/home", "outline/a/b"])
def test_parse_icon_set_rejects_invalid_values(value: str) -> None:
    with pytest.raises(InvalidConfigurationError):
        parse_icon_set(value)


def test_load_icon_list_skips_comments_and_blank_lines(tmp_path: Path) -> None:
    manifest = tmp_path / "icons.txt"
    manifest.write_text("# 导航\noutline/home\n\nsolid/user  # 头像\nsolid/user\n", encoding="utf-8")

    icons = load_icon_list(manifest)

    # 重复项原样保留，由生成阶段处理
    assert [icon.key for icon in icons] == ["outline/home", "solid/user", "solid/user"]


def test_load_icon_list_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InvalidConfigurationError):
        load_icon_list(tmp_path / "nope.txt")
