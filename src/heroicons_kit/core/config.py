"""生成任务的配置模型。"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from heroicons_kit.core.exceptions import InvalidConfigurationError

DEFAULT_MISSING_ICON_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="#fb2c36">'
    '<path d="M17.5 2.5L23 12L17.5 21.5H6.5L1 12L6.5 2.5H17.5ZM11 15V17H13V15H11ZM11 7V13H13V7H11Z"></path>'
    "</svg>"
)


class IconType(str, Enum):
    """Heroicons 的四种图标风格。"""

    OUTLINE = "outline"  # 24px 线框
    SOLID = "solid"  # 24px 实心
    MINI = "mini"  # 20px 实心
    MICRO = "micro"  # 16px 实心

    @property
    def catalog_dir(self) -> str:
        """图标库中对应的 `<尺寸>/<风格>` 子目录。"""

        return _CATALOG_DIRS[self]


_CATALOG_DIRS = {
    IconType.OUTLINE: "24/outline",
    IconType.SOLID: "24/solid",
    IconType.MINI: "20/solid",
    IconType.MICRO: "16/solid",
}


def icon_key(name: str, icon_type: IconType | str) -> str:
    """返回查找表使用的复合键 `type/name`。"""

    return f"{IconType(icon_type).value}/{name}"


@dataclass(slots=True, frozen=True)
class IconSet:
    """需要纳入项目的单个图标。"""

    name: str
    icon_type: IconType

    def __post_init__(self) -> None:
        # 允许直接传入 "outline" 这类字符串
        object.__setattr__(self, "icon_type", IconType(self.icon_type))

    @property
    def key(self) -> str:
        return icon_key(self.name, self.icon_type)

    @property
    def filename(self) -> str:
        """输出目录中的文件名，例如 `outline_home.svg`。"""

        return f"{self.icon_type.value}_{self.name}.svg"


@dataclass(slots=True)
class GeneratorConfig:
    """单次生成任务的配置集合。"""

    heroicons_path: Path
    output_path: Path
    package_name: str = "icons"
    icons: Sequence[IconSet] = field(default_factory=tuple)
    fail_on_error: bool = False
    missing_icon_svg: Optional[str] = None


def parse_icon_set(value: str) -> IconSet:
    """将 `outline/home` 形式的字符串解析为 IconSet。"""

    type_part, sep, name = value.strip().partition("/")
    if not sep or not name or "/" in name:
        raise InvalidConfigurationError(f"图标必须形如 type/name: {value!r}")
    try:
        icon_type = IconType(type_part)
    except ValueError as exc:
        choices = ", ".join(t.value for t in IconType)
        raise InvalidConfigurationError(f"未知的图标类型 {type_part!r}，可选值: {choices}") from exc
    return IconSet(name=name, icon_type=icon_type)


def load_icon_list(path: Path) -> list[IconSet]:
    """读取图标清单文件，每行一个 `type/name`，支持 `#` 注释。"""

    icons: list[IconSet] = []
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise InvalidConfigurationError(f"无法读取图标清单: {path}") from exc

    for line in lines:
        content = line.split("#", 1)[0].strip()
        if not content:
            continue
        icons.append(parse_icon_set(content))
    return icons
