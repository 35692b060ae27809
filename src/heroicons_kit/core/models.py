"""核心数据模型定义。"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping


@dataclass(slots=True)
class GenerationResult:
    """一次生成任务的产出。"""

    icon_paths: Mapping[str, str]
    missing: list[str]
    icons_dir: Path
    provider_path: Path

    def __post_init__(self) -> None:
        # 查找表生成后不再修改
        self.icon_paths = MappingProxyType(dict(self.icon_paths))

    @property
    def has_missing(self) -> bool:
        return bool(self.missing)
