"""输出目录写入模块。"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from heroicons_kit.core.exceptions import GenerationError

LOGGER = logging.getLogger(__name__)

ICONS_DIRNAME = "icons"
MISSING_ICON_FILENAME = "missing.svg"
PROVIDER_FILENAME = "provider.py"
PACKAGE_INIT_FILENAME = "__init__.py"


class OutputManager:
    """负责输出目录的创建与各类文件的写入。"""

    def __init__(self, output_path: Path) -> None:
        self.output_dir = output_path.resolve()
        self.icons_dir = self.output_dir / ICONS_DIRNAME
        try:
            self.icons_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise GenerationError(f"无法创建输出目录: {self.icons_dir}") from exc

    def write_missing_icon(self, svg: str) -> Path:
        """写入缺省图标，覆盖已有内容。"""

        destination = self.icons_dir / MISSING_ICON_FILENAME
        try:
            destination.write_bytes(svg.encode("utf-8"))
        except OSError as exc:
            raise GenerationError(f"写入缺省图标失败: {destination}") from exc
        return destination

    def copy_icon(self, source: Path, filename: str) -> Path:
        """按字节复制单个图标，失败时抛出 OSError 交由调用方记录。"""

        destination = self.icons_dir / filename
        shutil.copyfile(source, destination)
        return destination

    def write_provider(self, source_code: str, package_name: str) -> Path:
        """写入生成的 provider 模块，并确保输出目录是一个可导入的包。"""

        destination = self.output_dir / PROVIDER_FILENAME
        try:
            destination.write_text(source_code, encoding="utf-8")
            self._ensure_package_init(package_name)
        except OSError as exc:
            raise GenerationError(f"写入 provider 失败: {destination}") from exc
        return destination

    def _ensure_package_init(self, package_name: str) -> None:
        init_path = self.output_dir / PACKAGE_INIT_FILENAME
        if init_path.exists():
            return
        LOGGER.debug("创建包初始化文件：%s", init_path)
        init_path.write_text(f'"""{package_name}: generated Heroicons subset."""\n', encoding="utf-8")
