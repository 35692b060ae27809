"""生成流程：解析图标路径、复制图标并输出 provider 模块。"""

from __future__ import annotations

import keyword
import logging

from heroicons_kit.core.catalog import resolve_icon_path
from heroicons_kit.core.config import DEFAULT_MISSING_ICON_SVG, GeneratorConfig
from heroicons_kit.core.exceptions import InvalidConfigurationError
from heroicons_kit.core.models import GenerationResult
from heroicons_kit.core.output_manager import OutputManager
from heroicons_kit.generation.templates import render_provider_source

LOGGER = logging.getLogger(__name__)


def generate(config: GeneratorConfig) -> GenerationResult:
    """生成入口：复制所需图标、写入缺省图标并生成 provider.py。

    单个图标缺失不会中断流程，只记录在结果的 missing 中；
    输出目录、缺省图标或 provider 写入失败时抛出 GenerationError。
    """

    # provider 通过 __package__ 读取资源，输出目录本身必须可导入
    _check_package_name(config.package_name, "包名")
    _check_package_name(config.output_path.resolve().name, "输出目录名")

    missing_svg = config.missing_icon_svg or DEFAULT_MISSING_ICON_SVG

    output_manager = OutputManager(config.output_path)
    output_manager.write_missing_icon(missing_svg)
    LOGGER.debug("缺省图标已写入 %s", output_manager.icons_dir)

    icon_paths: dict[str, str] = {}
    missing: list[str] = []

    for icon in config.icons:
        source = resolve_icon_path(config.heroicons_path, icon)
        try:
            output_manager.copy_icon(source, icon.filename)
        except OSError as exc:
            LOGGER.debug("复制图标失败 %s: %s", source, exc)
            missing.append(icon.key)
            continue
        icon_paths[icon.key] = icon.filename

    source_code = render_provider_source(config.package_name, icon_paths, config.fail_on_error)
    provider_path = output_manager.write_provider(source_code, config.package_name)
    LOGGER.info("已生成 %s，包含 %d 个图标", provider_path, len(icon_paths))

    if missing:
        LOGGER.info("以下图标未找到，无法复制：\n%s", "\n".join(missing))

    return GenerationResult(
        icon_paths=icon_paths,
        missing=missing,
        icons_dir=output_manager.icons_dir,
        provider_path=provider_path,
    )


def _check_package_name(name: str, label: str) -> None:
    if not name.isidentifier() or keyword.iskeyword(name):
        raise InvalidConfigurationError(f"{label}不是合法的 Python 包名: {name!r}")
