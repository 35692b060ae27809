"""命令行入口。"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from heroicons_kit.core.config import GeneratorConfig, IconSet, load_icon_list, parse_icon_set
from heroicons_kit.core.exceptions import HeroiconsError, InvalidConfigurationError
from heroicons_kit.core.models import GenerationResult
from heroicons_kit.generation.generator import generate
from heroicons_kit.utils.logging import setup_logging

app = typer.Typer(help="从 Heroicons 图标库挑选图标并生成 Python provider 模块。")


@app.callback()
def main() -> None:
    """heroicons-kit 命令集合。"""


def _collect_icons(icon: Optional[List[str]], icons_file: Optional[Path]) -> list[IconSet]:
    try:
        icons = load_icon_list(icons_file) if icons_file else []
        icons.extend(parse_icon_set(value) for value in icon or [])
    except InvalidConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return icons


def _read_missing_icon(path: Optional[Path]) -> Optional[str]:
    if path is None:
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"无法读取缺省图标文件: {path}") from exc


def _print_summary(console: Console, result: GenerationResult) -> None:
    console.print(f"已复制 {len(result.icon_paths)} 个图标，provider：{result.provider_path}")
    if not result.has_missing:
        return

    table = Table(title="未找到的图标")
    table.add_column("key", style="red")
    for key in result.missing:
        table.add_row(key)
    console.print(table)


@app.command("generate")
def generate_cli(  # noqa: PLR0913
    heroicons_path: Path = typer.Argument(..., help="Heroicons 仓库根目录"),
    output: Path = typer.Option(..., "--output", "-o", help="输出目录（生成的包）"),
    package_name: Optional[str] = typer.Option(None, "--package", "-p", help="生成的包名，默认取输出目录名"),
    icon: Optional[List[str]] = typer.Option(None, "--icon", "-i", help="图标，形如 outline/home，可指定多个"),
    icons_file: Optional[Path] = typer.Option(None, "--icons-file", help="图标清单文件，每行一个 type/name"),
    fail_on_error: bool = typer.Option(False, "--fail-on-error", help="运行时缺失图标时抛出异常而不是返回缺省图标"),
    missing_icon: Optional[Path] = typer.Option(None, "--missing-icon", help="自定义缺省图标 SVG 文件"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出调试日志"),
) -> None:
    """复制所选图标并生成 provider.py。"""

    setup_logging(logging.DEBUG if verbose else logging.INFO)

    output_dir = output.expanduser().resolve()
    config = GeneratorConfig(
        heroicons_path=heroicons_path.expanduser().resolve(),
        output_path=output_dir,
        package_name=package_name or output_dir.name,
        icons=_collect_icons(icon, icons_file),
        fail_on_error=fail_on_error,
        missing_icon_svg=_read_missing_icon(missing_icon),
    )

    try:
        result = generate(config)
    except HeroiconsError as exc:
        typer.echo(f"生成失败：{exc}", err=True)
        raise typer.Exit(code=1) from exc

    _print_summary(Console(), result)


if __name__ == "__main__":
    app()
