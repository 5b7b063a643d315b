"""``layerheat show PATH`` — print a heatmap's summary and layers."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from layerheat.cli.commands._loading import load_heatmap
from layerheat.monitor.renderer import HeatMapRenderer

console = Console()


def show_cmd(
    path: Path = typer.Argument(..., help="Heatmap file, or a tenant directory containing one."),
    hot_only: bool = typer.Option(
        False,
        "--hot-only",
        "-H",
        help="List only hot layers.",
    ),
) -> None:
    """Show a heatmap: generation, upload period, totals and every layer."""
    tenant = load_heatmap(path, console)
    HeatMapRenderer(console=console).print_heatmap(tenant, hot_only=hot_only)
