"""``layerheat stats PATH`` — totals over a heatmap's hot layers."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from layerheat.cli.commands._loading import load_heatmap
from layerheat.monitor.renderer import HeatMapRenderer

console = Console()


def stats_cmd(
    path: Path = typer.Argument(..., help="Heatmap file, or a tenant directory containing one."),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the totals as JSON instead of a panel.",
    ),
) -> None:
    """Count hot layers and their bytes; cold layers are excluded."""
    tenant = load_heatmap(path, console)
    if as_json:
        typer.echo(tenant.get_stats().model_dump_json())
        return
    console.print(HeatMapRenderer(console=console).render_stats(tenant))
