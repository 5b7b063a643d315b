"""``layerheat check PATH`` — report duplicate timelines and layers."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from layerheat.cli.commands._loading import load_heatmap
from layerheat.config import config
from layerheat.core.checks import find_anomalies

console = Console()


def check_cmd(
    path: Path = typer.Argument(..., help="Heatmap file, or a tenant directory containing one."),
    strict: bool = typer.Option(
        None,
        "--strict/--no-strict",
        help="Exit with code 1 when anomalies are found (default: LAYERHEAT_STRICT_CHECKS).",
    ),
) -> None:
    """Check a heatmap for duplicates its producer should never emit."""
    if strict is None:
        strict = config.strict_checks

    tenant = load_heatmap(path, console)
    anomalies = find_anomalies(tenant)
    if not anomalies:
        console.print("[green]No anomalies found.[/green]")
        return

    table = Table(title="Heatmap anomalies", header_style="bold cyan")
    table.add_column("Kind", style="yellow")
    table.add_column("Timeline", no_wrap=True)
    table.add_column("Detail", overflow="fold")
    for anomaly in anomalies:
        table.add_row(anomaly.kind.value, anomaly.timeline_id, anomaly.detail)
    console.print(table)

    if strict:
        raise typer.Exit(code=1)
