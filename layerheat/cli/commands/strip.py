"""``layerheat strip-atimes PATH`` — write a heatmap with access times zeroed."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from layerheat.cli.commands._loading import load_heatmap
from layerheat.core.codec import encode_heatmap

logger = logging.getLogger(__name__)

console = Console()


def strip_atimes_cmd(
    path: Path = typer.Argument(..., help="Heatmap file, or a tenant directory containing one."),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the result here instead of standard output.",
    ),
) -> None:
    """Reset every layer's access time to the epoch.

    The result compares equal to any other capture of the same layers,
    whenever it was taken.
    """
    tenant = load_heatmap(path, console).strip_atimes()
    data = encode_heatmap(tenant)
    if output is None:
        typer.echo(data.decode("utf-8"))
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(data)
    logger.info("Wrote stripped heatmap to %s (%d bytes)", output, len(data))
    console.print(f"[green]Wrote[/green] {output}")
