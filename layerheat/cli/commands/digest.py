"""``layerheat digest PATH`` — content address of a heatmap."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from layerheat.cli.commands._loading import load_heatmap
from layerheat.core.codec import heatmap_digest

console = Console()


def digest_cmd(
    path: Path = typer.Argument(..., help="Heatmap file, or a tenant directory containing one."),
    with_atimes: bool = typer.Option(
        False,
        "--with-atimes",
        help="Include access times in the digest.",
    ),
) -> None:
    """Print the SHA-256 content address of a heatmap.

    Access times are ignored unless --with-atimes is given, so two captures
    of the same layers print the same digest.
    """
    tenant = load_heatmap(path, console)
    typer.echo(heatmap_digest(tenant, ignore_atimes=not with_atimes))
