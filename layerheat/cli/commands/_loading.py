"""Reading heatmap files for CLI commands, with user-facing error reporting."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from layerheat.config import config
from layerheat.core.codec import HeatMapDecodeError, decode_heatmap
from layerheat.models.heatmap import HeatMapTenant


def resolve_heatmap_path(path: Path) -> Path:
    """A tenant directory resolves to the heatmap file inside it."""
    if path.is_dir():
        return path / config.heatmap_filename
    return path


def load_heatmap(path: Path, console: Console) -> HeatMapTenant:
    """Read and decode a heatmap, exiting with code 1 on any failure."""
    file_path = resolve_heatmap_path(path)
    if not file_path.is_file():
        console.print(f"[bold red]Heatmap not found:[/bold red] {file_path}")
        raise typer.Exit(code=1)
    try:
        return decode_heatmap(file_path.read_bytes())
    except HeatMapDecodeError as exc:
        console.print(f"[bold red]Cannot decode {file_path}:[/bold red] {exc}")
        for error in exc.errors[1:]:
            location = ".".join(str(part) for part in error["loc"])
            console.print(f"  [dim]{location or '<root>'}:[/dim] {error['msg']}")
        raise typer.Exit(code=1) from exc
