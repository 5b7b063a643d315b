"""Rich terminal renderer for heatmaps.

Color scheme
------------
- red    : hot layer
- blue   : cold layer
- dim    : access time at the epoch (stripped)
"""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from layerheat.models.heatmap import UNIX_EPOCH, HeatMapTenant

_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def format_bytes(size: int) -> str:
    """Human-readable size with binary units, e.g. ``1.5 GiB``."""
    value = float(size)
    for unit in _UNITS[:-1]:
        if value < 1024:
            return f"{size} B" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} {_UNITS[-1]}"


class HeatMapRenderer:
    """Renders a ``HeatMapTenant`` as Rich terminal output.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_stats(self, tenant: HeatMapTenant) -> Panel:
        stats = tenant.get_stats()
        total_layers = sum(len(timeline.all_layers()) for timeline in tenant.timelines)
        period = (
            f"{tenant.upload_period_ms} ms"
            if tenant.upload_period_ms is not None
            else "[dim]not scheduled[/dim]"
        )
        summary = "  |  ".join(
            [
                f"[bold]Generation:[/bold] {tenant.generation}",
                f"[bold]Timelines:[/bold] {len(tenant.timelines)}",
                f"[bold]Hot layers:[/bold] {stats.layers}/{total_layers}",
                f"[bold]Hot bytes:[/bold] {format_bytes(stats.bytes)}",
                f"[bold]Upload period:[/bold] {period}",
            ]
        )
        return Panel(
            Text.from_markup(summary),
            title="[bold]Heatmap[/bold]",
            border_style="blue",
            padding=(0, 2),
        )

    def render_timelines(self, tenant: HeatMapTenant, *, hot_only: bool = False) -> Table:
        table = Table(show_header=True, header_style="bold cyan", expand=True)
        table.add_column("Timeline", no_wrap=True)
        table.add_column("Layer", overflow="fold")
        table.add_column("Size", justify="right", width=12)
        table.add_column("Accessed", width=20)
        table.add_column("Heat", justify="center", width=6)

        for timeline in tenant.timelines:
            layers = timeline.hot_layers() if hot_only else timeline.all_layers()
            for layer in layers:
                if layer.access_time == UNIX_EPOCH:
                    accessed = "[dim]-[/dim]"
                else:
                    accessed = layer.access_time.strftime("%Y-%m-%d %H:%M:%S")
                heat = "[blue]cold[/blue]" if layer.cold else "[red]hot[/red]"
                table.add_row(
                    timeline.timeline_id,
                    str(layer.name),
                    format_bytes(layer.metadata.file_size),
                    accessed,
                    heat,
                )
        return table

    def print_heatmap(self, tenant: HeatMapTenant, *, hot_only: bool = False) -> None:
        self.console.print(
            Group(self.render_stats(tenant), self.render_timelines(tenant, hot_only=hot_only))
        )
