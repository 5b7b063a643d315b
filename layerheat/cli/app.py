"""Main Typer application — imports and registers all CLI commands.

Entry point: ``layerheat`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer

from layerheat.cli.commands.check import check_cmd
from layerheat.cli.commands.digest import digest_cmd
from layerheat.cli.commands.show import show_cmd
from layerheat.cli.commands.stats import stats_cmd
from layerheat.cli.commands.strip import strip_atimes_cmd
from layerheat.config import config

app = typer.Typer(
    name="layerheat",
    help="Layerheat: inspect the heatmaps attached locations publish for their secondaries.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="show", help="Show a heatmap and its layers.")(show_cmd)
app.command(name="stats", help="Totals over the hot layers.")(stats_cmd)
app.command(name="strip-atimes", help="Zero every layer's access time.")(strip_atimes_cmd)
app.command(name="check", help="Report duplicate timelines and layers.")(check_cmd)
app.command(name="digest", help="Print the content address of a heatmap.")(digest_cmd)


@app.callback()
def configure(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: LAYERHEAT_LOG_LEVEL or INFO).",
    ),
) -> None:
    """Layerheat: inspect heatmap files."""
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
