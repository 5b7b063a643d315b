"""Runtime configuration — env-driven.

Reads from a .env file and LAYERHEAT_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from layerheat.models.heatmap import HEATMAP_FILENAME


class HeatmapConfig(BaseSettings):
    """Settings for the layerheat tools.

    Examples
    --------
    Override via environment::

        export LAYERHEAT_LOG_LEVEL=DEBUG
        export LAYERHEAT_STRICT_CHECKS=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LAYERHEAT_",
        env_file_encoding="utf-8",
    )

    log_level: str = "INFO"

    # File looked up when a command is pointed at a tenant directory
    heatmap_filename: str = HEATMAP_FILENAME

    # Treat duplicate timelines / layers as errors in `layerheat check`
    strict_checks: bool = False


# Module-level singleton, import as `from layerheat.config import config`
config = HeatmapConfig()
