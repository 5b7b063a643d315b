"""Terminal rendering of heatmaps."""

from layerheat.monitor.renderer import HeatMapRenderer

__all__ = ["HeatMapRenderer"]
