"""Layerheat: heatmaps that attached locations publish for secondary locations.

A heatmap lists a tenant's resident layer files per timeline, with their
access times and a hot/cold flag, so secondaries know what to mirror.
"""

__version__ = "0.1.0"

from layerheat.core.codec import HeatMapDecodeError, decode_heatmap, encode_heatmap
from layerheat.models.heatmap import HeatMapLayer, HeatMapStats, HeatMapTenant, HeatMapTimeline

__all__ = [
    "HeatMapDecodeError",
    "HeatMapLayer",
    "HeatMapStats",
    "HeatMapTenant",
    "HeatMapTimeline",
    "decode_heatmap",
    "encode_heatmap",
    "__version__",
]
