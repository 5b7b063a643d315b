"""Layerheat data models — all Pydantic v2, all frozen (immutable)."""

from layerheat.models.heatmap import (
    HEATMAP_FILENAME,
    UNIX_EPOCH,
    HeatMapLayer,
    HeatMapStats,
    HeatMapTenant,
    HeatMapTimeline,
    LayerView,
)
from layerheat.models.ids import Generation, ShardIndex, TimelineId, new_timeline_id
from layerheat.models.layers import LayerFileMetadata, LayerName

__all__ = [
    # ids
    "Generation",
    "ShardIndex",
    "TimelineId",
    "new_timeline_id",
    # layers
    "LayerFileMetadata",
    "LayerName",
    # heatmap
    "HEATMAP_FILENAME",
    "UNIX_EPOCH",
    "HeatMapLayer",
    "HeatMapStats",
    "HeatMapTenant",
    "HeatMapTimeline",
    "LayerView",
]
