"""Detection of producer bugs in a heatmap.

The models accept duplicate timeline ids and duplicate layer names as-is
(``HeatMapTenant.into_timelines_index`` keeps the last timeline for a
repeated id).  This module only reports such anomalies; it never rewrites
the heatmap.
"""

from __future__ import annotations

import logging
from collections import Counter
from enum import Enum

from pydantic import BaseModel, ConfigDict

from layerheat.models.heatmap import HeatMapTenant

logger = logging.getLogger(__name__)


class AnomalyKind(str, Enum):
    DUPLICATE_TIMELINE = "duplicate_timeline"
    DUPLICATE_LAYER = "duplicate_layer"


class HeatMapAnomaly(BaseModel):
    """A single problem found in a heatmap."""

    model_config = ConfigDict(frozen=True)

    kind: AnomalyKind
    timeline_id: str
    detail: str


def find_anomalies(tenant: HeatMapTenant) -> list[HeatMapAnomaly]:
    """Report repeated timeline ids and repeated layer names within a timeline."""
    anomalies: list[HeatMapAnomaly] = []

    timeline_counts = Counter(timeline.timeline_id for timeline in tenant.timelines)
    for timeline_id, count in timeline_counts.items():
        if count > 1:
            anomalies.append(
                HeatMapAnomaly(
                    kind=AnomalyKind.DUPLICATE_TIMELINE,
                    timeline_id=timeline_id,
                    detail=f"appears {count} times; the last occurrence is used",
                )
            )

    for timeline in tenant.timelines:
        name_counts = Counter(layer.name for layer in timeline.layers)
        for name, count in name_counts.items():
            if count > 1:
                anomalies.append(
                    HeatMapAnomaly(
                        kind=AnomalyKind.DUPLICATE_LAYER,
                        timeline_id=timeline.timeline_id,
                        detail=f"layer {name} listed {count} times",
                    )
                )

    if anomalies:
        logger.warning(
            "Heatmap generation=%d has %d anomal%s",
            tenant.generation,
            len(anomalies),
            "y" if len(anomalies) == 1 else "ies",
        )
    return anomalies
