"""Shared test fixtures for layerheat."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from layerheat.models.heatmap import HeatMapLayer, HeatMapTenant, HeatMapTimeline
from layerheat.models.layers import LayerFileMetadata, LayerName

TIMELINE_A = "a" * 32
TIMELINE_B = "b" * 32

ACCESS_TIME = datetime(2024, 3, 1, 12, 30, 45, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Heatmap factories shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_layer() -> Callable[..., HeatMapLayer]:
    """Factory fixture: build a HeatMapLayer with a unique name per call."""
    counter = itertools.count(1)

    def _factory(
        file_size: int = 8192,
        cold: bool = False,
        **overrides: Any,
    ) -> HeatMapLayer:
        n = next(counter)
        defaults: dict[str, Any] = {
            "name": LayerName.image(key_start=n * 0x1000, key_end=(n + 1) * 0x1000, lsn=0x16B5A50 + n),
            "metadata": LayerFileMetadata(file_size=file_size),
            "access_time": ACCESS_TIME,
            "cold": cold,
        }
        defaults.update(overrides)
        return HeatMapLayer(**defaults)

    return _factory


@pytest.fixture
def make_timeline(
    make_layer: Callable[..., HeatMapLayer],
) -> Callable[..., HeatMapTimeline]:
    """Factory fixture: a timeline whose layers are given as (size, cold) pairs."""

    def _factory(
        timeline_id: str = TIMELINE_A,
        layers: list[tuple[int, bool]] | None = None,
    ) -> HeatMapTimeline:
        specs = layers if layers is not None else [(8192, False)]
        return HeatMapTimeline(
            timeline_id=timeline_id,
            layers=[make_layer(file_size=size, cold=cold) for size, cold in specs],
        )

    return _factory


@pytest.fixture
def sample_tenant(make_timeline: Callable[..., HeatMapTimeline]) -> HeatMapTenant:
    """Two timelines: A has hot 100 and 200 plus cold 50, B has hot 300."""
    return HeatMapTenant(
        generation=7,
        timelines=[
            make_timeline(TIMELINE_A, [(100, False), (200, False), (50, True)]),
            make_timeline(TIMELINE_B, [(300, False)]),
        ],
        upload_period_ms=60_000,
    )
