"""Heatmap models: what an attached location publishes for its secondaries.

A heatmap lists, per timeline, the layer files the attached location has
resident, when each was last accessed, and whether it is worth keeping warm.
Secondary locations download it to decide which layers to mirror.  All
models are frozen; the transformations below return new values.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    StrictBool,
    field_serializer,
    field_validator,
)

from layerheat.models.ids import Generation, TimelineId
from layerheat.models.layers import LayerFileMetadata, LayerName

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Object-store key of a tenant's heatmap, relative to the tenant prefix.
HEATMAP_FILENAME = "heatmap-v1.json"


class HeatMapLayer(BaseModel):
    """One layer file on the attached location."""

    model_config = ConfigDict(frozen=True)

    name: LayerName
    metadata: LayerFileMetadata
    access_time: datetime
    # Binary for now; secondaries mirror every hot layer rather than
    # prioritising by degree of heat.
    cold: StrictBool = False

    @field_validator("access_time", mode="before")
    @classmethod
    def _to_utc_seconds(cls, value: Any) -> datetime:
        """Accept epoch seconds (wire form) or a datetime, truncated to whole seconds."""
        if isinstance(value, bool):
            raise ValueError("access_time must be epoch seconds or a datetime")
        if isinstance(value, int):
            try:
                return UNIX_EPOCH + timedelta(seconds=value)
            except OverflowError as exc:
                raise ValueError(f"access_time out of range: {value}") from exc
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            return value.astimezone(timezone.utc).replace(microsecond=0)
        raise ValueError("access_time must be epoch seconds or a datetime")

    @field_serializer("access_time")
    def _to_epoch_seconds(self, value: datetime) -> int:
        return (value - UNIX_EPOCH) // timedelta(seconds=1)


def _is_hot(layer: HeatMapLayer) -> bool:
    return not layer.cold


class LayerView:
    """Lazy, restartable view over a timeline's layers.

    Every ``iter()`` starts again from the first layer, so a view can be
    walked more than once.  Storage order is preserved.
    """

    __slots__ = ("_layers", "_predicate")

    def __init__(
        self,
        layers: Sequence[HeatMapLayer],
        predicate: Callable[[HeatMapLayer], bool] | None = None,
    ) -> None:
        self._layers = layers
        self._predicate = predicate

    def __iter__(self) -> Iterator[HeatMapLayer]:
        if self._predicate is None:
            return iter(self._layers)
        return filter(self._predicate, self._layers)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"LayerView({list(self)!r})"


class HeatMapTimeline(BaseModel):
    """Layers of a single timeline, in the order the producer listed them."""

    model_config = ConfigDict(frozen=True)

    timeline_id: TimelineId
    layers: list[HeatMapLayer]

    def all_layers(self) -> LayerView:
        return LayerView(self.layers)

    def hot_layers(self) -> LayerView:
        """Hot layers, read through this timeline."""
        return LayerView(self.layers, _is_hot)

    def into_hot_layers(self) -> LayerView:
        """Hot layers, detached from this timeline.

        The returned view holds its own sequence of the (immutable) layer
        objects, so the timeline can be dropped while the layers are passed
        on.
        """
        return LayerView(tuple(self.layers), _is_hot)


class HeatMapStats(BaseModel):
    """Totals over the hot layers of a heatmap."""

    model_config = ConfigDict(frozen=True)

    bytes: int = 0
    layers: int = 0


class HeatMapTenant(BaseModel):
    """The heatmap of one tenant, as uploaded by its attached location."""

    model_config = ConfigDict(frozen=True)

    # Generation of the attached location that uploaded the heatmap.  Not
    # needed for correctness: secondaries use it to notice two attached
    # locations uploading conflicting heatmaps.
    generation: Generation

    timelines: list[HeatMapTimeline]

    # How often the uploader intends to republish, as a hint to downloaders.
    # None when no periodic upload is configured (e.g. a one-off upload via
    # the API) and for heatmaps written before the field existed.
    upload_period_ms: Annotated[int, Strict(), Field(ge=0, le=(1 << 128) - 1)] | None = None

    def into_timelines_index(self) -> dict[str, HeatMapTimeline]:
        """Index timelines by id.  If an id repeats, the last one wins."""
        return {timeline.timeline_id: timeline for timeline in self.timelines}

    def get_stats(self) -> HeatMapStats:
        layers = 0
        total_bytes = 0
        for timeline in self.timelines:
            for layer in timeline.hot_layers():
                layers += 1
                total_bytes += layer.metadata.file_size
        return HeatMapStats(bytes=total_bytes, layers=layers)

    def strip_atimes(self) -> HeatMapTenant:
        """Return a copy with every access time reset to the epoch.

        Makes heatmaps captured at different times comparable by content.
        """
        return self.model_copy(
            update={
                "timelines": [
                    timeline.model_copy(
                        update={
                            "layers": [
                                layer.model_copy(update={"access_time": UNIX_EPOCH})
                                for layer in timeline.layers
                            ]
                        }
                    )
                    for timeline in self.timelines
                ]
            }
        )
