"""Identifiers carried by a heatmap: timelines, generations and shards."""

from __future__ import annotations

import re
import uuid
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    StringConstraints,
    model_serializer,
    model_validator,
)

# 16-byte id, hex encoded on the wire and in object-store paths.
TimelineId = Annotated[
    str,
    StringConstraints(pattern=r"^[0-9a-fA-F]{32}$", to_lower=True),
]

# Attachment generation of the location that produced a heatmap or layer.
# Strict: numeric strings, floats and booleans are not generations.
Generation = Annotated[int, Strict(), Field(ge=0, le=0xFFFFFFFF)]

_SHARD_INDEX_RE = re.compile(r"[0-9a-fA-F]{4}")


def new_timeline_id() -> str:
    """Return a random timeline id in its canonical (lower-case hex) form."""
    return uuid.uuid4().hex


class ShardIndex(BaseModel):
    """Position of a shard within a sharded tenant.

    Encoded as four hex digits, ``{shard_number:02x}{shard_count:02x}``.
    An unsharded tenant has shard count zero and encodes as ``"0000"``.
    """

    model_config = ConfigDict(frozen=True)

    shard_number: int = Field(default=0, ge=0, le=0xFF)
    shard_count: int = Field(default=0, ge=0, le=0xFF)

    @classmethod
    def unsharded(cls) -> ShardIndex:
        return cls(shard_number=0, shard_count=0)

    @property
    def is_unsharded(self) -> bool:
        return self.shard_number == 0 and self.shard_count == 0

    @model_validator(mode="before")
    @classmethod
    def _parse_hex(cls, data: Any) -> Any:
        if isinstance(data, str):
            if _SHARD_INDEX_RE.fullmatch(data) is None:
                raise ValueError(f"shard index must be 4 hex digits, got {data!r}")
            number, count = int(data[:2], 16), int(data[2:], 16)
            return {"shard_number": number, "shard_count": count}
        return data

    @model_serializer(mode="plain")
    def _to_hex(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"{self.shard_number:02x}{self.shard_count:02x}"
