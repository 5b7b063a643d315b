"""Layer file names and per-layer metadata as they appear in a heatmap."""

from __future__ import annotations

import re
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

from layerheat.models.ids import Generation, ShardIndex

KEY_HEX_DIGITS = 36  # 18-byte keys
LSN_HEX_DIGITS = 16

MAX_KEY = (1 << (KEY_HEX_DIGITS * 4)) - 1
MAX_LSN = (1 << 64) - 1

_LAYER_NAME_RE = re.compile(
    r"^(?P<key_start>[0-9A-Fa-f]{36})-(?P<key_end>[0-9A-Fa-f]{36})"
    r"__(?P<lsn_start>[0-9A-Fa-f]{16})(?:-(?P<lsn_end>[0-9A-Fa-f]{16}))?$"
)


class LayerName(BaseModel):
    """Parsed name of a layer file.

    Image layers cover a key range at a single LSN and are named
    ``{key_start}-{key_end}__{lsn}``.  Delta layers cover a key range over
    an LSN range and are named ``{key_start}-{key_end}__{lsn_start}-{lsn_end}``.
    The file name itself is the wire form.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["image", "delta"]
    key_start: int = Field(ge=0, le=MAX_KEY)
    key_end: int = Field(ge=0, le=MAX_KEY)
    lsn_start: int = Field(ge=0, le=MAX_LSN)
    lsn_end: int = Field(ge=0, le=MAX_LSN + 1)

    @classmethod
    def image(cls, key_start: int, key_end: int, lsn: int) -> LayerName:
        return cls(kind="image", key_start=key_start, key_end=key_end, lsn_start=lsn, lsn_end=lsn + 1)

    @classmethod
    def delta(cls, key_start: int, key_end: int, lsn_start: int, lsn_end: int) -> LayerName:
        return cls(
            kind="delta", key_start=key_start, key_end=key_end, lsn_start=lsn_start, lsn_end=lsn_end
        )

    @classmethod
    def parse(cls, file_name: str) -> LayerName:
        return cls.model_validate(file_name)

    @property
    def is_delta(self) -> bool:
        return self.kind == "delta"

    @model_validator(mode="before")
    @classmethod
    def _parse_file_name(cls, data: Any) -> Any:
        if not isinstance(data, str):
            return data
        match = _LAYER_NAME_RE.match(data)
        if match is None:
            raise ValueError(f"not a layer file name: {data!r}")
        lsn_start = int(match["lsn_start"], 16)
        if match["lsn_end"] is None:
            kind, lsn_end = "image", lsn_start + 1
        else:
            kind, lsn_end = "delta", int(match["lsn_end"], 16)
        return {
            "kind": kind,
            "key_start": int(match["key_start"], 16),
            "key_end": int(match["key_end"], 16),
            "lsn_start": lsn_start,
            "lsn_end": lsn_end,
        }

    @model_validator(mode="after")
    def _check_lsn_range(self) -> LayerName:
        if self.kind == "image" and self.lsn_end != self.lsn_start + 1:
            raise ValueError("image layer must cover exactly one LSN")
        if self.kind == "delta" and self.lsn_start >= self.lsn_end:
            raise ValueError(
                f"delta layer LSN range is empty: {self.lsn_start:X}..{self.lsn_end:X}"
            )
        return self

    @model_serializer(mode="plain")
    def _to_file_name(self) -> str:
        return str(self)

    def __str__(self) -> str:
        keys = f"{self.key_start:036X}-{self.key_end:036X}"
        if self.kind == "image":
            return f"{keys}__{self.lsn_start:016X}"
        return f"{keys}__{self.lsn_start:016X}-{self.lsn_end:016X}"


class LayerFileMetadata(BaseModel):
    """Size and ownership of a layer file in remote storage.

    ``generation`` and ``shard`` are left out of the encoded form when they
    hold their defaults, so metadata written by unsharded, pre-generation
    producers keeps its original shape.
    """

    model_config = ConfigDict(frozen=True)

    file_size: int = Field(strict=True, ge=0, le=(1 << 64) - 1)
    generation: Generation | None = None
    shard: ShardIndex = Field(default_factory=ShardIndex.unsharded)

    @model_serializer(mode="wrap")
    def _omit_defaults(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if self.generation is None:
            data.pop("generation", None)
        if self.shard.is_unsharded:
            data.pop("shard", None)
        return data
