"""Wire encoding of heatmaps, plus a canonical digest for comparing them.

The encoded form is UTF-8 JSON.  Decoding is tolerant of fields added after
the first heatmap version (``upload_period_ms``, ``cold``) being absent, and
strict about everything else.
"""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Any

from pydantic import ValidationError

from layerheat.models.heatmap import HeatMapTenant

logger = logging.getLogger(__name__)


class HeatMapDecodeError(ValueError):
    """Raised when bytes cannot be decoded into a heatmap.

    ``errors`` carries the validation error list, each entry with a ``loc``
    pointing at the bad field (an empty ``loc`` when the payload is not JSON).
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


def encode_heatmap(tenant: HeatMapTenant) -> bytes:
    """Serialize a heatmap to its JSON wire form."""
    return tenant.model_dump_json().encode("utf-8")


def decode_heatmap(data: bytes | str) -> HeatMapTenant:
    """Parse a heatmap from its JSON wire form.

    Raises
    ------
    HeatMapDecodeError
        If the payload is not JSON, or a required field is missing or has
        the wrong shape.
    """
    try:
        tenant = HeatMapTenant.model_validate_json(data)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        logger.debug("Heatmap decode failed with %d error(s)", len(errors))
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise HeatMapDecodeError(
            f"Invalid heatmap: {first.get('msg', 'unknown error')}"
            + (f" at {location}" if location else ""),
            errors=errors,
        ) from exc
    logger.debug(
        "Decoded heatmap generation=%d with %d timeline(s)",
        tenant.generation,
        len(tenant.timelines),
    )
    return tenant


def canonical_json_bytes(obj: Any) -> bytes:
    """Deterministic JSON bytes: sorted keys, compact separators, ASCII only."""
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")


def heatmap_digest(tenant: HeatMapTenant, *, ignore_atimes: bool = True) -> str:
    """Content address of a heatmap, ``"sha256:<hex>"``.

    By default access times are stripped first, so two heatmaps listing the
    same layers in the same state hash equally regardless of when they were
    captured.
    """
    if ignore_atimes:
        tenant = tenant.strip_atimes()
    payload = canonical_json_bytes(tenant.model_dump(mode="json"))
    return f"sha256:{hashlib.sha256(payload).hexdigest()}"
