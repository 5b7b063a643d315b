"""Tests for layer names and layer file metadata."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from layerheat.models.ids import ShardIndex
from layerheat.models.layers import LayerFileMetadata, LayerName

IMAGE_LAYER_NAME = "0" * 36 + "-" + "F" * 36 + "__00000000016B5A51"
DELTA_LAYER_NAME = "0" * 36 + "-" + "F" * 36 + "__00000000016B59D8-00000000016B5A51"


class TestLayerName:
    def test_parse_image(self):
        name = LayerName.parse(IMAGE_LAYER_NAME)
        assert name.kind == "image"
        assert name.is_delta is False
        assert name.key_start == 0
        assert name.key_end == (1 << 144) - 1
        assert name.lsn_start == 0x16B5A51
        assert name.lsn_end == 0x16B5A52

    def test_parse_delta(self):
        name = LayerName.parse(DELTA_LAYER_NAME)
        assert name.is_delta is True
        assert name.lsn_start == 0x16B59D8
        assert name.lsn_end == 0x16B5A51

    @pytest.mark.parametrize("file_name", [IMAGE_LAYER_NAME, DELTA_LAYER_NAME])
    def test_str_is_file_name(self, file_name: str):
        assert str(LayerName.parse(file_name)) == file_name

    def test_lower_case_hex_accepted(self):
        assert LayerName.parse(IMAGE_LAYER_NAME.lower()) == LayerName.parse(IMAGE_LAYER_NAME)

    def test_image_constructor(self):
        name = LayerName.image(key_start=1, key_end=2, lsn=0x10)
        assert str(name) == f"{1:036X}-{2:036X}__{0x10:016X}"

    def test_delta_constructor(self):
        name = LayerName.delta(key_start=1, key_end=2, lsn_start=0x10, lsn_end=0x20)
        assert str(name).endswith(f"__{0x10:016X}-{0x20:016X}")

    @pytest.mark.parametrize(
        "bad",
        [
            "",
            "not-a-layer",
            "0" * 36 + "-" + "F" * 36,
            "0" * 35 + "-" + "F" * 36 + "__00000000016B5A51",
            IMAGE_LAYER_NAME + ".old",
        ],
    )
    def test_rejects_malformed(self, bad: str):
        with pytest.raises(ValidationError):
            LayerName.parse(bad)

    def test_rejects_empty_delta_range(self):
        with pytest.raises(ValidationError):
            LayerName.parse("0" * 36 + "-" + "F" * 36 + "__0000000000000010-0000000000000010")

    def test_hashable_and_comparable(self):
        a = LayerName.parse(IMAGE_LAYER_NAME)
        b = LayerName.parse(IMAGE_LAYER_NAME)
        assert a == b
        assert len({a, b}) == 1


class TestLayerFileMetadata:
    def test_defaults(self):
        meta = LayerFileMetadata(file_size=10)
        assert meta.generation is None
        assert meta.shard.is_unsharded

    def test_dump_omits_defaults(self):
        assert LayerFileMetadata(file_size=10).model_dump() == {"file_size": 10}

    def test_dump_includes_generation_and_shard(self):
        meta = LayerFileMetadata(
            file_size=10,
            generation=3,
            shard=ShardIndex(shard_number=1, shard_count=4),
        )
        assert meta.model_dump() == {"file_size": 10, "generation": 3, "shard": "0104"}

    def test_parse_wire_form(self):
        meta = LayerFileMetadata.model_validate({"file_size": 10, "generation": 3, "shard": "0104"})
        assert meta.generation == 3
        assert meta.shard == ShardIndex(shard_number=1, shard_count=4)

    def test_rejects_negative_size(self):
        with pytest.raises(ValidationError):
            LayerFileMetadata(file_size=-1)
