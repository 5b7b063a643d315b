"""Tests for identifier types — timeline ids, generations, shard indexes."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from layerheat.models.heatmap import HeatMapTenant, HeatMapTimeline
from layerheat.models.ids import ShardIndex, new_timeline_id


class TestTimelineId:
    def test_normalised_to_lower_case(self):
        timeline = HeatMapTimeline(timeline_id="ABCDEF" + "0" * 26, layers=[])
        assert timeline.timeline_id == "abcdef" + "0" * 26

    @pytest.mark.parametrize("bad", ["", "abc", "g" * 32, "a" * 33])
    def test_rejects_malformed(self, bad: str):
        with pytest.raises(ValidationError):
            HeatMapTimeline(timeline_id=bad, layers=[])

    def test_new_timeline_id_is_valid(self):
        tid = new_timeline_id()
        assert len(tid) == 32
        assert HeatMapTimeline(timeline_id=tid, layers=[]).timeline_id == tid

    def test_new_timeline_ids_differ(self):
        assert new_timeline_id() != new_timeline_id()


class TestGeneration:
    def test_accepts_u32_range(self):
        assert HeatMapTenant(generation=0xFFFFFFFF, timelines=[]).generation == 0xFFFFFFFF

    @pytest.mark.parametrize("bad", [-1, 0x1_0000_0000])
    def test_rejects_out_of_range(self, bad: int):
        with pytest.raises(ValidationError):
            HeatMapTenant(generation=bad, timelines=[])


class TestShardIndex:
    def test_parse_hex(self):
        shard = ShardIndex.model_validate("0104")
        assert shard.shard_number == 1
        assert shard.shard_count == 4

    def test_str_is_wire_form(self):
        assert str(ShardIndex(shard_number=10, shard_count=16)) == "0a10"

    def test_dumps_as_string(self):
        assert ShardIndex(shard_number=1, shard_count=2).model_dump() == "0102"

    def test_unsharded(self):
        shard = ShardIndex.unsharded()
        assert shard.is_unsharded is True
        assert str(shard) == "0000"
        assert ShardIndex(shard_number=0, shard_count=8).is_unsharded is False

    @pytest.mark.parametrize("bad", ["", "01", "010203", "zz04", "+1ff", " 1ff", "0104\n", "0x14"])
    def test_rejects_malformed(self, bad: str):
        with pytest.raises(ValidationError):
            ShardIndex.model_validate(bad)

    def test_frozen(self):
        shard = ShardIndex.unsharded()
        with pytest.raises(Exception):
            shard.shard_count = 4
