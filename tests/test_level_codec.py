from __future__ import annotations

import json

import pytest

from abyssrunner.domain.level import GOAL, WALL
from abyssrunner.infra.exceptions import LevelDecodeError
from abyssrunner.infra.level_codec import decode_campaign
from abyssrunner.infra.level_files import load_campaign_from_path


def _pack(*levels: dict) -> dict:
    return {"format": "abyssrunner.campaign", "version": 1, "levels": list(levels)}


def _level(**overrides) -> dict:
    lvl = {"grid": ["1111", "1031", "1111"], "start": {"x": 1, "z": 1}}
    lvl.update(overrides)
    return lvl


class TestDecodeCampaign:
    def test_minimal_pack(self):
        campaign = decode_campaign(_pack(_level()))
        (level,) = campaign.levels
        assert level.grid[1] == (1, 0, 3, 1)
        assert level.start == (1, 1)
        assert level.death_zone_threshold is None
        assert level.hazards == ()

    def test_list_rows_and_hazards(self):
        lvl = _level(
            grid=[[0, 0, 0], [0, 1, 3]],
            start={"x": 0, "z": 0},
            death_zone_threshold=2,
            name="Spin",
            hazards=[{"x": 1, "z": 0, "orbit_cells": 1.5, "angular_speed": 0.04}],
        )
        (level,) = decode_campaign(_pack(lvl)).levels
        assert level.cell_at(1, 1) == WALL
        assert level.cell_at(2, 1) == GOAL
        assert level.death_zone_threshold == 2
        assert level.name == "Spin"
        (spot,) = level.hazards
        assert spot.orbit_cells == 1.5
        assert spot.angle == 0.0

    def test_levels_keep_their_order(self):
        a = _level(name="a")
        b = _level(name="b")
        assert [lv.name for lv in decode_campaign(_pack(a, b))] == ["a", "b"]

    @pytest.mark.parametrize(
        "obj",
        [
            {"format": "pydash.level", "version": 1, "levels": []},
            {"format": "abyssrunner.campaign", "version": 9, "levels": []},
            {"format": "abyssrunner.campaign", "version": 1, "levels": []},
            [],
        ],
    )
    def test_bad_envelope(self, obj):
        with pytest.raises(LevelDecodeError):
            decode_campaign(obj)

    @pytest.mark.parametrize(
        "lvl",
        [
            _level(grid=["000", "00"]),
            _level(grid=["0a0"]),
            _level(start={"x": 0, "z": 0}),
            _level(start={"x": 1}),
            _level(death_zone_threshold="far"),
            _level(hazards=[{"x": 1, "z": 1, "orbit_cells": "big", "angular_speed": 0.1}]),
            _level(hazards=[{"x": 1, "z": 1, "orbit_cells": -1, "angular_speed": 0.1}]),
            _level(hazards=[{"x": 1, "z": 1, "orbit_cells": 1}]),
            _level(hazards={"x": 1}),
        ],
    )
    def test_bad_level(self, lvl):
        with pytest.raises(LevelDecodeError):
            decode_campaign(_pack(lvl))


class TestLoadFromPath:
    def test_reads_json_file(self, tmp_path):
        path = tmp_path / "pack.json"
        path.write_text(json.dumps(_pack(_level(), _level())), encoding="utf-8")
        assert len(load_campaign_from_path(path)) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(LevelDecodeError):
            load_campaign_from_path(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "pack.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(LevelDecodeError):
            load_campaign_from_path(path)
