from __future__ import annotations

from typing import Any

from abyssrunner.domain.campaign import Campaign, make_campaign
from abyssrunner.domain.exceptions import LevelDefinitionError
from abyssrunner.domain.level import HazardSpot, LevelDefinition
from abyssrunner.infra.exceptions import LevelDecodeError


_FORMAT = "abyssrunner.campaign"
_VERSION_LATEST = 1


def decode_campaign(obj: dict) -> Campaign:
    try:
        if not isinstance(obj, dict) or obj.get("format") != _FORMAT:
            raise LevelDecodeError("Invalid level pack format marker.")

        ver = obj.get("version")
        if ver == 1:
            return _decode_v1(obj)

        raise LevelDecodeError("Unsupported level pack version.")
    except LevelDecodeError:
        raise
    except Exception as e:
        raise LevelDecodeError(f"Failed to decode level pack: {e}") from e


def _decode_v1(obj: dict) -> Campaign:
    raw_levels = obj.get("levels")
    if not isinstance(raw_levels, list) or not raw_levels:
        raise LevelDecodeError("levels must be a non-empty list.")

    levels = [_decode_level(i, rl) for i, rl in enumerate(raw_levels)]
    return make_campaign(levels)


def _decode_level(i: int, rl: Any) -> LevelDefinition:
    if not isinstance(rl, dict):
        raise LevelDecodeError(f"levels[{i}] must be an object.")

    rows = rl.get("grid")
    if not isinstance(rows, list) or not rows:
        raise LevelDecodeError(f"levels[{i}].grid must be a non-empty list.")
    grid: list[tuple[int, ...]] = []
    for z, row in enumerate(rows):
        # Rows may be written compactly as "10001" or as [1, 0, 0, 0, 1].
        if isinstance(row, str):
            if not row.isdigit():
                raise LevelDecodeError(f"levels[{i}].grid[{z}] must contain only digits.")
            grid.append(tuple(int(ch) for ch in row))
        elif isinstance(row, list) and all(isinstance(v, int) for v in row):
            grid.append(tuple(row))
        else:
            raise LevelDecodeError(f"levels[{i}].grid[{z}] must be a string or a list of ints.")

    start = rl.get("start")
    if not isinstance(start, dict) or not all(isinstance(start.get(k), int) for k in ("x", "z")):
        raise LevelDecodeError(f"levels[{i}].start must be an object with integer x/z.")

    threshold = rl.get("death_zone_threshold")
    if threshold is not None and not isinstance(threshold, int):
        raise LevelDecodeError(f"levels[{i}].death_zone_threshold must be an integer.")

    raw_hazards = rl.get("hazards", [])
    if not isinstance(raw_hazards, list):
        raise LevelDecodeError(f"levels[{i}].hazards must be a list.")
    hazards = tuple(_decode_hazard(i, j, rh) for j, rh in enumerate(raw_hazards))

    name = rl.get("name", "")
    if not isinstance(name, str):
        raise LevelDecodeError(f"levels[{i}].name must be a string.")

    try:
        return LevelDefinition(
            grid=tuple(grid),
            start=(start["x"], start["z"]),
            death_zone_threshold=threshold,
            hazards=hazards,
            name=name,
        )
    except LevelDefinitionError as e:
        raise LevelDecodeError(f"levels[{i}]: {e}") from e


def _decode_hazard(i: int, j: int, rh: Any) -> HazardSpot:
    if not isinstance(rh, dict):
        raise LevelDecodeError(f"levels[{i}].hazards[{j}] must be an object.")

    x = rh.get("x")
    z = rh.get("z")
    if not isinstance(x, int) or not isinstance(z, int):
        raise LevelDecodeError(f"levels[{i}].hazards[{j}] x/z must be integers.")

    numbers = {}
    for key in ("orbit_cells", "angle", "angular_speed"):
        v = rh.get(key, 0.0 if key == "angle" else None)
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise LevelDecodeError(f"levels[{i}].hazards[{j}].{key} must be a number.")
        numbers[key] = float(v)

    if numbers["orbit_cells"] < 0:
        raise LevelDecodeError(f"levels[{i}].hazards[{j}].orbit_cells must be >= 0.")

    return HazardSpot(x=x, z=z, **numbers)
