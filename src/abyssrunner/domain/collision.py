from __future__ import annotations

import math

from abyssrunner.domain.level import WALL, LevelDefinition, world_to_cell


def is_blocked(level: LevelDefinition, x: float, y: float, cell_size: float) -> bool:
    # Out of bounds and wall are the same answer to the caller.
    code = level.cell_at(world_to_cell(x, cell_size), world_to_cell(y, cell_size))
    return code is None or code == WALL


def hits_hazard(
    px: float,
    py: float,
    hx: float,
    hy: float,
    *,
    player_radius: float,
    hit_radius: float,
) -> bool:
    return math.hypot(hx - px, hy - py) < player_radius + hit_radius


def is_lethal(level: LevelDefinition, x: float, cell_size: float) -> bool:
    threshold = level.death_zone_threshold
    if threshold is None:
        return False
    return world_to_cell(x, cell_size) >= threshold
