from __future__ import annotations

from dataclasses import dataclass

from abyssrunner.domain.hazard import Hazard, spawn_hazards
from abyssrunner.domain.level import LevelDefinition


@dataclass(frozen=True)
class Player:
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class GameState:
    level_index: int
    level: LevelDefinition

    player: Player
    # Rebuilt every step; replaced wholesale on level (re)init
    hazards: tuple[Hazard, ...]

    ticks: int = 0


def spawn_player(level: LevelDefinition, *, cell_size: float, radius: float) -> Player:
    x, y = level.start_position(cell_size)
    return Player(x=x, y=y, radius=radius)


def initial_state(
    level: LevelDefinition,
    level_index: int,
    *,
    cell_size: float,
    player_radius: float,
) -> GameState:
    return GameState(
        level_index=level_index,
        level=level,
        player=spawn_player(level, cell_size=cell_size, radius=player_radius),
        hazards=spawn_hazards(level, cell_size),
    )
