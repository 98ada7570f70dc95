from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from abyssrunner.domain.exceptions import LevelDefinitionError
from abyssrunner.domain.level import HazardSpot, LevelDefinition, parse_rows


@dataclass(frozen=True)
class Campaign:
    levels: tuple[LevelDefinition, ...]

    def __post_init__(self) -> None:
        if not self.levels:
            raise LevelDefinitionError("a campaign needs at least one level")

    def __len__(self) -> int:
        return len(self.levels)

    def __iter__(self) -> Iterator[LevelDefinition]:
        return iter(self.levels)

    def level_at(self, index: int) -> LevelDefinition | None:
        # None past either end means "no such level", i.e. the campaign is done.
        if index < 0 or index >= len(self.levels):
            return None
        return self.levels[index]

    def is_last(self, index: int) -> bool:
        return self.level_at(index + 1) is None


def make_campaign(levels: Sequence[LevelDefinition]) -> Campaign:
    return Campaign(levels=tuple(levels))


def _orbit_ring(
    spots: Sequence[tuple[int, int]],
    *,
    orbit_cells: float,
    phase_step: float,
    angular_speed: float,
) -> tuple[HazardSpot, ...]:
    return tuple(
        HazardSpot(x=x, z=z, orbit_cells=orbit_cells, angle=i * phase_step, angular_speed=angular_speed)
        for i, (x, z) in enumerate(spots)
    )


_SERPENTINE = LevelDefinition(
    name="Descent",
    grid=parse_rows((
        "11111111111111111111",
        "10000000000000000001",
        "11111111111111111101",
        "10000000000000000001",
        "10111111111111111111",
        "10000000000000000001",
        "11111111111111111101",
        "10000000000000000001",
        "10000000000000000031",
        "11111111111111111111",
    )),
    start=(1, 1),
)

_HALL = LevelDefinition(
    name="Orbit Hall",
    grid=parse_rows((
        "11111111111111111111",
        "10000000000000000001",
        "10000000000000000001",
        "10000000000000000001",
        "10000111111110000001",
        "10000000000010000001",
        "10000000000010000001",
        "10000000000010000001",
        "10000000000010000031",
        "11111111111111111111",
    )),
    start=(1, 1),
    hazards=_orbit_ring(
        [(5, 3), (8, 5), (2, 5)],
        orbit_cells=1.5,
        phase_step=math.pi,
        angular_speed=0.04,
    ),
)

_ABYSS = LevelDefinition(
    name="The Abyss",
    grid=parse_rows((
        "11111111111111111111",
        "10000000000000000001",
        "10000000000000000001",
        "10000000110000000001",
        "10000000000000000001",
        "10000000000000000001",
        "10000000000110000001",
        "10000000000000000001",
        "10000000000000000031",
        "11111111111111111111",
    )),
    start=(1, 4),
    death_zone_threshold=10,
    hazards=_orbit_ring(
        [(4, 3), (8, 5), (12, 3), (16, 5), (10, 7)],
        orbit_cells=1.8,
        phase_step=math.pi / 2.5,
        angular_speed=0.06,
    ),
)

DEFAULT_CAMPAIGN = make_campaign([_SERPENTINE, _HALL, _ABYSS])
