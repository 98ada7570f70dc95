from __future__ import annotations

import math
from dataclasses import dataclass

from abyssrunner.domain.exceptions import LevelDefinitionError

FLOOR = 0
WALL = 1
GOAL = 3

_KNOWN_CELLS = (FLOOR, WALL, GOAL)


def world_to_cell(coord: float, cell_size: float) -> int:
    # The one world -> cell conversion. Everything that tests a position
    # against the grid goes through here.
    return math.floor(coord / cell_size)


def cell_center(cell: int, cell_size: float) -> float:
    return cell * cell_size + cell_size / 2


@dataclass(frozen=True)
class HazardSpot:
    """
    Authored orbit pivot for one hazard.
    Coordinates are in grid cells; the orbit radius is in cells too.
    """
    x: int
    z: int
    orbit_cells: float
    angle: float          # initial angle, radians
    angular_speed: float  # radians per tick


@dataclass(frozen=True)
class LevelDefinition:
    grid: tuple[tuple[int, ...], ...]  # rows = z, columns = x
    start: tuple[int, int]             # (x, z)
    death_zone_threshold: int | None = None
    hazards: tuple[HazardSpot, ...] = ()
    name: str = ""

    def __post_init__(self) -> None:
        if not self.grid or not self.grid[0]:
            raise LevelDefinitionError("grid must have at least one row and one column")

        width = len(self.grid[0])
        for z, row in enumerate(self.grid):
            if len(row) != width:
                raise LevelDefinitionError(f"row {z} has {len(row)} cells, expected {width}")
            for x, code in enumerate(row):
                if code not in _KNOWN_CELLS:
                    raise LevelDefinitionError(f"unknown cell code {code!r} at ({x}, {z})")

        sx, sz = self.start
        start_code = self.cell_at(sx, sz)
        if start_code is None:
            raise LevelDefinitionError(f"start {self.start} is outside the grid")
        if start_code == WALL:
            raise LevelDefinitionError(f"start {self.start} is a wall")

        for spot in self.hazards:
            if self.cell_at(spot.x, spot.z) is None:
                raise LevelDefinitionError(f"hazard pivot ({spot.x}, {spot.z}) is outside the grid")

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def height(self) -> int:
        return len(self.grid)

    def cell_at(self, x: int, z: int) -> int | None:
        if z < 0 or z >= len(self.grid) or x < 0 or x >= len(self.grid[0]):
            return None
        return self.grid[z][x]

    def start_position(self, cell_size: float) -> tuple[float, float]:
        sx, sz = self.start
        return cell_center(sx, cell_size), cell_center(sz, cell_size)


def parse_rows(rows: list[str] | tuple[str, ...]) -> tuple[tuple[int, ...], ...]:
    """Turn compact authored rows like "10001" into a grid."""
    return tuple(tuple(int(ch) for ch in row) for row in rows)
