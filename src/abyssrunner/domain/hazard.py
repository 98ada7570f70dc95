from __future__ import annotations

import math
from dataclasses import dataclass

from abyssrunner.domain.level import LevelDefinition, cell_center


def hazard_position(
    center_x: float,
    center_y: float,
    radius: float,
    angle0: float,
    angular_speed: float,
    ticks: int,
) -> tuple[float, float]:
    """Closed-form orbit position after `ticks` steps."""
    angle = angle0 + angular_speed * ticks
    return center_x + math.cos(angle) * radius, center_y + math.sin(angle) * radius


@dataclass(frozen=True)
class Hazard:
    center_x: float
    center_y: float
    orbit_radius: float
    angle: float
    angular_speed: float
    x: float
    y: float

    def advance(self) -> Hazard:
        # Angle grows without wrapping; only cos/sin of it are consumed.
        angle = self.angle + self.angular_speed
        return Hazard(
            center_x=self.center_x,
            center_y=self.center_y,
            orbit_radius=self.orbit_radius,
            angle=angle,
            angular_speed=self.angular_speed,
            x=self.center_x + math.cos(angle) * self.orbit_radius,
            y=self.center_y + math.sin(angle) * self.orbit_radius,
        )


def spawn_hazards(level: LevelDefinition, cell_size: float) -> tuple[Hazard, ...]:
    hazards: list[Hazard] = []
    for spot in level.hazards:
        cx = cell_center(spot.x, cell_size)
        cy = cell_center(spot.z, cell_size)
        radius = spot.orbit_cells * cell_size
        x, y = hazard_position(cx, cy, radius, spot.angle, spot.angular_speed, 0)
        hazards.append(
            Hazard(
                center_x=cx,
                center_y=cy,
                orbit_radius=radius,
                angle=spot.angle,
                angular_speed=spot.angular_speed,
                x=x,
                y=y,
            )
        )
    return tuple(hazards)
