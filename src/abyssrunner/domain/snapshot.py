from __future__ import annotations

from dataclasses import dataclass

from abyssrunner.domain.game_state import GameState
from abyssrunner.domain.game_status import GameStatus


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything the presenter needs to draw one frame."""
    grid: tuple[tuple[int, ...], ...]
    cell_size: float
    player_x: float
    player_y: float
    player_radius: float
    hazards: tuple[tuple[float, float], ...]
    hazard_radius: float
    level_index: int
    level_count: int
    status: GameStatus
    level_name: str = ""

    @property
    def hazards_active(self) -> bool:
        return bool(self.hazards)


def snapshot_of(
    state: GameState,
    *,
    status: GameStatus,
    cell_size: float,
    hazard_radius: float,
    level_count: int,
) -> RenderSnapshot:
    return RenderSnapshot(
        grid=state.level.grid,
        cell_size=cell_size,
        player_x=state.player.x,
        player_y=state.player.y,
        player_radius=state.player.radius,
        hazards=tuple((h.x, h.y) for h in state.hazards),
        hazard_radius=hazard_radius,
        level_index=state.level_index,
        level_count=level_count,
        status=status,
        level_name=state.level.name,
    )
