from __future__ import annotations

import logging
from collections.abc import Callable

from abyssrunner.domain.collision import hits_hazard, is_blocked, is_lethal
from abyssrunner.domain.exceptions import LevelCompleted, PlayerDied
from abyssrunner.domain.game_state import GameState, Player, spawn_player
from abyssrunner.domain.hazard import Hazard
from abyssrunner.domain.input_state import InputState
from abyssrunner.domain.level import GOAL, LevelDefinition, world_to_cell

logger = logging.getLogger(__name__)


def _no_feedback() -> None:
    return None


class World:
    def __init__(
        self,
        *,
        cell_size: float,
        player_speed: float,
        hazard_hit_radius: float,
        on_collision: Callable[[], None] = _no_feedback,
    ) -> None:
        self.cell_size = cell_size
        self.player_speed = player_speed
        self.hazard_hit_radius = hazard_hit_radius
        self._on_collision = on_collision

    def step(self, state: GameState, inp: InputState) -> GameState:
        level = state.level
        p = state.player
        lethal = False

        # ----- Movement -----
        # Opposing keys land in the same accumulator and cancel.
        dx = 0.0
        dy = 0.0
        if inp.up:
            dy -= self.player_speed
        if inp.down:
            dy += self.player_speed
        if inp.left:
            dx -= self.player_speed
        if inp.right:
            dx += self.player_speed

        nx = p.x + dx
        ny = p.y + dy

        # ----- Grid collision -----
        if not is_blocked(level, nx, ny, self.cell_size):
            p = Player(x=nx, y=ny, radius=p.radius)
        else:
            logger.debug("wall hit at (%.1f, %.1f) on level %d", nx, ny, state.level_index)
            p, lethal = self._collide(level, p)

        # ----- Hazards -----
        # Each hit is resolved on its own; the last one decides lethality.
        hazards: list[Hazard] = []
        for h in state.hazards:
            h = h.advance()
            hazards.append(h)
            if hits_hazard(p.x, p.y, h.x, h.y, player_radius=p.radius, hit_radius=self.hazard_hit_radius):
                logger.debug("hazard hit at (%.1f, %.1f) on level %d", h.x, h.y, state.level_index)
                p, lethal = self._collide(level, p)

        next_state = GameState(
            level_index=state.level_index,
            level=level,
            player=p,
            hazards=tuple(hazards),
            ticks=state.ticks + 1,
        )

        if lethal:
            raise PlayerDied(next_state)

        # ----- Goal -----
        cx = world_to_cell(p.x, self.cell_size)
        cz = world_to_cell(p.y, self.cell_size)
        if level.cell_at(cx, cz) == GOAL:
            raise LevelCompleted(next_state)

        return next_state

    def _collide(self, level: LevelDefinition, p: Player) -> tuple[Player, bool]:
        # Lethality looks at the cell the player is in now, not the one it tried to enter.
        self._on_collision()
        if is_lethal(level, p.x, self.cell_size):
            return p, True
        return spawn_player(level, cell_size=self.cell_size, radius=p.radius), False
