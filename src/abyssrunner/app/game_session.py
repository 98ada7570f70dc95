from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from abyssrunner.config import GameConfig
from abyssrunner.domain.campaign import Campaign
from abyssrunner.domain.exceptions import LevelCompleted, PlayerDied
from abyssrunner.domain.game_state import GameState, initial_state
from abyssrunner.domain.game_status import GameStatus, check_transition
from abyssrunner.domain.input_state import InputState
from abyssrunner.domain.snapshot import RenderSnapshot, snapshot_of
from abyssrunner.domain.world import World

logger = logging.getLogger(__name__)


class Presenter(Protocol):
    def render(self, snapshot: RenderSnapshot) -> None:
        ...

    def collision(self) -> None:
        ...

    def status_changed(self, status: GameStatus, level_index: int) -> None:
        ...


class GameSession:
    """
    Owns the run: status, level index and the simulation state.
    Presenter calls are best effort; a failing presenter never breaks a tick.
    """

    def __init__(self, *, campaign: Campaign, config: GameConfig, presenter: Presenter) -> None:
        self.campaign = campaign
        self.config = config
        self._presenter = presenter

        self.status = GameStatus.START
        self.level_index = 0
        self.state: GameState | None = None

        self.world = World(
            cell_size=config.cell_size,
            player_speed=config.player_speed,
            hazard_hit_radius=config.hazard_hit_radius,
            on_collision=self._collision_feedback,
        )

    # ---------- Lifecycle commands ----------

    def begin(self) -> bool:
        if self.status is not GameStatus.START:
            logger.debug("begin() ignored in %s", self.status.name)
            return False

        self.level_index = 0
        self._init_level(0)
        self._set_status(GameStatus.PLAYING)
        self._render()
        return True

    def restart(self) -> bool:
        if self.status not in (GameStatus.GAME_OVER, GameStatus.WIN):
            logger.debug("restart() ignored in %s", self.status.name)
            return False

        self.level_index = 0
        self.state = None
        self._set_status(GameStatus.START)
        return True

    # ---------- Tick ----------

    def tick(self, inp: InputState) -> None:
        if self.status is not GameStatus.PLAYING or self.state is None:
            return

        try:
            self.state = self.world.step(self.state, inp)
        except PlayerDied as e:
            # The terminal frame shows this tick, not the previous one.
            if e.state is not None:
                self.state = e.state
            logger.info("player died on level %d", self.level_index)
            self._set_status(GameStatus.GAME_OVER)
        except LevelCompleted as e:
            if e.state is not None:
                self.state = e.state
            self._complete_level()

        self._render()

    def snapshot(self) -> RenderSnapshot | None:
        if self.state is None:
            return None
        return snapshot_of(
            self.state,
            status=self.status,
            cell_size=self.config.cell_size,
            hazard_radius=self.config.hazard_draw_radius,
            level_count=len(self.campaign),
        )

    # ---------- Internals ----------

    def _init_level(self, index: int) -> None:
        level = self.campaign.level_at(index)
        if level is None:
            raise IndexError(f"no level at index {index}")
        # Fresh player and a fresh hazard set every time.
        self.state = initial_state(
            level,
            index,
            cell_size=self.config.cell_size,
            player_radius=self.config.player_radius,
        )

    def _complete_level(self) -> None:
        next_index = self.level_index + 1
        if self.campaign.is_last(self.level_index):
            logger.info("campaign complete after level %d", self.level_index)
            self._set_status(GameStatus.WIN)
            return

        logger.info("level %d complete, advancing to %d", self.level_index, next_index)
        self.level_index = next_index
        self._init_level(next_index)
        self._set_status(GameStatus.PLAYING)

    def _set_status(self, status: GameStatus) -> None:
        prev = self.status
        self.status = check_transition(prev, status)
        if prev is not status:
            logger.info("status %s -> %s", prev.name, status.name)
        self._present("status_changed", self._presenter.status_changed, status, self.level_index)

    def _render(self) -> None:
        snap = self.snapshot()
        if snap is not None:
            self._present("render", self._presenter.render, snap)

    def _collision_feedback(self) -> None:
        self._present("collision", self._presenter.collision)

    def _present(self, what: str, fn: Callable[..., None], *args: object) -> None:
        try:
            fn(*args)
        except Exception:
            logger.warning("presenter %s failed; continuing", what, exc_info=True)
