"""Shared fixtures for abyssrunner tests.

Nothing here needs a Tk display: the loop and the input mapper are driven
through a fake root that records after()/bind() calls.
"""
from __future__ import annotations

from collections.abc import Callable

import pytest

from abyssrunner.config import GameConfig
from abyssrunner.domain.campaign import Campaign, make_campaign
from abyssrunner.domain.game_status import GameStatus
from abyssrunner.domain.level import HazardSpot, LevelDefinition, parse_rows
from abyssrunner.domain.snapshot import RenderSnapshot


class RecordingPresenter:
    """Presenter that remembers every call."""

    def __init__(self) -> None:
        self.frames: list[RenderSnapshot] = []
        self.collisions = 0
        self.statuses: list[tuple[GameStatus, int]] = []

    def render(self, snapshot: RenderSnapshot) -> None:
        self.frames.append(snapshot)

    def collision(self) -> None:
        self.collisions += 1

    def status_changed(self, status: GameStatus, level_index: int) -> None:
        self.statuses.append((status, level_index))


class FakeRoot:
    """Stands in for tk.Tk: timers, bindings, focus and the window calls GameApp makes."""

    def __init__(self) -> None:
        self.pending: dict[str, tuple[int, Callable[[], None]]] = {}
        self.cancelled: list[str] = []
        self.bindings: dict[str, Callable] = {}
        self.protocols: dict[str, Callable[[], None]] = {}
        self.focused = False
        self.bells = 0
        self.destroyed = False
        self._seq = 0

    def title(self, _text: str) -> None:
        pass

    def resizable(self, _width: bool, _height: bool) -> None:
        pass

    def protocol(self, name: str, fn: Callable[[], None]) -> None:
        self.protocols[name] = fn

    def bell(self) -> None:
        self.bells += 1

    def destroy(self) -> None:
        self.destroyed = True

    def after(self, ms: int, fn: Callable[[], None]) -> str:
        self._seq += 1
        after_id = f"after#{self._seq}"
        self.pending[after_id] = (ms, fn)
        return after_id

    def after_cancel(self, after_id: str) -> None:
        self.cancelled.append(after_id)
        self.pending.pop(after_id, None)

    def bind(self, sequence: str, fn: Callable) -> None:
        self.bindings[sequence] = fn

    def focus_set(self) -> None:
        self.focused = True

    def fire_pending(self) -> None:
        due = list(self.pending.values())
        self.pending.clear()
        for _ms, fn in due:
            fn()


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def tiny_config() -> GameConfig:
    # One tick from a cell centre lands in the neighbouring cell.
    return GameConfig(cell_size=8, player_radius=2, player_speed=4, hazard_hit_radius=3)


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def fake_root() -> FakeRoot:
    return FakeRoot()


@pytest.fixture
def make_level() -> Callable[..., LevelDefinition]:
    def _make(
        rows: list[str],
        start: tuple[int, int],
        *,
        death_zone_threshold: int | None = None,
        hazards: tuple[HazardSpot, ...] = (),
    ) -> LevelDefinition:
        return LevelDefinition(
            grid=parse_rows(rows),
            start=start,
            death_zone_threshold=death_zone_threshold,
            hazards=hazards,
        )

    return _make


@pytest.fixture
def open_room(make_level) -> LevelDefinition:
    return make_level(
        [
            "00000",
            "00000",
            "00000",
            "00000",
            "00000",
        ],
        (2, 2),
    )


@pytest.fixture
def two_level_campaign(make_level) -> Campaign:
    first = make_level(
        [
            "0000",
            "0003",
            "0000",
        ],
        (0, 1),
    )
    second = make_level(
        [
            "000",
            "000",
            "003",
        ],
        (1, 1),
    )
    return make_campaign([first, second])
