from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from abyssrunner.domain.game_state import GameState


class PlayerDied(Exception):
    """Raised by the domain when a collision happens inside the death zone."""

    def __init__(self, state: GameState | None = None) -> None:
        super().__init__()
        # The tick's final state: the player where it died, hazards already advanced.
        self.state = state


class LevelCompleted(Exception):
    """Raised when the player's cell is the level's goal cell."""

    def __init__(self, state: GameState | None = None) -> None:
        super().__init__()
        self.state = state


class LevelDefinitionError(ValueError):
    """Raised when authored level data breaks a grid invariant."""


class IllegalTransition(Exception):
    """Raised when a status change is not in the transition table."""
