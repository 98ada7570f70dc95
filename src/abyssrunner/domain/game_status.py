from __future__ import annotations

import enum

from abyssrunner.domain.exceptions import IllegalTransition


class GameStatus(enum.Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    WIN = "win"


# PLAYING -> PLAYING is a level advance.
_TRANSITIONS: dict[GameStatus, frozenset[GameStatus]] = {
    GameStatus.START: frozenset({GameStatus.PLAYING}),
    GameStatus.PLAYING: frozenset({GameStatus.PLAYING, GameStatus.GAME_OVER, GameStatus.WIN}),
    GameStatus.GAME_OVER: frozenset({GameStatus.START}),
    GameStatus.WIN: frozenset({GameStatus.START}),
}


def can_transition(src: GameStatus, dst: GameStatus) -> bool:
    return dst in _TRANSITIONS[src]


def check_transition(src: GameStatus, dst: GameStatus) -> GameStatus:
    if not can_transition(src, dst):
        raise IllegalTransition(f"{src.name} -> {dst.name}")
    return dst
