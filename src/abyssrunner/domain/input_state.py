from dataclasses import dataclass


@dataclass(frozen=True)
class InputState:
    # Held state for the tick, copied from the key table in one go.
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
