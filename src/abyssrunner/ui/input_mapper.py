from __future__ import annotations
import tkinter as tk
from abyssrunner.domain.input_state import InputState

# keysym (lowercased) -> logical key. W/A/S/D plus arrows.
KEY_BINDINGS: dict[str, str] = {
    "w": "up",
    "a": "left",
    "s": "down",
    "d": "right",
    "up": "up",
    "left": "left",
    "down": "down",
    "right": "right",
}


class TkInputMapper:
    def __init__(self, root: tk.Misc) -> None:
        self._held = {"up": False, "down": False, "left": False, "right": False}

        root.bind("<KeyPress>", self._on_key_down)
        root.bind("<KeyRelease>", self._on_key_up)
        # A key released while unfocused never sends KeyRelease.
        root.bind("<FocusOut>", self._on_focus_out)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_key_down(self, evt: tk.Event) -> None:
        key = KEY_BINDINGS.get(str(evt.keysym).lower())
        if key is not None:
            self._held[key] = True

    def _on_key_up(self, evt: tk.Event) -> None:
        key = KEY_BINDINGS.get(str(evt.keysym).lower())
        if key is not None:
            self._held[key] = False

    def _on_focus_out(self, _evt: tk.Event) -> None:
        for key in self._held:
            self._held[key] = False

    def sample(self) -> InputState:
        # One copy per tick; later key events don't touch this snapshot.
        return InputState(**self._held)
