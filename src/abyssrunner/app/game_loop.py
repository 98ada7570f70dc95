from __future__ import annotations

import tkinter as tk
from collections.abc import Callable


class GameLoop:
    """
    Fixed-rate tick driver on top of Tk's after().
    Each tick runs to completion before the next one is armed. There is no
    delta time: one call is one simulation step.
    """

    def __init__(
        self,
        *,
        root: tk.Misc,
        update_fn: Callable[[], None],
        fps: int = 60,
    ) -> None:
        self._root = root
        self._update_fn = update_fn
        self._target_ms = max(1, int(1000 / max(1, fps)))

        self._running = False
        self._after_id: str | None = None

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                # Root may already be destroyed; ignore during shutdown.
                pass
            finally:
                self._after_id = None

    def _schedule_next(self) -> None:
        self._after_id = self._root.after(self._target_ms, self._tick)

    def _tick(self) -> None:
        self._after_id = None
        if not self._running:
            return

        try:
            self._update_fn()
        except Exception:
            # Fail fast rather than keep ticking on corrupt state.
            self.stop()
            raise

        # The update may have stopped (or stopped and restarted) the loop.
        if self._running and self._after_id is None:
            self._schedule_next()
