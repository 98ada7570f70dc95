from __future__ import annotations

import logging
import tkinter as tk

from abyssrunner.app.game_loop import GameLoop
from abyssrunner.app.game_session import GameSession
from abyssrunner.config import GameConfig
from abyssrunner.domain.campaign import Campaign
from abyssrunner.domain.game_status import GameStatus
from abyssrunner.domain.snapshot import RenderSnapshot
from abyssrunner.ui.input_mapper import TkInputMapper
from abyssrunner.ui.tk_canvas_view import TkCanvasView

logger = logging.getLogger(__name__)


class GameApp:
    """Tk presenter: draws snapshots, beeps on collisions, drives the loop."""

    def __init__(
        self,
        *,
        campaign: Campaign,
        config: GameConfig,
        root: tk.Tk | None = None,
        view: TkCanvasView | None = None,
    ) -> None:
        self.root = root if root is not None else tk.Tk()
        self.root.title("Abyss Runner")
        self.root.resizable(False, False)

        self.config = config
        self.input = TkInputMapper(self.root)

        if view is None:
            first = campaign.levels[0]
            view = TkCanvasView(
                self.root,
                width=int(first.width * config.cell_size),
                height=int(first.height * config.cell_size),
            )
        self.view = view

        self.session = GameSession(campaign=campaign, config=config, presenter=self)
        self.loop = GameLoop(root=self.root, update_fn=self._update, fps=config.fps)
        self._restart_after_id: str | None = None

        # Lifecycle commands
        for seq in ("<KeyPress-Return>", "<KeyPress-space>"):
            self.root.bind(seq, lambda _e: self.session.begin())
        for seq in ("<KeyPress-r>", "<KeyPress-R>"):
            self.root.bind(seq, lambda _e: self._manual_restart())

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        self.view.show_overlay(self.session.status)

    def run(self) -> None:
        self.root.mainloop()

    # ---------- Presenter ----------

    def render(self, snapshot: RenderSnapshot) -> None:
        self.view.render(snapshot)

    def collision(self) -> None:
        self.root.bell()

    def status_changed(self, status: GameStatus, level_index: int) -> None:
        self.view.show_overlay(status)

        if status is GameStatus.PLAYING:
            self.loop.start()
            return

        # Any other status means no ticks until the next begin().
        self.loop.stop()
        if status is GameStatus.GAME_OVER:
            self._cancel_restart_timer()
            self._restart_after_id = self.root.after(self.config.game_over_restart_ms, self._auto_restart)

    # ---------- Loop ----------

    def _update(self) -> None:
        self.session.tick(self.input.sample())

    def _auto_restart(self) -> None:
        self._restart_after_id = None
        self.session.restart()

    def _manual_restart(self) -> None:
        if self.session.restart():
            self._cancel_restart_timer()

    def _cancel_restart_timer(self) -> None:
        if self._restart_after_id is None:
            return
        try:
            self.root.after_cancel(self._restart_after_id)
        except tk.TclError:
            pass
        finally:
            self._restart_after_id = None

    def _on_close(self) -> None:
        logger.info("window closed")
        self.loop.stop()
        self._cancel_restart_timer()
        self.root.destroy()
