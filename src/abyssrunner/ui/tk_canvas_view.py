import tkinter as tk

from abyssrunner.domain.game_status import GameStatus
from abyssrunner.domain.level import GOAL, WALL
from abyssrunner.domain.snapshot import RenderSnapshot

_OVERLAY_TEXT = {
    GameStatus.START: ("ABYSS RUNNER", "W/A/S/D to move. Press Enter to begin."),
    GameStatus.GAME_OVER: ("YOU DIED", "Returning to the start screen..."),
    GameStatus.WIN: ("ASCENDED", "The nightmare is over. For now. Press R to restart."),
}


def hud_text(snap: RenderSnapshot) -> str:
    text = f"Phase {snap.level_index + 1} / {snap.level_count}"
    if snap.level_name:
        text += f": {snap.level_name}"
    return text


class TkCanvasView:
    def __init__(self, root: tk.Misc, *, width: int, height: int) -> None:
        self._w = width
        self._h = height
        self._grid: tuple[tuple[int, ...], ...] | None = None

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0, bg="#09090b")
        self.canvas.pack(fill="both", expand=True)

        self._player_id = self.canvas.create_oval(0, 0, 0, 0, outline="", fill="#fff")
        self._hud_id = self.canvas.create_text(
            10, 10, anchor="nw", text="", fill="#a1a1aa", font=("TkDefaultFont", 12, "bold")
        )
        self._banner_id = self.canvas.create_text(
            10, 32, anchor="nw", text="", fill="#ef4444", font=("TkDefaultFont", 9, "bold")
        )

    def render(self, snap: RenderSnapshot) -> None:
        cell = snap.cell_size

        # Tiles only change with the level.
        if snap.grid is not self._grid:
            self._draw_grid(snap.grid, cell)
            self._grid = snap.grid

        self.canvas.delete("hazard")
        r = snap.hazard_radius
        for hx, hy in snap.hazards:
            self.canvas.create_oval(hx - r, hy - r, hx + r, hy + r, fill="#f00", outline="", tags=("hazard",))

        pr = snap.player_radius
        self.canvas.coords(
            self._player_id, snap.player_x - pr, snap.player_y - pr, snap.player_x + pr, snap.player_y + pr
        )

        self.canvas.itemconfigure(self._hud_id, text=hud_text(snap))
        self.canvas.itemconfigure(
            self._banner_id, text="ORBITAL HAZARDS ACTIVE" if snap.hazards_active else ""
        )
        self.canvas.tag_raise(self._player_id)
        self.canvas.tag_raise(self._hud_id)
        self.canvas.tag_raise(self._banner_id)
        if self.canvas.find_withtag("overlay"):
            self.canvas.tag_raise("overlay")

    def show_overlay(self, status: GameStatus) -> None:
        self.canvas.delete("overlay")
        text = _OVERLAY_TEXT.get(status)
        if text is None:
            return

        title, subtitle = text
        cx = self._w / 2.0
        cy = self._h / 2.0
        self.canvas.create_rectangle(0, 0, self._w, self._h, fill="#000", stipple="gray50", outline="", tags=("overlay",))
        self.canvas.create_text(
            cx, cy - 20, text=title, fill="#fff", font=("TkDefaultFont", 32, "bold"), tags=("overlay",)
        )
        self.canvas.create_text(
            cx, cy + 24, text=subtitle, fill="#a1a1aa", font=("TkDefaultFont", 12), tags=("overlay",)
        )

    def _draw_grid(self, grid: tuple[tuple[int, ...], ...], cell: float) -> None:
        self.canvas.delete("tile")
        self._w = int(len(grid[0]) * cell)
        self._h = int(len(grid) * cell)
        self.canvas.config(width=self._w, height=self._h)

        for z, row in enumerate(grid):
            for x, code in enumerate(row):
                x1, y1 = x * cell, z * cell
                if code == WALL:
                    self.canvas.create_rectangle(
                        x1, y1, x1 + cell, y1 + cell, fill="#0a0a0a", outline="#222", tags=("tile",)
                    )
                elif code == GOAL:
                    inset = cell / 4.0
                    self.canvas.create_rectangle(
                        x1 + inset, y1 + inset, x1 + cell - inset, y1 + cell - inset,
                        fill="#0f0", outline="", tags=("tile",),
                    )
        if self.canvas.find_withtag("tile"):
            self.canvas.tag_lower("tile")
