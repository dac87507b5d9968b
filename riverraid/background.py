"""River banks and scenery behind the game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Background:
    """Draws the river between two green banks, with a tree on the left bank."""

    tree_y: int = 0

    def clear(self, canvas) -> None:
        """Paint the whole canvas white."""
        canvas.set_pen("white")
        canvas.set_brush("white")
        canvas.draw_rectangle(0, 0, canvas.width, canvas.height)

    def draw(self, canvas, num_segments: int, difficulty: float) -> None:
        """Draw banks that are ``difficulty`` segments wide on each side."""
        if difficulty >= 0.5 * num_segments:
            return
        width, height = canvas.width, canvas.height
        segment_width = int(width / num_segments)
        bank = difficulty * segment_width
        canvas.set_brush("green")
        canvas.draw_rectangle(0, 0, int(bank), height)
        canvas.set_brush("dodgerblue")
        canvas.draw_rectangle(int(bank), 0, int(width - bank), height)
        canvas.set_brush("green")
        canvas.draw_rectangle(int(width - bank), 0, width, height)
        self.draw_trees(canvas, 50, self.tree_y)

    def draw_trees(self, canvas, x: int, y: int) -> None:
        """Draw one tree with its crown centred at (x + 10, y)."""
        canvas.set_brush("brown")
        canvas.draw_rectangle(x, y, x + 20, y + 60)
        canvas.set_brush("darkolivegreen")
        canvas.draw_circle(x + 10, y, 20)