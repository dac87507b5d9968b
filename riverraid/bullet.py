"""Bullets fired by the player."""

from __future__ import annotations

from riverraid.objects import GameObject, Point


class Bullet(GameObject):
    """A small shell with a pointed tip that flies up the river."""

    def __init__(self, game, ref: Point) -> None:
        super().__init__(game, ref, 10, 25, "black", "black")
        self.body_colors = ["brown", "gold"]
        self.border_colors = ["sandybrown", "lightgoldenrodyellow"]

    def draw(self) -> None:
        canvas = self.canvas
        x, y = self.ref.x, self.ref.y
        shoulder = int(y + 0.2 * self.height)
        canvas.set_pen(self.border_colors[0])
        canvas.set_brush(self.body_colors[1])
        canvas.draw_triangle(x, shoulder, x + self.width // 2, y,
                             x + self.width, shoulder)
        canvas.set_pen(self.border_colors[1])
        canvas.set_brush(self.body_colors[1])
        canvas.draw_rectangle(x, shoulder, x + self.width, int(y + 0.8 * self.height))

    def collision_action(self) -> None:
        """Send a fuel tank that was hit back above the screen."""
        fuel = self.game.fuel
        if self.collides_with(fuel):
            fuel.ref.y = -90
            fuel.place_randomly(280, 920)