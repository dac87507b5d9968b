"""Fuel tanks floating down the river."""

from __future__ import annotations

from riverraid.objects import GameObject, Point


class Fuel(GameObject):
    """A yellow fuel tank that refuels the player on contact."""

    def __init__(self, game, ref: Point) -> None:
        super().__init__(game, ref, 20, 60, "yellow", "lightyellow")

    def draw(self) -> None:
        canvas = self.canvas
        x, y = self.ref.x, self.ref.y
        canvas.set_pen("lightyellow")
        canvas.set_brush("yellow")
        canvas.draw_rectangle(x, y, x + self.width, y + self.height)
        canvas.set_pen("black")
        canvas.set_font(15, bold=True, name="Arial")
        for dx, dy, letter in ((6, 8, "F"), (5, 19, "U"), (6, 30, "E"), (6, 42, "L")):
            canvas.draw_string(x + dx, y + dy, letter)

    def move(self, speed: int) -> None:
        """Drift down the screen by ``speed`` pixels."""
        self.ref.y += speed

    def place_randomly(self, low: int, high: int) -> None:
        """Move to a random column in [low, high - 1)."""
        self.ref.x = low + self.game.rng.randrange(high - low - 1)

    def collision_action(self) -> None:
        """Refuel the player when it flies over this tank."""
        player = self.game.player
        if self.collides_with(player):
            player.increase_fuel()
            self.game.print_message("Fuel Collected")