"""The player's plane and the bullets it fires."""

from __future__ import annotations

from typing import Sequence

from riverraid.bullet import Bullet
from riverraid.objects import GameObject, Point

_OUTLINE_WIDTH = 343
_OUTLINE_HEIGHT = 640

_BODY_X = (120, 140, 150, 170, 190, 200, 225, 225, 340, 330, 215, 210, 285, 285,
           210, 205, 180, 170, 165, 140, 130, 55, 55, 125, 125, 10, 0, 115)
_BODY_Y = (220, 220, 70, 0, 65, 220, 220, 265, 470, 520, 405, 440, 555, 585,
           565, 585, 585, 640, 585, 585, 570, 585, 555, 440, 405, 525, 470, 265)
_COCKPIT_X = (140, 150, 170, 190, 200)
_COCKPIT_Y = (220, 70, 0, 65, 220)
_FLAME_X = (180, 170, 165)
_FLAME_Y = (585, 640, 585)


class Player(GameObject):
    """The plane steered by the player along the bottom of the river."""

    def __init__(self, game, ref: Point, width: int, height: int) -> None:
        super().__init__(game, ref, width, height, "black", "black")
        self.bullets: list[Bullet] = []
        self.num_lives = 3
        self.fuel = 100

    @property
    def bullet_count(self) -> int:
        """Number of bullets currently in flight."""
        return len(self.bullets)

    def _outline(self, xs: Sequence[int], ys: Sequence[int]) -> tuple[list[int], list[int]]:
        sx = self.width / _OUTLINE_WIDTH
        sy = self.height / _OUTLINE_HEIGHT
        return ([int(v * sx) + self.ref.x for v in xs],
                [int(v * sy) + self.ref.y for v in ys])

    def draw(self) -> None:
        canvas = self.canvas
        canvas.set_pen("black", 1)
        canvas.set_brush("black")
        canvas.draw_polygon(*self._outline(_BODY_X, _BODY_Y))
        canvas.set_pen("blue", 1)
        canvas.set_brush("blue")
        canvas.draw_polygon(*self._outline(_COCKPIT_X, _COCKPIT_Y))
        canvas.set_pen("blue", 1)
        canvas.set_brush("blue")
        canvas.draw_polygon(*self._outline(_FLAME_X, _FLAME_Y))

    def fire_bullet(self) -> Bullet:
        """Launch a bullet from the nose of the plane and return it."""
        start = Point(self.ref.x + self.width // 2 - 5, self.ref.y)
        bullet = Bullet(self.game, start)
        self.bullets.append(bullet)
        return bullet

    def move_bullets(self, speed: int) -> None:
        """Move every bullet up the screen by ``speed`` pixels."""
        for bullet in self.bullets:
            bullet.ref.y -= speed

    def draw_bullets(self, canvas) -> None:
        """Draw every bullet in flight."""
        for bullet in self.bullets:
            bullet.draw()

    def increase_fuel(self) -> None:
        """Add one tank's worth of fuel."""
        self.fuel += 10

    def collision_action(self) -> None:
        """Lose a life; announce the end of the game when none are left."""
        self.num_lives -= 1
        if self.num_lives == 0:
            self.game.print_message("Game Over")