"""Enemies on the river and the manager that spawns and moves them."""

from __future__ import annotations

import math
import random
from typing import Iterator, Sequence

from riverraid.canvas import DrawStyle
from riverraid.objects import GameObject, Point

ENEMY_COLORS = ("black", "blue", "red", "greenyellow")


def _place(xs: Sequence[int], ys: Sequence[int], scale_x: float, scale_y: float,
           origin_x: int, origin_y: int) -> tuple[list[int], list[int]]:
    """Scale outline coordinates (truncating to whole pixels) and shift them."""
    return ([int(v * scale_x) + origin_x for v in xs],
            [int(v * scale_y) + origin_y for v in ys])


class Enemy(GameObject):
    """An enemy that is destroyed along with any player bullet it meets."""

    def __init__(self, game, ref: Point, width: int, height: int,
                 color: str = "black") -> None:
        super().__init__(game, ref, width, height, color, "black")
        self.base_width = 0.0
        self.base_height = 0.0

    def set_size(self, size: int) -> None:
        """Make the enemy a square of the given side."""
        self.width = size
        self.height = size

    def collision_action(self) -> None:
        """Remove a player bullet for every bullet found touching this enemy."""
        bullets = self.game.player.bullets
        index = 0
        while index < len(bullets):
            if self.collides_with(bullets[index]):
                del bullets[0]
                continue
            index += 1


class Tank(Enemy):
    """A tank drawn from a 500 x 500 outline."""

    def __init__(self, game, ref: Point, width: int, height: int,
                 color: str = "black") -> None:
        super().__init__(game, ref, width, height, color)
        self.base_width = 500.0
        self.base_height = 500.0

    def draw(self) -> None:
        canvas = self.canvas
        canvas.set_pen(self.fill_color, 3)
        canvas.set_brush(self.fill_color)
        x, y = self.ref.x, self.ref.y
        sx = self.width / self.base_width
        sy = self.height / self.base_height

        turret = _place((220, 240, 350, 370), (195, 145, 145, 195), sx, sy, x, y)
        barrel = _place((163, 227, 226, 163), (163, 164, 173, 174), sx, sy, x, y)
        hull = _place((171, 205, 417, 423), (229, 205, 205, 230), sx, sy, x, y)
        base = _place((65, 138, 425, 434, 419, 76),
                      (271, 233, 234, 262, 289, 292), sx, sy, x, y)
        tracks = _place((101, 87, 134, 357, 416, 404, 355, 138),
                        (299, 299, 353, 354, 298, 297, 343, 344), sx, sy, x, y)

        for xs, ys in (base, hull, turret, barrel):
            canvas.draw_polygon(xs, ys)

        canvas.draw_rectangle(
            int(120 * self.width / self.base_width + x),
            int(177 * self.height / self.base_height + y),
            int(156 * self.width / self.base_width + x),
            int(156 * self.height / self.base_height + y),
        )
        canvas.draw_polygon(*tracks)

        diagonal = math.sqrt(self.width ** 2 + self.height ** 2)
        radius = int(27 * diagonal / self.base_width)
        for wheel_x in (155, 249, 343):
            canvas.draw_circle(
                int(wheel_x * self.width / self.base_width + x),
                int(300 * self.height / self.base_height + y),
                radius,
            )


class Bridge(Enemy):
    """A truss bridge spanning the river."""

    _TOTAL = 500

    def draw(self) -> None:
        canvas = self.canvas
        canvas.set_pen(self.fill_color, 3)
        canvas.set_brush(self.fill_color)
        x, y = self.ref.x, self.ref.y
        sx = self.width / self._TOTAL
        sy = self.height / self._TOTAL

        deck = _place((35, 35, 460, 460), (270, 240, 240, 270), sx, sy, x, y)
        arch = _place((65, 120, 370, 435, 410, 360, 135, 90),
                      (240, 135, 135, 240, 240, 155, 155, 240), sx, sy, x, y)
        posts, levels = _place((135, 190, 250, 310, 360), (240, 150), sx, sy, x, y)

        canvas.draw_polygon(*deck)
        canvas.draw_polygon(*arch)

        low, high = levels
        for index, (left, right) in enumerate(zip(posts, posts[1:])):
            canvas.draw_line(left, low, left, high)
            start, end = (low, high) if index % 2 == 0 else (high, low)
            canvas.draw_line(left, start, right, end)
        canvas.draw_line(posts[-1], low, posts[-1], high)


class Ship(Enemy):
    """A warship with two guns and a radar mast."""

    _TOTAL_X = 500
    _TOTAL_Y = 251

    def draw(self) -> None:
        canvas = self.canvas
        canvas.set_pen(self.fill_color, 3)
        canvas.set_brush(self.fill_color)
        x, y = self.ref.x, self.ref.y
        sx = self.width / self._TOTAL_X
        sy = self.height / self._TOTAL_Y
        total_diagonal = int(math.sqrt(self._TOTAL_X ** 2 + self._TOTAL_Y ** 2))

        hull = _place(
            (80, 80, 65, 70, 420, 420, 450, 400, 400, 360, 360, 310, 305, 175,
             170, 145, 145, 105, 105),
            (160, 180, 205, 220, 220, 195, 160, 155, 145, 145, 155, 155, 125, 125,
             155, 155, 140, 140, 155),
            sx, sy, x, y,
        )
        canvas.draw_polygon(*hull)

        def px(v: float) -> int:
            return int(v * sx + x)

        def py(v: float) -> int:
            return int(v * sy + y)

        diagonal = int(math.sqrt(self.width ** 2 + self.height ** 2))
        gun_radius = int(15 * diagonal / total_diagonal)
        canvas.draw_circle(px(125), py(140), gun_radius)
        canvas.draw_circle(px(380), py(145), gun_radius)
        canvas.draw_line(px(385), py(140), px(420), py(115))
        canvas.draw_line(px(120), py(135), px(85), py(115))

        mast = _place((290, 285, 215, 215, 185, 175), (125, 105, 105, 85, 85, 125),
                      sx, sy, x, y)
        canvas.draw_polygon(*mast)
        canvas.draw_triangle(px(195), py(85), px(205), py(50), px(210), py(85),
                             DrawStyle.FRAME)
        canvas.draw_arc(px(200), py(10), px(240), py(60), 180, 270)
        canvas.draw_line(px(200), py(30), px(225), py(60))


class EnemyPlane(Enemy):
    """A jet that crosses the river sideways once it is on screen."""

    def __init__(self, game, ref: Point, width: int, height: int,
                 color: str = "black") -> None:
        super().__init__(game, ref, width, height, color)
        self.sideways_speed = 5
        self.scale = 0.25

    def draw(self) -> None:
        canvas = self.canvas
        canvas.set_pen("black")
        canvas.set_brush(self.fill_color)
        s = self.scale
        body_w = int(50 * s)
        body_h = int(190 * s)
        x, y = self.ref.x, self.ref.y
        canvas.draw_rectangle(x - body_h, y - body_w, x, y)

        def ints(*values: float) -> list[int]:
            return [int(v) for v in values]

        canvas.draw_polygon(
            ints(x - 20 * s, x - 40 * s, x - 100 * s, x - 80 * s),
            ints(y, y + 100 * s, y + 100 * s, y),
            DrawStyle.FILLED,
        )
        canvas.draw_polygon(
            ints(x - 20 * s, x - 80 * s, x - 100 * s, x - 40 * s),
            ints(y - (body_w - 1), y - (body_w - 1),
                 y - (body_w + 100 * s - 1), y - (body_w + 100 * s - 1)),
            DrawStyle.FILLED,
        )
        canvas.draw_polygon(
            ints(x - body_h + 50 * s, x - body_h + 30 * s, x - body_h - 20 * s, x - body_h),
            ints(y, y + 50 * s, y + 50 * s, y),
            DrawStyle.FILLED,
        )
        canvas.draw_polygon(
            ints(x - body_h + 50 * s, x - body_h, x - body_h - 20 * s, x - body_h + 30 * s),
            ints(y - (body_w - 1), y - (body_w - 1),
                 y - (body_w + 50 * s - 1), y - (body_w + 50 * s - 1)),
            DrawStyle.FILLED,
        )

    def move_sideways(self) -> None:
        """Fly right once below the top edge of the screen."""
        if self.ref.y > 0:
            self.ref.x += self.sideways_speed


class EnemyHelicopter(Enemy):
    """A helicopter that patrols between the river banks."""

    def __init__(self, game, ref: Point, width: int, height: int,
                 color: str = "black") -> None:
        super().__init__(game, ref, width, height, color)
        self.scale = 0.25
        self.sideways_speed = 5

    def draw(self) -> None:
        canvas = self.canvas
        s = self.scale
        x, y = self.ref.x, self.ref.y

        def rect(x1: float, y1: float, x2: float, y2: float) -> None:
            canvas.draw_rectangle(int(x1), int(y1), int(x2), int(y2))

        canvas.set_pen("black")
        canvas.set_brush("orange")
        rect(x - 80 * s, y - 70 * s, x + 80 * s, y - (70 - 20) * s)
        rect(x - 10 * s, y - 80 * s, x + 10 * s, y + 80 * s)
        canvas.set_brush("black")
        rect(x - 150 * s, y + 10 * s, x + 70 * s, y - 10 * s)
        rect(x - 140 * s, y - 20 * s, x - 130 * s, y + 20 * s)
        rect(x - 40 * s, y + 60 * s, x + 40 * s, y + 80 * s)
        canvas.set_pen("black")
        canvas.set_brush(self.fill_color)
        canvas.draw_circle(x, y, int(50 * s))

    def move_sideways(self) -> None:
        """Move sideways on screen, turning back when outside the river."""
        if self.ref.y >= 0:
            self.ref.x += self.sideways_speed
            config = self.game.config
            if self.ref.x > config.end_river or self.ref.x < config.start_river:
                self.sideways_speed = -self.sideways_speed


class EnemyManager:
    """Spawns waves of enemies above the screen and scrolls them down."""

    def __init__(self, game, rng: random.Random | None = None) -> None:
        self.game = game
        self.rng = rng if rng is not None else random.Random()
        self.level = 0
        self.speed = 0
        self.count_per_kind = 0
        self.tanks: list[Tank] = []
        self.bridges: list[Bridge] = []
        self.ships: list[Ship] = []
        self.jets: list[EnemyPlane] = []
        self.helis: list[EnemyHelicopter] = []
        self.min_x = 280
        self.min_y = -900
        self.max_x = 920
        self.max_y = 0
        self.min_size = 50
        self.max_size = 300
        self.colors = ENEMY_COLORS
        self.min_current_y = 100000

    def _every_enemy(self) -> Iterator[Enemy]:
        yield from self.tanks
        yield from self.bridges
        yield from self.ships
        yield from self.jets
        yield from self.helis

    def move_forward(self, speed: int) -> None:
        """Scroll every enemy down by ``speed``; jets and helicopters also fly sideways."""
        self.min_current_y += speed
        for enemy in self._every_enemy():
            enemy.ref.y += speed
        for flyer in (*self.jets, *self.helis):
            flyer.move_sideways()

    def all_enemies(self) -> list[Enemy]:
        """Tanks, bridges, ships, jets and helicopters, in that order."""
        return list(self._every_enemy())

    def clear(self) -> None:
        """Forget every enemy."""
        for group in (self.tanks, self.bridges, self.ships, self.jets, self.helis):
            group.clear()
        self.count_per_kind = 0

    def view(self, canvas) -> None:
        """Draw every enemy."""
        for enemy in self._every_enemy():
            enemy.draw()

    def _random_below(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError("the spawn area is too small for this enemy")
        return self.rng.randrange(bound)

    def _random_y(self, enemy: Enemy) -> int:
        local_max_y = self.max_y - int(enemy.height)
        return self.min_y + self._random_below(local_max_y - self.min_y - 1)

    def _finish(self, enemy: Enemy) -> None:
        enemy.fill_color = self.colors[self._random_below(4)]
        self.min_current_y = min(self.min_current_y, enemy.ref.y)

    def update(self, speed: int, level: int) -> None:
        """Add a new wave of ``level + speed`` enemies of each kind above the screen."""
        self.min_current_y = 100000
        self.speed = speed
        self.level = level
        self.count_per_kind = level + speed
        count = self.count_per_kind

        for _ in range(count):
            tank = Tank(self.game, Point(0, 0), 0, 0)
            self.tanks.append(tank)
            tank.set_size(self.min_size
                          + self._random_below(self.max_size - self.min_size - 1))
            tank.ref.x = self.min_x + self._random_below(self.max_x - self.min_x - 1)
            tank.ref.y = self._random_y(tank)
            self._finish(tank)

        for _ in range(count):
            span = self.max_x - self.min_x
            bridge = Bridge(self.game, Point(0, 0), span, int(0.4 * span))
            self.bridges.append(bridge)
            bridge.ref.y = self._random_y(bridge)
            bridge.ref.x = self.min_x
            self._finish(bridge)

        for _ in range(count):
            ship = Ship(self.game, Point(0, 0), 0, 0)
            self.ships.append(ship)
            ship.set_size(self.min_size
                          + self._random_below(self.max_size - self.min_size + 1))
            local_max_x = self.max_x - int(ship.width)
            ship.ref.x = self.min_x + self._random_below(local_max_x - self.min_x - 1)
            ship.ref.y = self._random_y(ship)
            self._finish(ship)

        for _ in range(count):
            jet = EnemyPlane(self.game, Point(0, 0), 0, 0)
            self.jets.append(jet)
            jet.ref.x = -100
            jet.ref.y = self._random_y(jet)
            self._finish(jet)

        for _ in range(count):
            heli = EnemyHelicopter(self.game, Point(0, 0), 0, 0)
            self.helis.append(heli)
            local_max_x = self.max_x - int(heli.width)
            heli.ref.x = self.min_x + self._random_below(local_max_x - self.min_x - 1)
            heli.ref.y = self._random_y(heli)
            self._finish(heli)

    def is_out(self, height: int) -> bool:
        """Whether the highest enemy has scrolled below ``height``."""
        return self.min_current_y > height