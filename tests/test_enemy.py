import random

import pytest

from riverraid.bullet import Bullet
from riverraid.config import GameConfig
from riverraid.enemy import (
    ENEMY_COLORS,
    Bridge,
    EnemyHelicopter,
    EnemyManager,
    EnemyPlane,
    Ship,
    Tank,
)
from riverraid.objects import Point


class RecordingCanvas:
    width = 1200
    height = 600

    def __init__(self):
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, args))

    def set_pen(self, color, width=1):
        self._record("set_pen", color, width)

    def set_brush(self, color):
        self._record("set_brush", color)

    def set_font(self, size, bold=False, italic=False, name="Arial"):
        self._record("set_font", size)

    def draw_rectangle(self, x1, y1, x2, y2, style=None):
        self._record("rectangle", x1, y1, x2, y2)

    def draw_circle(self, x, y, radius, style=None):
        self._record("circle", x, y, radius)

    def draw_polygon(self, xs, ys, style=None):
        self._record("polygon", list(xs), list(ys))

    def draw_triangle(self, x1, y1, x2, y2, x3, y3, style=None):
        self._record("triangle", x1, y1, x2, y2, x3, y3)

    def draw_line(self, x1, y1, x2, y2):
        self._record("line", x1, y1, x2, y2)

    def draw_arc(self, x1, y1, x2, y2, start, end):
        self._record("arc", x1, y1, x2, y2, start, end)

    def draw_string(self, x, y, text):
        self._record("string", x, y, text)

    def count(self, name):
        return sum(1 for call, _ in self.calls if call == name)

    def of(self, name):
        return [args for call, args in self.calls if call == name]


class FakePlayer:
    def __init__(self):
        self.bullets = []


class FakeGame:
    def __init__(self):
        self.canvas = RecordingCanvas()
        self.config = GameConfig()
        self.player = FakePlayer()
        self.rng = random.Random(0)


@pytest.fixture
def game():
    return FakeGame()


@pytest.fixture
def manager(game):
    return EnemyManager(game, random.Random(1234))


def test_set_size_makes_square(game):
    tank = Tank(game, Point(0, 0), 0, 0)
    tank.set_size(120)
    assert (tank.width, tank.height) == (120, 120)


def test_update_spawns_level_plus_speed_of_each_kind(manager):
    manager.update(0, 2)
    assert len(manager.tanks) == 2
    assert len(manager.bridges) == 2
    assert len(manager.ships) == 2
    assert len(manager.jets) == 2
    assert len(manager.helis) == 2
    kinds = [type(e) for e in manager.all_enemies()]
    assert kinds == [Tank] * 2 + [Bridge] * 2 + [Ship] * 2 + [EnemyPlane] * 2 + [EnemyHelicopter] * 2


def test_update_appends_to_existing_wave(manager):
    manager.update(0, 2)
    manager.update(1, 2)
    assert len(manager.all_enemies()) == 5 * (2 + 3)


def test_spawn_positions_within_bounds(manager):
    manager.update(3, 4)
    for tank in manager.tanks:
        assert 50 <= tank.width < 300
        assert 280 <= tank.ref.x < 920
        assert -900 <= tank.ref.y < -tank.height
    for bridge in manager.bridges:
        assert bridge.ref.x == 280
        assert (bridge.width, bridge.height) == (640, 256)
        assert -900 <= bridge.ref.y < 0
    for ship in manager.ships:
        assert 50 <= ship.width <= 300
        assert 280 <= ship.ref.x < 920 - ship.width
    for jet in manager.jets:
        assert jet.ref.x == -100
        assert -900 <= jet.ref.y < 0
    for heli in manager.helis:
        assert 280 <= heli.ref.x < 920
    assert all(e.fill_color in ENEMY_COLORS for e in manager.all_enemies())


def test_min_current_y_is_highest_enemy(manager):
    manager.update(0, 2)
    assert manager.min_current_y == min(e.ref.y for e in manager.all_enemies())


def test_update_is_deterministic_for_seed(game):
    first = EnemyManager(game, random.Random(7))
    second = EnemyManager(game, random.Random(7))
    first.update(0, 3)
    second.update(0, 3)
    assert [(e.ref.x, e.ref.y, e.width, e.fill_color) for e in first.all_enemies()] == \
        [(e.ref.x, e.ref.y, e.width, e.fill_color) for e in second.all_enemies()]


def test_clear_removes_everything(manager):
    manager.update(0, 2)
    manager.clear()
    assert manager.all_enemies() == []
    assert manager.count_per_kind == 0


def test_move_forward_scrolls_all(manager):
    manager.update(0, 2)
    before = [(e.ref.x, e.ref.y) for e in manager.all_enemies()]
    top = manager.min_current_y
    manager.move_forward(3)
    after = [(e.ref.x, e.ref.y) for e in manager.all_enemies()]
    assert all(ay == by + 3 for (_, by), (_, ay) in zip(before, after))
    assert manager.min_current_y == top + 3
    stationary = len(manager.tanks) + len(manager.bridges) + len(manager.ships)
    assert all(ax == bx for (bx, _), (ax, _) in zip(before[:stationary], after[:stationary]))


def test_is_out(manager):
    manager.update(0, 2)
    assert not manager.is_out(600)
    manager.move_forward(600 - manager.min_current_y + 1)
    assert manager.is_out(600)


def test_plane_moves_only_below_top(game):
    jet = EnemyPlane(game, Point(10, 0), 0, 0)
    jet.move_sideways()
    assert jet.ref.x == 10
    jet.ref.y = 1
    jet.move_sideways()
    assert jet.ref.x == 15


def test_helicopter_turns_at_river_edge(game):
    heli = EnemyHelicopter(game, Point(918, 0), 0, 0)
    heli.move_sideways()
    assert heli.ref.x == 923
    heli.move_sideways()
    assert heli.ref.x == 918
    above = EnemyHelicopter(game, Point(500, -1), 0, 0)
    above.move_sideways()
    assert above.ref.x == 500


def test_collision_removes_touching_bullet(game):
    tank = Tank(game, Point(100, 100), 50, 50)
    game.player.bullets.append(Bullet(game, Point(110, 110)))
    tank.collision_action()
    assert game.player.bullets == []


def test_collision_keeps_distant_bullet(game):
    tank = Tank(game, Point(100, 100), 50, 50)
    far = Bullet(game, Point(500, 500))
    game.player.bullets.append(far)
    tank.collision_action()
    assert game.player.bullets == [far]


def test_collision_removes_oldest_bullet(game):
    tank = Tank(game, Point(100, 100), 50, 50)
    far = Bullet(game, Point(500, 500))
    near = Bullet(game, Point(110, 110))
    game.player.bullets.extend([far, near])
    tank.collision_action()
    assert game.player.bullets == [near]


def test_tank_draw_at_base_size_uses_outline(game):
    tank = Tank(game, Point(10, 20), 500, 500)
    tank.draw()
    canvas = game.canvas
    assert canvas.count("polygon") == 5
    assert canvas.count("circle") == 3
    assert canvas.count("rectangle") == 1
    xs, ys = canvas.of("polygon")[0]
    assert xs == [75, 148, 435, 444, 429, 86]
    assert ys == [291, 253, 254, 282, 309, 312]


def test_bridge_draw_shapes(game):
    Bridge(game, Point(0, 0), 500, 500).draw()
    canvas = game.canvas
    assert canvas.count("polygon") == 2
    assert canvas.count("line") == 9
    assert canvas.of("line")[-1] == (360, 240, 360, 150)


def test_ship_draw_shapes(game):
    Ship(game, Point(0, 0), 500, 251).draw()
    canvas = game.canvas
    assert canvas.count("polygon") == 2
    assert canvas.count("circle") == 2
    assert canvas.count("line") == 3
    assert canvas.count("triangle") == 1
    assert canvas.of("arc") == [(200, 10, 240, 60, 180, 270)]


def test_plane_and_helicopter_draw_shapes(game):
    EnemyPlane(game, Point(100, 100), 0, 0).draw()
    assert game.canvas.count("polygon") == 4
    assert game.canvas.count("rectangle") == 1
    game.canvas.calls.clear()
    EnemyHelicopter(game, Point(100, 100), 0, 0, "red").draw()
    assert game.canvas.count("rectangle") == 5
    assert game.canvas.of("circle") == [(100, 100, 12)]


def test_view_draws_every_enemy(manager, game):
    manager.update(0, 1)
    manager.view(game.canvas)
    # tank 5, bridge 2, ship 2, plane 4, helicopter 0 polygons
    assert game.canvas.count("polygon") == 13


def test_update_rejects_too_small_spawn_area(game):
    manager = EnemyManager(game, random.Random(0))
    manager.max_x = manager.min_x
    with pytest.raises(ValueError):
        manager.update(0, 1)