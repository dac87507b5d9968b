"""The game itself: its objects, the frame loop and the command entry point."""

from __future__ import annotations

import argparse
import random
import time
from typing import Sequence

from riverraid.background import Background
from riverraid.config import GameConfig
from riverraid.enemy import EnemyManager
from riverraid.fuel import Fuel
from riverraid.objects import GameObject, Point
from riverraid.player import Player
from riverraid.statusbar import draw_status_bar
from riverraid.toolbar import ToolBar

TITLE = "River Raid"
FRAME_PAUSE = 0.02
DEFAULT_IMAGE_DIR = "."
_NUM_SEGMENTS = 3
_DIFFICULTY = 0.7
_RESPAWN_Y = -90


class Game:
    """Holds every object of a River Raid session and advances it frame by frame."""

    def __init__(self, canvas, config: GameConfig | None = None,
                 rng: random.Random | None = None) -> None:
        self.canvas = canvas
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else random.Random()
        self.toolbar = ToolBar(DEFAULT_IMAGE_DIR)
        self.background = Background()
        self.enemies = EnemyManager(self, self.rng)
        self.fuel = Fuel(self, Point(-1, -1))
        self.player = Player(self, Point(-1, -1), 100, 100)

        self.background.draw(canvas, _NUM_SEGMENTS, _DIFFICULTY)
        self.background.tree_y = 50

        self.player.ref.x = 550
        self.player.ref.y = 450

        self.fuel.place_randomly(self.config.start_river, self.config.end_river)
        self.fuel.ref.y = _RESPAWN_Y
        self.player.draw_bullets(canvas)

        self.enemies.update(0, 2)
        draw_status_bar(canvas, self.config, 0, 5, 5, 50)

    @property
    def objects(self) -> list[GameObject]:
        """Player, fuel, enemies and bullets, in the order collisions are checked."""
        return [self.player, self.fuel, *self.enemies.all_enemies(), *self.player.bullets]

    def draw(self) -> None:
        """Draw one complete frame."""
        canvas = self.canvas
        self.background.draw(canvas, _NUM_SEGMENTS, _DIFFICULTY)
        self.fuel.draw()
        self.player.draw_bullets(canvas)
        self.player.draw()
        self.enemies.view(canvas)
        draw_status_bar(canvas, self.config, 0, 5, 5, 50)
        self.toolbar.draw(canvas)

    def move_forward(self, speed: int) -> None:
        """Scroll the river by ``speed``, recycling what has left the screen."""
        height = self.canvas.height
        if self.background.tree_y > height:
            self.background.tree_y = _RESPAWN_Y
        if self.fuel.ref.y > height:
            self.fuel.ref.y = _RESPAWN_Y
            self.fuel.place_randomly(self.config.start_river, self.config.end_river)
        if self.enemies.is_out(height):
            self.enemies.clear()
            self.enemies.update(0, 2)

        self.background.tree_y += speed
        self.enemies.move_forward(speed)
        self.player.move_bullets(speed)
        self.fuel.move(speed)

    def clear_status_bar(self) -> None:
        """Blank the status bar."""
        config = self.config
        self.canvas.set_pen(config.status_bar_color, 1)
        self.canvas.set_brush(config.status_bar_color)
        self.canvas.draw_rectangle(0, config.wind_height - config.status_bar_height,
                                   config.wind_width, config.wind_height)

    def print_message(self, message: str) -> None:
        """Show a message on the status bar."""
        config = self.config
        self.clear_status_bar()
        self.canvas.set_pen(config.pen_color, 50)
        self.canvas.set_font(24, bold=True, name="Arial")
        self.canvas.draw_string(10, config.wind_height - int(0.85 * config.status_bar_height),
                                message)

    def handle_key(self, key: str | None) -> bool:
        """React to a key; return False when the player closed the window."""
        if key == "quit":
            return False
        if key == "right":
            self.player.ref.x += 5
        elif key == "left":
            self.player.ref.x -= 5
        elif key == "up":
            self.move_forward(self.config.fast_speed)
        elif key == "down":
            self.move_forward(self.config.slow_speed)
        elif key == " ":
            self.player.fire_bullet()
        return True

    def _resolve_collisions(self) -> None:
        for enemy in self.enemies.all_enemies():
            enemy.collision_action()
        objects = self.objects
        for index, obj in enumerate(objects):
            for other in objects[:index]:
                if obj.collides_with(other):
                    obj.collision_action()

    def step(self, key: str | None = None) -> bool:
        """Run one frame with an optional key; return False when the game should stop."""
        if not self.handle_key(key):
            return False
        self.draw()
        self.move_forward(self.config.normal_speed)
        self.canvas.update()
        self._resolve_collisions()
        return True

    def run(self, max_frames: int | None = None) -> int:
        """Play until the window closes or ``max_frames`` pass; return frames played."""
        self.canvas.set_title(TITLE)
        frames = 0
        while max_frames is None or frames < max_frames:
            if not self.step(self.canvas.poll_key()):
                break
            frames += 1
            time.sleep(FRAME_PAUSE)
        return frames


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and play River Raid."""
    parser = argparse.ArgumentParser(prog="riverraid", description="Play River Raid.")
    parser.add_argument("--frames", type=int, default=None,
                        help="stop after this many frames")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--images", default=DEFAULT_IMAGE_DIR,
                        help="directory of toolbar icons")
    args = parser.parse_args(argv)

    from riverraid.canvas import PygameCanvas

    config = GameConfig()
    with PygameCanvas(config.wind_width, config.wind_height, TITLE) as canvas:
        game = Game(canvas, config, random.Random(args.seed))
        game.toolbar = ToolBar(args.images)
        game.run(args.frames)
    return 0