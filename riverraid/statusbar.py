"""The status line at the bottom of the window."""

from __future__ import annotations

from riverraid.config import GameConfig


def draw_status_bar(canvas, config: GameConfig, points: int, game_speed: int,
                    lives: int, fuel_gauge: int) -> None:
    """Draw points, speed, lives and fuel on a black bar at the bottom."""
    text_y = config.wind_height - int(0.85 * config.status_bar_height)
    canvas.set_brush("black")
    canvas.set_pen("black")
    canvas.draw_rectangle(0, canvas.height - config.status_bar_height,
                          canvas.width, canvas.height)
    canvas.set_pen("blue")
    canvas.set_font(24, bold=True, italic=True, name="Arial")
    fields = (
        (10, "points:"), (80, points),
        (130, "game speed:"), (250, game_speed),
        (300, "lives:"), (350, lives),
        (400, "fuel gauge:"), (510, fuel_gauge),
    )
    for x, text in fields:
        canvas.draw_string(x, text_y, text)