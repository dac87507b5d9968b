"""Game-wide configuration values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Window geometry, colours and speeds used throughout the game."""

    wind_width: int = 1200
    wind_height: int = 600
    wx: int = 5
    wy: int = 5
    tool_bar_height: int = 50
    toolbar_item_width: int = 40
    status_bar_height: int = 50
    pen_color: str = "blue"
    background_color: str = "powderblue"
    status_bar_color: str = "black"
    pen_width: int = 3
    icon_width: int = 70
    normal_speed: int = 3
    slow_speed: int = -1
    fast_speed: int = 5
    start_river: int = 280
    end_river: int = 920

    def __post_init__(self) -> None:
        if self.wind_width <= 0 or self.wind_height <= 0:
            raise ValueError("window dimensions must be positive")
        if self.tool_bar_height < 0 or self.status_bar_height < 0:
            raise ValueError("bar heights must not be negative")
        if self.start_river >= self.end_river:
            raise ValueError("the river must start before it ends")

    @property
    def playing_area_height(self) -> int:
        """Height left between the toolbar and the status bar."""
        return self.wind_height - self.tool_bar_height - self.status_bar_height