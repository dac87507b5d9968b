"""Base classes for everything drawn on and moving around the board."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class Point:
    """A pixel position."""

    x: int
    y: int


class Drawable(ABC):
    """Something with a reference point and a size that can draw itself."""

    def __init__(self, game: Any, ref: Point, width: int, height: int) -> None:
        self.game = game
        self.ref = Point(ref.x, ref.y)
        self.width = width
        self.height = height

    @property
    def canvas(self):
        """The canvas of the game this object belongs to."""
        return self.game.canvas

    @abstractmethod
    def draw(self) -> None:
        """Draw the object on the game's canvas."""


class GameObject(Drawable):
    """A drawable with colours that can collide with other game objects."""

    def __init__(self, game: Any, ref: Point, width: int, height: int,
                 fill_color: str, border_color: str) -> None:
        super().__init__(game, ref, width, height)
        self.fill_color = fill_color
        self.border_color = border_color

    def draw(self) -> None:
        """Draw the bounding rectangle; subclasses draw their own shapes."""
        canvas = self.canvas
        canvas.set_pen(self.border_color)
        canvas.set_brush(self.fill_color)
        canvas.draw_rectangle(
            self.ref.x,
            self.ref.y,
            self.ref.x + self.width,
            self.ref.y + self.height,
        )

    def collides_with(self, other: "GameObject") -> bool:
        """Whether the bounding rectangles of the two objects overlap."""
        return (
            self.ref.x < other.ref.x + other.width
            and self.ref.x + self.width > other.ref.x
            and self.ref.y < other.ref.y + other.height
            and self.ref.y + self.height > other.ref.y
        )

    @abstractmethod
    def collision_action(self) -> None:
        """React to collisions with other objects of the game."""