"""Drawing surfaces: an abstract canvas and its pygame implementation."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from pathlib import Path
from typing import Sequence, Union

import pygame

_ColorSpec = Union[str, tuple]

_KEY_NAMES = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_ESCAPE: "escape",
    pygame.K_RETURN: "enter",
    pygame.K_BACKSPACE: "backspace",
}


class DrawStyle(Enum):
    """How a closed shape is rendered."""

    FILLED = "filled"
    FRAME = "frame"


class Canvas(ABC):
    """A window that shapes and text can be drawn on and keys read from."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Width of the drawing area in pixels."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Height of the drawing area in pixels."""

    @abstractmethod
    def set_pen(self, color: _ColorSpec, width: int = 1) -> None:
        """Set the colour and width used for outlines, lines and text."""

    @abstractmethod
    def set_brush(self, color: _ColorSpec) -> None:
        """Set the colour used to fill shapes."""

    @abstractmethod
    def set_font(self, size: int, bold: bool = False, italic: bool = False,
                 name: str = "Arial") -> None:
        """Choose the font for later text."""

    @abstractmethod
    def set_title(self, title: str) -> None:
        """Change the window title."""

    @abstractmethod
    def draw_rectangle(self, x1, y1, x2, y2, style: DrawStyle = DrawStyle.FILLED) -> None:
        """Draw a rectangle between two opposite corners."""

    @abstractmethod
    def draw_circle(self, x, y, radius, style: DrawStyle = DrawStyle.FILLED) -> None:
        """Draw a circle around a centre point."""

    @abstractmethod
    def draw_polygon(self, xs: Sequence, ys: Sequence,
                     style: DrawStyle = DrawStyle.FILLED) -> None:
        """Draw a polygon from parallel coordinate sequences."""

    @abstractmethod
    def draw_triangle(self, x1, y1, x2, y2, x3, y3,
                      style: DrawStyle = DrawStyle.FILLED) -> None:
        """Draw a triangle through three points."""

    @abstractmethod
    def draw_line(self, x1, y1, x2, y2) -> None:
        """Draw a straight line with the pen."""

    @abstractmethod
    def draw_arc(self, x1, y1, x2, y2, start_angle, end_angle) -> None:
        """Draw an elliptic arc inside a bounding box; angles in degrees."""

    @abstractmethod
    def draw_string(self, x, y, text) -> None:
        """Write text with its top-left corner at the given point."""

    @abstractmethod
    def draw_image(self, path, x, y, width, height) -> None:
        """Draw an image file scaled into the given box."""

    @abstractmethod
    def poll_key(self) -> str | None:
        """Return the next pending key name, or None when there is none."""

    @abstractmethod
    def update(self) -> None:
        """Show everything drawn since the last update."""

    @abstractmethod
    def close(self) -> None:
        """Release the window."""

    def __enter__(self) -> "Canvas":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class PygameCanvas(Canvas):
    """A canvas backed by a pygame display window.

    Keys are reported as "left", "right", "up", "down", "escape", "enter",
    "backspace", "quit" for a closed window, or the typed character.
    """

    def __init__(self, width: int, height: int, title: str = "River Raid") -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        pygame.display.init()
        pygame.font.init()
        self._surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self._pen = pygame.Color("black")
        self._pen_width = 1
        self._brush = pygame.Color("black")
        self.font_name = "Arial"
        self._font = pygame.font.Font(None, 24)
        self._images: dict[str, pygame.Surface] = {}
        self._keys: deque[str] = deque()

    @property
    def width(self) -> int:
        return self._surface.get_width()

    @property
    def height(self) -> int:
        return self._surface.get_height()

    def set_pen(self, color: _ColorSpec, width: int = 1) -> None:
        self._pen = pygame.Color(color)
        self._pen_width = max(1, int(width))

    def set_brush(self, color: _ColorSpec) -> None:
        self._brush = pygame.Color(color)

    def set_font(self, size: int, bold: bool = False, italic: bool = False,
                 name: str = "Arial") -> None:
        self.font_name = name
        self._font = pygame.font.Font(None, int(size))
        self._font.set_bold(bold)
        self._font.set_italic(italic)

    def set_title(self, title: str) -> None:
        pygame.display.set_caption(title)

    @staticmethod
    def _box(x1, y1, x2, y2) -> pygame.Rect:
        x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
        return pygame.Rect(min(x1, x2), min(y1, y2), abs(x2 - x1), abs(y2 - y1))

    def draw_rectangle(self, x1, y1, x2, y2, style: DrawStyle = DrawStyle.FILLED) -> None:
        rect = self._box(x1, y1, x2, y2)
        if style is DrawStyle.FILLED:
            pygame.draw.rect(self._surface, self._brush, rect)
        pygame.draw.rect(self._surface, self._pen, rect, self._pen_width)

    def draw_circle(self, x, y, radius, style: DrawStyle = DrawStyle.FILLED) -> None:
        centre = (int(x), int(y))
        radius = int(radius)
        if style is DrawStyle.FILLED:
            pygame.draw.circle(self._surface, self._brush, centre, radius)
        pygame.draw.circle(self._surface, self._pen, centre, radius, self._pen_width)

    def draw_polygon(self, xs: Sequence, ys: Sequence,
                     style: DrawStyle = DrawStyle.FILLED) -> None:
        points = [(int(x), int(y)) for x, y in zip(xs, ys, strict=True)]
        if len(points) < 3:
            raise ValueError("a polygon needs at least three points")
        if style is DrawStyle.FILLED:
            pygame.draw.polygon(self._surface, self._brush, points)
        pygame.draw.polygon(self._surface, self._pen, points, self._pen_width)

    def draw_triangle(self, x1, y1, x2, y2, x3, y3,
                      style: DrawStyle = DrawStyle.FILLED) -> None:
        self.draw_polygon((x1, x2, x3), (y1, y2, y3), style)

    def draw_line(self, x1, y1, x2, y2) -> None:
        pygame.draw.line(self._surface, self._pen, (int(x1), int(y1)),
                         (int(x2), int(y2)), self._pen_width)

    def draw_arc(self, x1, y1, x2, y2, start_angle, end_angle) -> None:
        pygame.draw.arc(self._surface, self._pen, self._box(x1, y1, x2, y2),
                        math.radians(start_angle), math.radians(end_angle),
                        self._pen_width)

    def draw_string(self, x, y, text) -> None:
        rendered = self._font.render(str(text), True, self._pen)
        self._surface.blit(rendered, (int(x), int(y)))

    def draw_image(self, path, x, y, width, height) -> None:
        key = str(Path(path))
        if key not in self._images:
            self._images[key] = pygame.image.load(key)
        scaled = pygame.transform.scale(self._images[key], (int(width), int(height)))
        self._surface.blit(scaled, (int(x), int(y)))

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the RGB colour at a point of the drawing area."""
        return tuple(self._surface.get_at((x, y)))[:3]

    def poll_key(self) -> str | None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._keys.append("quit")
            elif event.type == pygame.KEYDOWN:
                name = _KEY_NAMES.get(event.key) or getattr(event, "unicode", "")
                if name:
                    self._keys.append(name)
        return self._keys.popleft() if self._keys else None

    def update(self) -> None:
        pygame.display.flip()

    def close(self) -> None:
        self._images.clear()
        pygame.display.quit()