"""The toolbar strip across the top of the window."""

from __future__ import annotations

from pathlib import Path

_IMAGE_NAMES = ("Restart.jpg", "Pause.jpg", "Resume.jpg", "Load.jpg", "Save.jpg")
_BAR_HEIGHT = 60
_ICON_SIZE = 50
_ICON_TOP = 10


class ToolBar:
    """A white bar holding the restart, pause, resume, load and save icons."""

    def __init__(self, image_dir=".") -> None:
        self.image_paths = [Path(image_dir) / name for name in _IMAGE_NAMES]

    def draw(self, canvas) -> None:
        """Draw the bar and every icon whose image file exists."""
        canvas.set_brush("white")
        canvas.set_pen("white")
        canvas.draw_rectangle(0, 0, canvas.width, _BAR_HEIGHT)
        for index, path in enumerate(self.image_paths):
            if path.is_file():
                canvas.draw_image(path, index * _ICON_SIZE, _ICON_TOP,
                                  _ICON_SIZE, _ICON_SIZE)