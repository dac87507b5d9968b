"""A River Raid style arcade game drawn with pygame."""

__version__ = "0.1.0"
__all__ = [
    "background",
    "bullet",
    "canvas",
    "config",
    "enemy",
    "fuel",
    "game",
    "objects",
    "player",
    "statusbar",
    "toolbar",
]