import pygame
import pytest

from riverraid.background import Background
from riverraid.canvas import PygameCanvas


def rgb(name):
    return tuple(pygame.Color(name))[:3]


@pytest.fixture
def canvas(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    surface = PygameCanvas(1200, 600)
    yield surface
    surface.close()


def test_clear_paints_white(canvas):
    Background().clear(canvas)
    assert canvas.pixel(600, 300) == rgb("white")
    assert canvas.pixel(5, 590) == rgb("white")


def test_banks_and_river(canvas):
    Background(tree_y=200).draw(canvas, 3, 0.7)
    assert canvas.pixel(10, 550) == rgb("green")
    assert canvas.pixel(600, 300) == rgb("dodgerblue")
    assert canvas.pixel(1190, 550) == rgb("green")


def test_banks_are_symmetric(canvas):
    Background(tree_y=-500).draw(canvas, 3, 0.7)
    row = [canvas.pixel(x, 300) for x in range(1200)]
    blue = rgb("dodgerblue")
    first = row.index(blue)
    last = len(row) - 1 - row[::-1].index(blue)
    assert abs(first - (1199 - last)) <= 2


def test_tree_is_drawn_at_tree_y(canvas):
    Background(tree_y=200).draw(canvas, 3, 0.7)
    assert canvas.pixel(60, 250) == rgb("brown")
    assert canvas.pixel(60, 190) == rgb("darkolivegreen")


def test_nothing_drawn_when_banks_would_meet(canvas):
    background = Background(tree_y=200)
    background.clear(canvas)
    background.draw(canvas, 3, 2)
    assert canvas.pixel(10, 550) == rgb("white")
    assert canvas.pixel(600, 300) == rgb("white")


def test_draw_trees_alone(canvas):
    Background().draw_trees(canvas, 300, 300)
    assert canvas.pixel(310, 340) == rgb("brown")
    assert canvas.pixel(600, 100) == rgb("black")