import pygame
import pytest
from pygame import Rect

from endgame.assets import Assets
from endgame.constants import resource_path
from endgame.widgets import Button

PLAIN = resource_path("back_butt.png")
HOVER = resource_path("back_butt_hov.png")


@pytest.fixture
def assets(tmp_path):
    folder = tmp_path / "resource"
    folder.mkdir()
    for name, color in (("back_butt.png", (255, 0, 0)), ("back_butt_hov.png", (0, 255, 0))):
        surface = pygame.Surface((2, 2))
        surface.fill(color)
        pygame.image.save(surface, str(folder / name))
    return Assets(tmp_path, audio=False)


@pytest.mark.parametrize(
    "point, expected",
    [
        ((0, 20), False),
        ((1, 11), True),
        ((120, 20), False),
        ((119, 69), True),
        ((50, 70), False),
        ((50, 10), False),
    ],
)
def test_hover_edges_are_exclusive(point, expected):
    button = Button(Rect(0, 10, 120, 60), PLAIN, HOVER)
    assert button.is_hovered(*point) is expected


def test_current_image_switches_on_hover():
    button = Button((0, 10, 120, 60), PLAIN, HOVER)
    assert button.current_image(50, 30) == HOVER
    assert button.current_image(500, 300) == PLAIN


def test_without_hover_image_stays_plain():
    button = Button((0, 10, 120, 60), PLAIN)
    assert button.current_image(50, 30) == PLAIN


def test_rect_is_copied_into_a_rect():
    button = Button((0, 10, 120, 60), PLAIN)
    assert button.rect == Rect(0, 10, 120, 60)


def test_draw_uses_hover_image(assets):
    surface = pygame.Surface((200, 100))
    button = Button((0, 10, 120, 60), PLAIN, HOVER)
    assert button.draw(surface, assets, 50, 30) == HOVER
    assert surface.get_at((60, 40))[:3] == (0, 255, 0)
    assert button.draw(surface, assets, 150, 90) == PLAIN
    assert surface.get_at((60, 40))[:3] == (255, 0, 0)