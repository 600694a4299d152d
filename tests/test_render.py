import pygame
import pytest
from pygame import Rect

from endgame import render
from endgame.assets import Assets
from endgame.constants import resource_path
from endgame.entities import Obstacle

COLORS = {
    "sprite.png": (255, 0, 0),
    "server.png": (0, 0, 255),
    "server_broken1.png": (0, 255, 0),
    "server_broken2.png": (255, 255, 0),
    "server_ring.png": (255, 0, 255),
    "button.png": (0, 255, 255),
    "server_blink1.png": (255, 255, 255),
    "server_blink2.png": (128, 0, 0),
    "server_blink3.png": (0, 128, 0),
}


class FakeRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value


@pytest.fixture
def assets(tmp_path):
    folder = tmp_path / "resource"
    folder.mkdir()
    for name, color in COLORS.items():
        surface = pygame.Surface((2, 2))
        surface.fill(color)
        pygame.image.save(surface, str(folder / name))
    return Assets(tmp_path, audio=False, font_file=None)


def _canvas():
    return pygame.Surface((1280, 720))


def test_draw_sprite_stretches_into_rect(assets):
    surface = pygame.Surface((20, 20))
    drawn = render.draw_sprite(surface, assets, resource_path("sprite.png"), (10, 10, 5, 5))
    assert drawn == Rect(10, 10, 5, 5)
    assert surface.get_at((14, 14))[:3] == COLORS["sprite.png"]
    assert surface.get_at((15, 15))[:3] == (0, 0, 0)


def test_draw_sprite_without_rect_covers_surface(assets):
    surface = pygame.Surface((20, 20))
    drawn = render.draw_sprite(surface, assets, resource_path("sprite.png"))
    assert drawn == surface.get_rect()
    assert surface.get_at((19, 19))[:3] == COLORS["sprite.png"]


def test_draw_text_stays_inside_rect(assets):
    surface = pygame.Surface((300, 100))
    rect = Rect(0, 0, 200, 50)
    render.draw_text(surface, assets, rect, "HP: 1000")
    inside = [
        surface.get_at((x, y))[:3] for x in range(rect.w) for y in range(rect.h)
    ]
    assert inside.count(render.TEXT_COLOR) > 0
    assert surface.get_at((250, 75))[:3] == (0, 0, 0)


@pytest.mark.parametrize(
    "phase, name", [(0, "server_broken1.png"), (1, "server_broken2.png")]
)
def test_draw_server_overlay_alternates(assets, phase, name):
    surface = _canvas()
    server = Obstacle(Rect(601, 10, 76, 224))
    assert render.draw_server(surface, assets, server, phase) == resource_path(name)
    assert surface.get_at(server.rect.center)[:3] == COLORS[name]


def test_draw_gold_ring_surrounds_server(assets):
    surface = _canvas()
    server = Obstacle(Rect(601, 10, 76, 224))
    ring = render.draw_gold_ring(surface, assets, server)
    assert ring.contains(server.rect)
    assert ring.center == server.rect.center
    assert surface.get_at((ring.x, ring.y))[:3] == COLORS["server_ring.png"]
    assert surface.get_at(render.BUTTON_RECT.center)[:3] == COLORS["button.png"]


def test_blink_skipped_on_high_roll(assets):
    surface = _canvas()
    assert render.draw_server_blink(surface, assets, FakeRng(5)) is None
    assert surface.get_at((640, 360))[:3] == (0, 0, 0)


def test_blink_shows_chosen_light(assets):
    surface = _canvas()
    shown = render.draw_server_blink(surface, assets, FakeRng(1))
    assert shown == resource_path("server_blink2.png")
    assert surface.get_at((640, 360))[:3] == COLORS["server_blink2.png"]