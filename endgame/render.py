"""Drawing helpers for sprites, text and the server room decorations."""

import pygame
from pygame import Rect

from endgame.constants import resource_path

TEXT_SIZE = 35
TEXT_COLOR = (255, 0, 0)

SERVER_IMAGE = resource_path("server.png")
SERVER_BROKEN1 = resource_path("server_broken1.png")
SERVER_BROKEN2 = resource_path("server_broken2.png")
SERVER_RING = resource_path("server_ring.png")
SERVER_BUTTON = resource_path("button.png")
BUTTON_RECT = Rect(587, 535, 104, 108)
RING_MARGIN = 3

BLINKS = (
    resource_path("server_blink1.png"),
    resource_path("server_blink2.png"),
    resource_path("server_blink3.png"),
)
BLINK_ODDS = 10


def draw_sprite(surface, assets, path, rect=None):
    """Draw an image stretched over rect, or over the whole surface if None."""
    image = assets.image(path)
    target = surface.get_rect() if rect is None else Rect(rect)
    if image.get_size() != target.size:
        image = pygame.transform.scale(image, target.size)
    surface.blit(image, target)
    return target


def draw_text(surface, assets, rect, text):
    """Draw text in the game font, stretched to fill rect."""
    rendered = assets.font(TEXT_SIZE).render(text, False, TEXT_COLOR)
    target = Rect(rect)
    surface.blit(pygame.transform.scale(rendered, target.size), target)
    return target


def draw_server(surface, assets, server, phase):
    """Draw the broken server; phase 0 and 1 alternate the damage overlay."""
    draw_sprite(surface, assets, SERVER_IMAGE, server.rect)
    overlay = SERVER_BROKEN1 if phase == 0 else SERVER_BROKEN2
    draw_sprite(surface, assets, overlay, server.rect)
    return overlay


def draw_gold_ring(surface, assets, server):
    """Highlight the server and show the button prompt below it."""
    ring = server.rect.inflate(RING_MARGIN * 2, RING_MARGIN * 2)
    draw_sprite(surface, assets, SERVER_RING, ring)
    draw_sprite(surface, assets, SERVER_BUTTON, BUTTON_RECT)
    return ring


def draw_server_blink(surface, assets, rng):
    """Sometimes flash one of the server lights; return the image shown or None."""
    roll = rng.randrange(BLINK_ODDS)
    if roll >= len(BLINKS):
        return None
    draw_sprite(surface, assets, BLINKS[roll])
    return BLINKS[roll]