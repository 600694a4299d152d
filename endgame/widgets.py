"""Clickable menu buttons."""

from dataclasses import dataclass
from typing import Optional

from pygame import Rect

from endgame.render import draw_sprite


@dataclass
class Button:
    """An image on screen that reacts to the mouse hovering over it."""

    rect: Rect
    image: str
    hover_image: Optional[str] = None

    def __post_init__(self):
        self.rect = Rect(self.rect)

    def is_hovered(self, mouse_x, mouse_y):
        """Return whether the mouse is strictly inside the button."""
        r = self.rect
        return r.x < mouse_x < r.x + r.w and r.y < mouse_y < r.y + r.h

    def current_image(self, mouse_x, mouse_y):
        """Return the image to show for the given mouse position."""
        if self.hover_image is not None and self.is_hovered(mouse_x, mouse_y):
            return self.hover_image
        return self.image

    def draw(self, surface, assets, mouse_x, mouse_y):
        """Draw the button and return the image used."""
        path = self.current_image(mouse_x, mouse_y)
        draw_sprite(surface, assets, path, self.rect)
        return path