"""Obstacle layouts of the three maps and map-related placement helpers."""

from pygame import Rect

from endgame.constants import SCR_HEIGHT, SCR_WIDTH
from endgame.entities import Obstacle

SPAWN_MARGIN = 50

_MAP1 = (
    (0, 165, 53, 36),
    (31, 586, 77, 50),
    (348, 391, 40, 50),
    (476, 391, 187, 50),
    (710, 185, 187, 50),
    (966, 391, 187, 50),
    (1214, 391, 40, 50),
    (1169, 146, 67, 50),
)

_MAP2 = (
    (111, 439, 183, 72),
    (549, 439, 183, 72),
    (987, 439, 183, 72),
    (354, 182, 183, 72),
    (743, 182, 183, 72),
    (0, 182, 149, 72),
    (1169, 182, 147, 72),
)

_MAP3 = (
    (10, 174, 228, 60),
    (1041, 174, 228, 60),
    (176, 489, 228, 60),
    (876, 489, 228, 60),
)

_SERVER = (601, 10, 76, 224)
_SERVER_ZONE_X = (509, 713)
_SERVER_ZONE_Y = (122, 271)


def _obstacles(layout):
    # Each obstacle is put at the front, so the last listed comes first.
    return [Obstacle(Rect(*box)) for box in reversed(layout)]


def obstacles_map1():
    """Return the obstacles of the park map."""
    return _obstacles(_MAP1)


def obstacles_map2():
    """Return the obstacles of the campus map."""
    return _obstacles(_MAP2)


def obstacles_map3():
    """Return the obstacles of the server room map."""
    return _obstacles(_MAP3)


def server_obstacle():
    """Return the area taken by the server on the third map."""
    return Obstacle(Rect(*_SERVER))


def hero_near_server(hero):
    """Return whether the hero stands close enough to reach the server."""
    x, y = hero.rect.x, hero.rect.y
    return (
        _SERVER_ZONE_X[0] <= x <= _SERVER_ZONE_X[1]
        and _SERVER_ZONE_Y[0] <= y <= _SERVER_ZONE_Y[1]
    )


def _blocked(x, y, obstacles):
    if x > SCR_WIDTH - SPAWN_MARGIN or y > SCR_HEIGHT - SPAWN_MARGIN:
        return True
    return any(
        o.rect.x <= x <= o.rect.x + o.rect.w and o.rect.y <= y <= o.rect.y + o.rect.h
        for o in obstacles
    )


def random_enemy_position(obstacles, rng):
    """Pick a random on-screen point outside every obstacle."""
    while True:
        x = rng.randrange(SCR_WIDTH)
        y = rng.randrange(SCR_HEIGHT)
        if not _blocked(x, y, obstacles):
            return x, y