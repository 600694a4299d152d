"""Hero movement: obstacle checks, walking animation and facing."""

from endgame.constants import (
    GG_HEIGHT,
    GG_WIDTH,
    MC_DOWN_MOVE1,
    MC_DOWN_MOVE2,
    MC_DOWN_STAND,
    MC_LEFT_MOVE1,
    MC_LEFT_MOVE2,
    MC_LEFT_STAND,
    MC_RIGHT_MOVE1,
    MC_RIGHT_MOVE2,
    MC_RIGHT_STAND,
    MC_UP_MOVE1,
    MC_UP_MOVE2,
    MC_UP_STAND,
    SCR_HEIGHT,
    SCR_WIDTH,
)

UP = "w"
DOWN = "s"
LEFT = "a"
RIGHT = "d"

# Keys are handled in this order; the last one that moves wins.
MOVE_ORDER = (UP, DOWN, LEFT, RIGHT)

WALK_FRAMES_PER_SECOND = 22
HEAD_OFFSET = 50
EDGE_MARGIN = 5

_STEP = {UP: (0, -1), DOWN: (0, 1), LEFT: (-1, 0), RIGHT: (1, 0)}

_STAND = {
    UP: MC_UP_STAND,
    DOWN: MC_DOWN_STAND,
    LEFT: MC_LEFT_STAND,
    RIGHT: MC_RIGHT_STAND,
}

_WALK = {
    DOWN: (MC_DOWN_MOVE1, MC_DOWN_STAND, MC_DOWN_MOVE2),
    UP: (MC_UP_MOVE1, MC_UP_STAND, MC_UP_MOVE2),
    LEFT: (MC_LEFT_MOVE1, MC_LEFT_STAND, MC_LEFT_MOVE2),
    RIGHT: (MC_RIGHT_MOVE1, MC_RIGHT_STAND, MC_RIGHT_MOVE2),
}


def _within(value, start, length):
    return start <= value <= start + length


def _shares_column(x, rect):
    probes = (x, x + GG_WIDTH, x + GG_WIDTH // 2)
    return any(_within(p, rect.x, rect.w) for p in probes)


def _shares_row(y, rect):
    probes = (y + GG_HEIGHT, y + HEAD_OFFSET)
    return any(_within(p, rect.y, rect.h) for p in probes)


def check_collision(hero, obstacles, key):
    """Return whether a step in the direction of key would be blocked."""
    r = hero.rect
    sx, sy = hero.speed_x, hero.speed_y
    if key == UP:
        if r.y - EDGE_MARGIN < 0:
            return True
        probe = r.y + HEAD_OFFSET - sy
        return any(
            _shares_column(r.x, o.rect)
            and o.rect.y + o.rect.h - sy * 2 <= probe <= o.rect.y + o.rect.h
            for o in obstacles
        )
    if key == DOWN:
        if r.y + GG_HEIGHT + EDGE_MARGIN > SCR_HEIGHT:
            return True
        probe = r.y + GG_HEIGHT + sy
        return any(
            _shares_column(r.x, o.rect) and o.rect.y <= probe <= o.rect.y + sy * 2
            for o in obstacles
        )
    if key == LEFT:
        if r.x - EDGE_MARGIN < 0:
            return True
        probe = r.x - sx
        return any(
            _shares_row(r.y, o.rect)
            and o.rect.x + o.rect.w - sx * 2 <= probe <= o.rect.x + o.rect.w
            for o in obstacles
        )
    if key == RIGHT:
        if r.x + GG_WIDTH + EDGE_MARGIN > SCR_WIDTH:
            return True
        probe = r.x + GG_WIDTH + sx
        return any(
            _shares_row(r.y, o.rect) and o.rect.x <= probe <= o.rect.x + sx * 2
            for o in obstacles
        )
    raise ValueError(f"unknown direction key: {key!r}")


def move_hero(hero, pressed, obstacles, ticks):
    """Move the hero for every held direction key that is not blocked.

    pressed holds the direction keys ("w", "a", "s", "d") that are down.
    Returns the last direction moved in, or None if the hero did not move.
    """
    moved = None
    for key in MOVE_ORDER:
        if key not in pressed or check_collision(hero, obstacles, key):
            continue
        hero.sprite = walk_sprite(key, ticks)
        dx, dy = _STEP[key]
        hero.rect.x += dx * hero.speed_x
        hero.rect.y += dy * hero.speed_y
        moved = key
    return moved


def direction_towards(mouse_x, mouse_y, hero):
    """Return the direction key the hero should face to look at the mouse."""
    xv = mouse_x - hero.rect.x
    yv = mouse_y - hero.rect.y
    if abs(xv) >= abs(yv):
        return RIGHT if xv >= 0 else LEFT
    return DOWN if yv >= 0 else UP


def stand_sprite(direction):
    """Return the standing sprite for a direction key."""
    try:
        return _STAND[direction]
    except KeyError:
        raise ValueError(f"unknown direction key: {direction!r}") from None


def walk_sprite(direction, ticks):
    """Return the walking frame for a direction key at a time in milliseconds."""
    try:
        frames = _WALK[direction]
    except KeyError:
        raise ValueError(f"unknown direction key: {direction!r}") from None
    return frames[ticks * WALK_FRAMES_PER_SECOND // 1000 % len(frames)]