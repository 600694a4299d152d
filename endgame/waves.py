"""Timed enemy waves for the first two levels."""

from collections import deque
from typing import NamedTuple

from pygame import Rect

from endgame.constants import GG_WIDTH, HERO_RECT_HEIGHT, SCR_HEIGHT, SCR_WIDTH
from endgame.entities import Enemy


class Spawn(NamedTuple):
    """One enemy appearing at a given time after the wave starts."""

    at_ms: int
    rect: Rect


def _row(start_ms, x, y, count, dx, dy, interval_ms=0):
    return [
        Spawn(
            start_ms + i * interval_ms,
            Rect(x + i * dx, y + i * dy, GG_WIDTH, HERO_RECT_HEIGHT),
        )
        for i in range(count)
    ]


def wave1_schedule():
    """Return the spawns of the first level's wave."""
    return [
        *_row(0, 100, 100, 5, 70, 0),
        *_row(5000, 400, SCR_HEIGHT - 100, 7, 70, 0),
        *_row(10000, 200, SCR_HEIGHT // 4, 7, 0, 50),
        *_row(15000, SCR_WIDTH // 2 + 300, SCR_HEIGHT - 200, 6, 50, 50, 200),
    ]


def wave2_schedule():
    """Return the spawns of the second level's wave."""
    first = 1000
    second = first + 8000
    third = second + 12 * 200 + 5000
    return [
        *_row(first, 100, 100, 12, 70, 0),
        *_row(second, 100, SCR_HEIGHT - 150, 12, 70, 0, 200),
        *_row(third, 400, SCR_HEIGHT // 2, 6, 120, 0, 300),
    ]


class WaveSpawner:
    """Release the enemies of a schedule as time passes."""

    def __init__(self, schedule):
        self._pending = deque(sorted(schedule, key=lambda spawn: spawn.at_ms))

    def due(self, elapsed_ms):
        """Return new enemies whose spawn time has come, in spawn order."""
        spawned = []
        while self._pending and self._pending[0].at_ms <= elapsed_ms:
            spawned.append(Enemy(rect=Rect(self._pending.popleft().rect)))
        return spawned

    def finished(self):
        """Return whether every enemy of the schedule has been released."""
        return not self._pending