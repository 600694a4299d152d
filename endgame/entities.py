"""Game objects: the hero, enemies, bullets and obstacles, and their collisions."""

import math
import random
from dataclasses import dataclass, field
from enum import IntEnum

from pygame import Rect

from endgame.constants import (
    ABS_BUL_SP,
    ABS_ENEMY_BUL_SP,
    BULLET1,
    BULLET2,
    FROG,
    GG_WIDTH,
    HERO_RECT_HEIGHT,
    MC_DOWN_STAND,
    SCR_HEIGHT,
    SCR_WIDTH,
    ZOMBIE,
)

CORPSE_LIFETIME = 300
GRAVE_POSITION = 3000
HERO_BULLET_SIZE = 20
ENEMY_BULLET_SIZE = 50


class Direction(IntEnum):
    """Direction a character is facing."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


def _aimed_speed(dx, dy, magnitude):
    """Scale (dx, dy) to the given length, truncating each part toward zero."""
    distance = math.hypot(dx, dy)
    if distance == 0:
        return 0, 0
    coef = magnitude / distance
    return int(dx * coef), int(dy * coef)


def _center(rect):
    return rect.x + rect.w // 2, rect.y + rect.h // 2


@dataclass
class Obstacle:
    """An impassable area of a map."""

    rect: Rect


@dataclass
class Bullet:
    """A projectile moving at constant speed."""

    rect: Rect
    damage: int
    speed_x: int
    speed_y: int
    sprite: str = BULLET1

    def center(self):
        return _center(self.rect)

    def step(self):
        """Move the bullet by one frame's worth of speed."""
        self.rect.x += self.speed_x
        self.rect.y += self.speed_y

    def is_off_screen(self):
        r = self.rect
        return r.x + r.w < 0 or r.x > SCR_WIDTH or r.y + r.h < 0 or r.y > SCR_HEIGHT


def _default_hero_rect():
    return Rect(625, 300, GG_WIDTH, HERO_RECT_HEIGHT)


@dataclass
class Hero:
    """The player character."""

    rect: Rect = field(default_factory=_default_hero_rect)
    health: int = 1000
    damage: int = 10
    speed_x: int = 5
    speed_y: int = 5
    level: int = 1
    rotated: Direction = Direction.RIGHT
    sprite: str = MC_DOWN_STAND

    def center(self):
        return _center(self.rect)

    def shoot(self, target_x, target_y):
        """Return a bullet fired from the hero's centre towards the target."""
        cx, cy = self.center()
        speed_x, speed_y = _aimed_speed(target_x - cx, target_y - cy, ABS_BUL_SP)
        box = Rect(cx, cy, HERO_BULLET_SIZE, HERO_BULLET_SIZE)
        return Bullet(box, self.damage, speed_x, speed_y, BULLET1)


def _random_gender():
    return 0 if random.randrange(2) == 0 else 2


@dataclass
class Enemy:
    """A zombie, or the boss when made with Enemy.boss."""

    rect: Rect
    index: int = 0
    health: int = 30
    damage: int = 2
    speed_x: int = 2
    speed_y: int = 2
    timer: int = 0
    gender: int = field(default_factory=_random_gender)
    rotated: Direction = Direction.RIGHT
    is_dead: bool = False
    is_counted: bool = False
    sprite: str = ZOMBIE

    @classmethod
    def boss(cls, rect, health, damage):
        """Make a stationary boss enemy."""
        return cls(
            rect=Rect(rect),
            index=0,
            health=health,
            damage=damage,
            speed_x=0,
            speed_y=0,
            sprite=FROG,
        )

    def center(self):
        return _center(self.rect)

    def shoot_at(self, hero):
        """Return a bullet fired from the enemy's centre towards the hero."""
        hx, hy = hero.center()
        ex, ey = self.center()
        speed_x, speed_y = _aimed_speed(hx - ex, hy - ey, ABS_ENEMY_BUL_SP)
        half = ENEMY_BULLET_SIZE // 2
        box = Rect(ex - half, ey - half, ENEMY_BULLET_SIZE, ENEMY_BULLET_SIZE)
        return Bullet(box, self.damage, speed_x, speed_y, BULLET2)

    def advance_corpse(self):
        """Advance the death animation by a frame; return whether to draw it.

        A killed enemy walks backwards for a while and is then moved far
        off the screen for good.
        """
        if self.health <= 0 and not self.is_dead:
            self.is_dead = True
        if self.is_dead:
            self.timer += 1
            self.rect.x -= self.speed_x
            self.rect.y -= self.speed_y
            if self.timer >= CORPSE_LIFETIME:
                self.rect.x = GRAVE_POSITION
                self.rect.y = GRAVE_POSITION
                return False
        return True


def point_in_rect(x, y, h, rect):
    """Test a point against a rect, letting the point reach up by h."""
    return rect.x <= x <= rect.x + rect.w and y + h >= rect.y and y <= rect.y + rect.h


def _hits(bullet, rect):
    x, y = bullet.center()
    return point_in_rect(x, y, bullet.rect.h, rect)


def update_bullets(bullets):
    """Move every bullet and drop those that left the screen, in place."""
    for bullet in bullets:
        bullet.step()
    bullets[:] = [b for b in bullets if not b.is_off_screen()]


def bullet_enemy_collision(bullets, enemies):
    """Damage enemies hit by bullets, drop those bullets, return the hit count."""
    survivors = []
    hits = 0
    for bullet in bullets:
        target = next((e for e in enemies if _hits(bullet, e.rect)), None)
        if target is None:
            survivors.append(bullet)
        else:
            target.health -= bullet.damage
            hits += 1
    bullets[:] = survivors
    return hits


def bullet_obstacle_collision(bullets, obstacles):
    """Drop bullets that ran into an obstacle, in place."""
    bullets[:] = [
        b for b in bullets if not any(_hits(b, o.rect) for o in obstacles)
    ]


def bullet_boss_collision(bullets, boss):
    """Let at most one bullet hit the boss this frame."""
    if boss is None:
        return
    for i, bullet in enumerate(bullets):
        if _hits(bullet, boss.rect):
            boss.health -= bullet.damage
            del bullets[i]
            return


def enemy_bullet_hero_collision(bullets, hero):
    """Damage the hero with every bullet that hits, dropping those bullets."""
    if hero is None:
        return
    survivors = []
    for bullet in bullets:
        if _hits(bullet, hero.rect):
            hero.health -= bullet.damage
        else:
            survivors.append(bullet)
    bullets[:] = survivors


def char_enemy_collision(hero, enemy):
    """Test whether the hero overlaps the enemy, using the enemy's size."""
    if enemy is None:
        return False
    h, e = hero.rect, enemy.rect
    return (
        h.x + e.w > e.x
        and h.x < e.x + e.w
        and h.y + e.h > e.y
        and h.y < e.y + e.h
    )


def count_killed(enemies):
    """Return how many enemies died since the last count, marking them counted."""
    killed = 0
    for enemy in enemies:
        if enemy.health <= 0 and not enemy.is_counted:
            enemy.is_counted = True
            killed += 1
    return killed