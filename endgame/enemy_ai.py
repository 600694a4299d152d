"""Enemy steering, obstacle handling and animation frames."""

import math

from endgame.constants import (
    STUDENT_GIRL_LEFT_MOVE1,
    STUDENT_GIRL_LEFT_MOVE2,
    STUDENT_GIRL_RIGHT_MOVE1,
    STUDENT_GIRL_RIGHT_MOVE2,
    STUDENT_LEFT_MOVE1,
    STUDENT_LEFT_MOVE2,
    STUDENT_RIGHT_MOVE1,
    STUDENT_RIGHT_MOVE2,
    ZOMBIE_LEFT_MOVE1,
    ZOMBIE_LEFT_MOVE2,
    ZOMBIE_RIGHT_MOVE1,
    ZOMBIE_RIGHT_MOVE2,
)
from endgame.entities import char_enemy_collision

ENEMY_SPEED = 4.5
PATH_REFRESH_CHANCE = 15
ANIMATION_FRAMES_PER_SECOND = 75

ZOMBIE_FRAMES = (
    (ZOMBIE_LEFT_MOVE1, ZOMBIE_LEFT_MOVE2),
    (ZOMBIE_RIGHT_MOVE1, ZOMBIE_RIGHT_MOVE2),
)

STUDENT_FRAMES = (
    (STUDENT_RIGHT_MOVE1, STUDENT_RIGHT_MOVE2),
    (STUDENT_LEFT_MOVE1, STUDENT_LEFT_MOVE2),
    (STUDENT_GIRL_RIGHT_MOVE2, STUDENT_GIRL_RIGHT_MOVE1),
    (STUDENT_GIRL_LEFT_MOVE2, STUDENT_GIRL_LEFT_MOVE1),
)


def set_path_speed(hero, enemy, speed):
    """Point the enemy's speed at the hero, truncating each part."""
    if enemy is None:
        return
    dx = hero.rect.x - enemy.rect.x
    dy = hero.rect.y - enemy.rect.y
    distance = math.hypot(dx, dy)
    if distance == 0:
        enemy.speed_x = enemy.speed_y = 0
        return
    enemy.speed_x = int(dx / distance * speed)
    enemy.speed_y = int(dy / distance * speed)


def touches_obstacle(obstacle, enemy):
    """Return whether the enemy overlaps or touches the obstacle."""
    if enemy is None:
        return False
    e, o = enemy.rect, obstacle.rect
    overlaps = (
        e.x + e.w >= o.x
        and e.x <= o.x + o.w
        and e.y + e.h >= o.y
        and e.y <= o.y + o.h
    )
    corner_inside = o.x <= e.x <= o.x + o.w and o.y <= e.y <= o.y + o.h
    return overlaps or corner_inside


def move_enemy(obstacles, hero, enemy, speed, rng):
    """Move a living enemy one frame, sliding it along obstacles it runs into."""
    if enemy is None:
        return
    if rng.randrange(PATH_REFRESH_CHANCE) == 1:
        set_path_speed(hero, enemy, speed)
    if enemy.health <= 0:
        return
    e = enemy.rect
    for obstacle in obstacles:
        if not touches_obstacle(obstacle, enemy):
            continue
        o = obstacle.rect
        inside_x = e.x + e.w > o.x and e.x < o.x + o.w
        if inside_x and e.y + e.h > o.y and e.y < o.y + o.h:
            e.y += enemy.speed_x
            return
        if inside_x and e.y + e.h >= o.y and e.y <= o.y + o.h:
            e.x += enemy.speed_y
            return
    e.x += enemy.speed_x
    e.y += enemy.speed_y


def enemy_frame(enemy, ticks):
    """Return the sprite to show for the enemy at a time in milliseconds."""
    frame = ticks * ANIMATION_FRAMES_PER_SECOND // 1000 % 2
    if enemy.is_dead:
        table = STUDENT_FRAMES
        base = 0 if enemy.gender == 0 else 2
    else:
        table = ZOMBIE_FRAMES
        base = 0
    row = base if enemy.speed_x < 0 else base + 1
    return table[row][frame]


def update_enemies(enemies, hero, obstacles, rng, ticks):
    """Advance every enemy by one frame and return those still to be drawn.

    Living enemies hurt the hero on contact and walk towards it; killed
    enemies play their death animation.
    """
    visible = []
    for enemy in enemies:
        if enemy is None:
            continue
        if not enemy.is_dead:
            if char_enemy_collision(hero, enemy):
                hero.health -= enemy.damage
            move_enemy(obstacles, hero, enemy, ENEMY_SPEED, rng)
            if enemy.health > 0:
                enemy.sprite = enemy_frame(enemy, ticks)
        else:
            enemy.sprite = enemy_frame(enemy, ticks)
        if enemy.advance_corpse():
            visible.append(enemy)
    return visible