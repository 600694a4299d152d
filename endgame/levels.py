"""The three playable levels: their state, rules and game loop."""

import random
from dataclasses import dataclass
from typing import Callable, Optional

import pygame
from pygame import Rect

from endgame.constants import FROG, SCR_WIDTH, resource_path
from endgame.enemy_ai import update_enemies
from endgame.entities import (
    Enemy,
    Hero,
    bullet_boss_collision,
    bullet_enemy_collision,
    bullet_obstacle_collision,
    count_killed,
    enemy_bullet_hero_collision,
    update_bullets,
)
from endgame.maps import (
    hero_near_server,
    obstacles_map1,
    obstacles_map2,
    obstacles_map3,
    server_obstacle,
)
from endgame.movement import direction_towards, move_hero, stand_sprite
from endgame.render import (
    draw_gold_ring,
    draw_server,
    draw_server_blink,
    draw_sprite,
    draw_text,
)
from endgame.waves import WaveSpawner, wave1_schedule, wave2_schedule

FPS = 60
SHOT_COOLDOWN_MS = 100
BOSS_SHOT_INTERVAL_MS = 600
ZOMBIE_SOUND_CHANCE = 2
HP_RECT = Rect(0, 0, 200, 50)

BOSS_RECT = Rect(SCR_WIDTH // 2 - 75, 20, 150, 150)
BOSS_HEALTH = 400
BOSS_DAMAGE = 100

SHOOT_SOUND = resource_path("shoot.wav")
ZOMBIE_SOUND = resource_path("zombie_sound.wav")
BOSS_SOUND = resource_path("zhaba.wav")

_DIRECTION_KEYS = {
    pygame.K_w: "w",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
}


class HeroDied(Exception):
    """Raised when the hero's health runs out during a level."""


@dataclass(frozen=True)
class _Setup:
    background: str
    foreground: str
    obstacles: Callable[[], list]
    music: str
    kill_target: Optional[int]
    schedule: Optional[Callable[[], list]]
    has_boss: bool


_SETUPS = {
    1: _Setup(
        resource_path("map1.png"),
        resource_path("front_map1.png"),
        obstacles_map1,
        resource_path("park.mp3"),
        25,
        wave1_schedule,
        False,
    ),
    2: _Setup(
        resource_path("map2.png"),
        resource_path("front_map2.png"),
        obstacles_map2,
        resource_path("campus_sound.mp3"),
        30,
        wave2_schedule,
        False,
    ),
    3: _Setup(
        resource_path("map3.png"),
        resource_path("front_map3.png"),
        obstacles_map3,
        resource_path("server.mp3"),
        None,
        None,
        True,
    ),
}


def _held_directions():
    keys = pygame.key.get_pressed()
    return frozenset(name for key, name in _DIRECTION_KEYS.items() if keys[key])


class Level:
    """State of one level, advanced one frame at a time.

    Times are in milliseconds on the same clock as the start time.
    """

    def __init__(self, number, assets, rng=None, start=0):
        try:
            setup = _SETUPS[number]
        except KeyError:
            raise ValueError(f"no such level: {number!r}") from None
        self.number = number
        self.assets = assets
        self.rng = rng if rng is not None else random.Random()
        self._setup = setup
        self.kill_target = setup.kill_target
        self.obstacles = setup.obstacles()
        self.hero = Hero()
        self.enemies = []
        self.visible = []
        self.bullets = []
        self.enemy_bullets = []
        self.kills = 0
        self.running = True
        self.direction = None
        self.boss = (
            Enemy.boss(BOSS_RECT, BOSS_HEALTH, BOSS_DAMAGE) if setup.has_boss else None
        )
        if self.boss is not None:
            self.boss.sprite = FROG
        self.boss_died = False
        self.server = server_obstacle() if setup.has_boss else None
        self.server_phase = 0
        self.spawner = WaveSpawner(setup.schedule()) if setup.schedule else None
        self._restart(start)

    def _restart(self, now):
        self.started_at = now
        self.last_shot = now
        self.last_boss_shot = now

    @property
    def boss_level(self):
        return self._setup.has_boss

    @property
    def hp_text(self):
        return f"HP: {self.hero.health}"

    def handle_event(self, event, pressed, now):
        """React to one input event; pressed holds the held direction keys."""
        if event.type == pygame.QUIT:
            raise SystemExit(1)
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE or (
                self.boss_level and event.key == pygame.K_e
            ):
                self.running = False
            moved = move_hero(self.hero, pressed, self.obstacles, now)
            if moved is not None:
                self.direction = moved
        elif event.type == pygame.KEYUP:
            if self.direction is not None:
                self.hero.sprite = stand_sprite(self.direction)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._shoot(event.pos, now)

    def _shoot(self, pos, now):
        if now - self.last_shot <= SHOT_COOLDOWN_MS:
            return
        x, y = pos
        self.hero.sprite = stand_sprite(direction_towards(x, y, self.hero))
        self.bullets.insert(0, self.hero.shoot(x, y))
        self.assets.play(SHOOT_SOUND)
        self.last_shot = now

    def update(self, now):
        """Advance the level by one frame; raise HeroDied when health runs out."""
        if self.spawner is not None:
            spawned = self.spawner.due(now - self.started_at)
            self.enemies[:0] = reversed(spawned)

        if self.boss_level and now - self.last_boss_shot > BOSS_SHOT_INTERVAL_MS:
            if self.boss is not None:
                self.enemy_bullets.insert(0, self.boss.shoot_at(self.hero))
                self.assets.play(BOSS_SOUND)
            self.last_boss_shot = now

        update_bullets(self.enemy_bullets)
        update_bullets(self.bullets)
        bullet_obstacle_collision(self.enemy_bullets, self.obstacles)
        bullet_obstacle_collision(self.bullets, self.obstacles)
        enemy_bullet_hero_collision(self.enemy_bullets, self.hero)

        if self.hero.health <= 0:
            raise HeroDied(self.number)

        bullet_enemy_collision(self.bullets, self.enemies)
        bullet_boss_collision(self.bullets, self.boss)

        killed = count_killed(self.enemies)
        for _ in range(killed):
            self.assets.play_kill_line(self.rng)
        if self.kill_target is not None:
            self.kills += killed
            if self.kills >= self.kill_target:
                self.running = False

        if self.boss is not None and self.boss.health <= 0:
            self.boss_died = True
            self.boss = None

        self.visible = update_enemies(
            self.enemies, self.hero, self.obstacles, self.rng, now
        )

        if self.rng.randrange(100) < ZOMBIE_SOUND_CHANCE:
            self.assets.play(ZOMBIE_SOUND)

    def draw(self, surface):
        """Draw the current frame of the level."""
        assets = self.assets
        draw_sprite(surface, assets, self._setup.background)
        if self.boss_died:
            if hero_near_server(self.hero):
                draw_gold_ring(surface, assets, self.server)
            draw_server(surface, assets, self.server, self.server_phase)
            self.server_phase ^= 1
        for enemy in self.visible:
            draw_sprite(surface, assets, enemy.sprite, enemy.rect)
        if self.boss is not None:
            draw_sprite(surface, assets, self.boss.sprite, self.boss.rect)
        for bullet in (*self.bullets, *self.enemy_bullets):
            draw_sprite(surface, assets, bullet.sprite, bullet.rect)
        draw_sprite(surface, assets, self.hero.sprite, self.hero.rect)
        draw_sprite(surface, assets, self._setup.foreground)
        if self.boss_level:
            draw_server_blink(surface, assets, self.rng)
        draw_text(surface, assets, HP_RECT, self.hp_text)

    def _play_music(self):
        if self.assets.audio:
            pygame.mixer.music.load(str(self.assets.base_dir / self._setup.music))
            pygame.mixer.music.play(-1)

    def _stop_music(self):
        if self.assets.audio:
            pygame.mixer.music.stop()

    def run(self, screen):
        """Play the level on screen until it ends; return the kill count."""
        clock = pygame.time.Clock()
        self._restart(pygame.time.get_ticks())
        self._play_music()
        try:
            while self.running:
                now = pygame.time.get_ticks()
                for event in pygame.event.get():
                    pressed = (
                        _held_directions()
                        if event.type == pygame.KEYDOWN
                        else frozenset()
                    )
                    self.handle_event(event, pressed, now)
                self.update(now)
                self.draw(screen)
                pygame.display.flip()
                clock.tick(FPS)
        finally:
            self._stop_music()
        return self.kills


def play_level(screen, assets, number):
    """Play level number on screen and return the finished level."""
    level = Level(number, assets)
    level.run(screen)
    return level