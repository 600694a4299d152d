"""Menu, guide, intro and end screens shown around the levels."""

from enum import Enum

import pygame
from pygame import Rect

from endgame.constants import SCR_HEIGHT, SCR_WIDTH, resource_path
from endgame.render import draw_sprite
from endgame.widgets import Button

FPS = 60
BLACK = (0, 0, 0)

GUIDE_FRAMES = 400
JOKE_FRAMES = 150

MENU_HOVER_SOUND = resource_path("menu_hov.wav")
WIN_MUSIC = resource_path("win_sound.mp3")

MAIN_BACKGROUND = resource_path("main_bgrd.png")
TITLE_IMAGE = resource_path("title.png")
GAME_OVER_IMAGE = resource_path("gameover.png")

BACK_RECT = Rect(0, 10, 120, 60)
PLAY_RECT = Rect(SCR_WIDTH // 2 - 120, SCR_HEIGHT - 265, 240, 120)
GUIDE_RECT = Rect(SCR_WIDTH // 2 - 120, SCR_HEIGHT - 140, 240, 120)
MADE_BY_RECT = Rect(30, 30, 150, 75)

PEER_RECT = Rect(SCR_WIDTH // 2 - 250, SCR_HEIGHT // 2 - 100, 500, 200)
JOKE_RECT = Rect(SCR_WIDTH // 2 - 250, SCR_HEIGHT // 2 - 250, 500, 500)
CONTROLS_RECT = Rect(
    SCR_WIDTH // 2 - 350, SCR_HEIGHT // 2 - 300, SCR_WIDTH // 2, SCR_WIDTH // 2 - 100
)
INTRO_RECT = Rect(
    SCR_WIDTH // 2 - 400, SCR_HEIGHT // 2 - 300, SCR_WIDTH // 2 + 200, SCR_HEIGHT // 2 + 300
)
WIN_TOP_RECT = Rect(
    SCR_WIDTH // 2 - 450, SCR_HEIGHT // 2 - 400, SCR_WIDTH // 2 + 250, SCR_HEIGHT // 2 + 200
)
WIN_BOTTOM_RECT = Rect(
    SCR_WIDTH // 2 - 450, SCR_HEIGHT // 2 + 100, SCR_WIDTH // 2 + 250, SCR_HEIGHT // 2 - 100
)


class MenuChoice(Enum):
    """Outcome of a menu screen."""

    QUIT = 0
    PLAY = 1
    GUIDE = 3
    MADE_BY = 4
    BACK = 5


def _events():
    """Yield queued events one by one, leaving unread ones in the queue."""
    while True:
        event = pygame.event.poll()
        if event.type == pygame.NOEVENT:
            return
        yield event


def _mouse_after(event, mouse):
    if event.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
        return event.pos
    return mouse


def _is_key(event, key):
    return event.type == pygame.KEYDOWN and event.key == key


def _play_music(assets, path):
    if assets.audio:
        pygame.mixer.music.load(str(assets.base_dir / path))
        pygame.mixer.music.play(-1)


def _stop_music(assets):
    if assets.audio:
        pygame.mixer.music.stop()


class _HoverSound:
    """Play the hover effect once each time the mouse enters a button."""

    def __init__(self, assets):
        self._assets = assets
        self._hovering = False

    def update(self, hovering):
        if hovering and not self._hovering:
            self._assets.play(MENU_HOVER_SOUND)
        self._hovering = hovering


def _back_button():
    return Button(
        BACK_RECT, resource_path("back_butt.png"), resource_path("back_butt_hov.png")
    )


def _back_screen(screen, assets, pictures, background=None, timeout=None):
    """Show pictures with a back button until left or the timeout passes.

    Returns MenuChoice.BACK or MenuChoice.QUIT, or None when timed out.
    """
    back = _back_button()
    hover = _HoverSound(assets)
    mouse = pygame.mouse.get_pos()
    clock = pygame.time.Clock()
    frames = 0
    while True:
        outcome = None
        for event in _events():
            mouse = _mouse_after(event, mouse)
            if event.type == pygame.QUIT:
                outcome = MenuChoice.QUIT
            elif event.type == pygame.MOUSEBUTTONDOWN and back.is_hovered(*mouse):
                outcome = MenuChoice.BACK
            elif _is_key(event, pygame.K_ESCAPE):
                outcome = MenuChoice.BACK
            if outcome is not None:
                break
        hover.update(back.is_hovered(*mouse))
        screen.fill(BLACK)
        if background is not None:
            draw_sprite(screen, assets, background)
        for path, rect in pictures:
            draw_sprite(screen, assets, path, rect)
        back.draw(screen, assets, *mouse)
        pygame.display.flip()
        if outcome is not None:
            return outcome
        frames += 1
        if timeout is not None and frames >= timeout:
            return None
        clock.tick(FPS)


def _menu(screen, assets):
    buttons = {
        MenuChoice.PLAY: Button(
            PLAY_RECT, resource_path("play_butt.png"), resource_path("play_butt_hov.png")
        ),
        MenuChoice.GUIDE: Button(
            GUIDE_RECT, resource_path("guide_butt.png"), resource_path("guide_butt_hov.png")
        ),
        MenuChoice.MADE_BY: Button(
            MADE_BY_RECT, resource_path("made_by.png"), resource_path("made_by_hov.png")
        ),
    }
    hover = _HoverSound(assets)
    mouse = pygame.mouse.get_pos()
    clock = pygame.time.Clock()
    while True:
        choice = None
        for event in _events():
            mouse = _mouse_after(event, mouse)
            if event.type == pygame.QUIT or _is_key(event, pygame.K_ESCAPE):
                choice = MenuChoice.QUIT
            elif event.type == pygame.MOUSEBUTTONDOWN:
                choice = next(
                    (c for c, b in buttons.items() if b.is_hovered(*mouse)), None
                )
            if choice is not None:
                break
        hover.update(any(b.is_hovered(*mouse) for b in buttons.values()))
        draw_sprite(screen, assets, MAIN_BACKGROUND)
        for button in buttons.values():
            button.draw(screen, assets, *mouse)
        pygame.display.flip()
        if choice is not None:
            return choice
        clock.tick(FPS)


def main_menu(screen, assets):
    """Run the main menu and its sub-screens; return PLAY or QUIT."""
    while True:
        choice = _menu(screen, assets)
        if choice is MenuChoice.GUIDE:
            result = guide_screen(screen, assets)
        elif choice is MenuChoice.MADE_BY:
            result = made_by_screen(screen, assets)
        else:
            return choice
        if result is MenuChoice.QUIT:
            return MenuChoice.QUIT


def guide_screen(screen, assets):
    """Show the guide; left alone long enough it moves on to the joke."""
    result = _back_screen(
        screen, assets, [(resource_path("peer.png"), PEER_RECT)], timeout=GUIDE_FRAMES
    )
    if result is None:
        return joke_screen(screen, assets)
    return result


def joke_screen(screen, assets):
    """Show the joke; after a short while it moves on to the real controls."""
    result = _back_screen(
        screen, assets, [(resource_path("joke.png"), JOKE_RECT)], timeout=JOKE_FRAMES
    )
    if result is None:
        return controls_screen(screen, assets)
    return result


def made_by_screen(screen, assets):
    """Show the credits; return BACK or QUIT."""
    return _back_screen(screen, assets, [], background=TITLE_IMAGE)


def controls_screen(screen, assets):
    """Show the controls; return BACK or QUIT."""
    return _back_screen(
        screen, assets, [(resource_path("controls.png"), CONTROLS_RECT)]
    )


def intro_screen(screen, assets):
    """Show the story; return True to start playing, False to quit."""
    clock = pygame.time.Clock()
    while True:
        outcome = None
        for event in _events():
            if _is_key(event, pygame.K_RETURN):
                outcome = True
            elif event.type == pygame.QUIT or _is_key(event, pygame.K_ESCAPE):
                outcome = False
            if outcome is not None:
                break
        screen.fill(BLACK)
        draw_sprite(screen, assets, resource_path("intro.png"), INTRO_RECT)
        pygame.display.flip()
        if outcome is not None:
            return outcome
        clock.tick(FPS)


def game_over_screen(screen, assets):
    """Show the game over picture until a click or quit."""
    clock = pygame.time.Clock()
    while True:
        done = False
        for event in _events():
            if event.type in (pygame.MOUSEBUTTONDOWN, pygame.QUIT):
                done = True
                break
        screen.fill(BLACK)
        draw_sprite(screen, assets, GAME_OVER_IMAGE)
        pygame.display.flip()
        if done:
            return
        clock.tick(FPS)


def win_screen(screen, assets):
    """Play the victory music and show the win signs until escape or quit."""
    _play_music(assets, WIN_MUSIC)
    clock = pygame.time.Clock()
    try:
        while True:
            done = False
            for event in _events():
                if event.type == pygame.QUIT or _is_key(event, pygame.K_ESCAPE):
                    done = True
                    break
            screen.fill(BLACK)
            draw_sprite(screen, assets, resource_path("win_screen1.png"), WIN_TOP_RECT)
            draw_sprite(screen, assets, resource_path("win_screen.png"), WIN_BOTTOM_RECT)
            pygame.display.flip()
            if done:
                return
            clock.tick(FPS)
    finally:
        _stop_music(assets)