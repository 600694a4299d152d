"""Command-line entry point: menu, story, the three levels and the ending."""

import argparse
import sys
from pathlib import Path

import pygame

from endgame.assets import Assets
from endgame.constants import RESOURCE_DIR, SCR_HEIGHT, SCR_WIDTH, resource_path
from endgame.levels import HeroDied, play_level
from endgame.screens import (
    MenuChoice,
    game_over_screen,
    intro_screen,
    main_menu,
    win_screen,
)

MENU_MUSIC = resource_path("menu.mp3")
LEVEL_NUMBERS = (1, 2, 3)
WINDOW_TITLE = "Endgame"


def run_game(screen, assets):
    """Play the whole game once; return the process exit status."""
    if assets.audio:
        pygame.mixer.music.load(str(assets.base_dir / MENU_MUSIC))
        pygame.mixer.music.play(-1)
    if main_menu(screen, assets) is not MenuChoice.PLAY:
        return 0
    if not intro_screen(screen, assets):
        return 0
    if assets.audio:
        pygame.mixer.music.stop()
    try:
        for number in LEVEL_NUMBERS:
            play_level(screen, assets, number)
    except HeroDied:
        game_over_screen(screen, assets)
        return 1
    win_screen(screen, assets)
    return 0


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="endgame", description="A top-down zombie shooter."
    )
    parser.add_argument(
        "--resources",
        default=".",
        help="directory that holds the resource folder (default: current)",
    )
    parser.add_argument("--mute", action="store_true", help="play without sound")
    return parser.parse_args(argv)


def main(argv=None):
    """Start the game; return the exit status."""
    args = _parse_args(argv)
    base = Path(args.resources)
    if not (base / RESOURCE_DIR).is_dir():
        print(f"no {RESOURCE_DIR} directory in {base}", file=sys.stderr)
        return 1
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCR_WIDTH, SCR_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        audio = False
        if not args.mute:
            try:
                pygame.mixer.init(44100, -16, 2, 2048)
            except pygame.error:
                print("sound error", file=sys.stderr)
                return 1
            audio = True
        assets = Assets(base, audio=audio)
        try:
            return run_game(screen, assets)
        except SystemExit as exc:
            return exc.code if isinstance(exc.code, int) else 1
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())