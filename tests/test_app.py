import pygame
import pytest

from endgame.app import main, run_game
from endgame.assets import Assets
from endgame.constants import SCR_HEIGHT, SCR_WIDTH
from endgame.screens import PLAY_RECT

MENU_IMAGES = (
    "main_bgrd.png",
    "play_butt.png",
    "play_butt_hov.png",
    "guide_butt.png",
    "guide_butt_hov.png",
    "made_by.png",
    "made_by_hov.png",
    "intro.png",
)


@pytest.fixture
def screen(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.display.init()
    surface = pygame.display.set_mode((SCR_WIDTH, SCR_HEIGHT))
    pygame.event.clear()
    yield surface
    pygame.display.quit()


@pytest.fixture
def assets(tmp_path):
    folder = tmp_path / "resource"
    folder.mkdir()
    for name in MENU_IMAGES:
        image = pygame.Surface((8, 8))
        image.fill((10, 20, 30))
        pygame.image.save(image, str(folder / name))
    return Assets(tmp_path, audio=False, font_file=None)


def _click_play():
    pygame.event.post(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=PLAY_RECT.center, button=1)
    )


def test_quit_from_menu_returns_zero(screen, assets):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert run_game(screen, assets) == 0


def test_escape_from_intro_returns_zero(screen, assets):
    _click_play()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert run_game(screen, assets) == 0


def test_quit_during_level_exits_with_one(screen, assets):
    _click_play()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    with pytest.raises(SystemExit) as info:
        run_game(screen, assets)
    assert info.value.code == 1


def test_main_rejects_missing_resources(tmp_path):
    assert main(["--resources", str(tmp_path), "--mute"]) == 1


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "--resources" in capsys.readouterr().out