"""Loading and caching of images, sounds and fonts."""

from pathlib import Path

import pygame

from endgame.constants import resource_path

FONT_FILE = resource_path("PublicPixel.ttf")

KILL_LINES = tuple(
    resource_path(name)
    for name in (
        "google_it.wav",
        "oracle_is_right.wav",
        "peer_to_peer.wav",
        "read_pdf.wav",
    )
)
KILL_LINE_CHANCE = 30


class Assets:
    """Load game resources from a base directory, caching what was loaded.

    Sounds are only loaded when audio is enabled; without audio every
    sound request quietly yields nothing, as the game plays on silently.
    """

    def __init__(self, base_dir=".", audio=None, font_file=FONT_FILE):
        self.base_dir = Path(base_dir)
        self.audio = pygame.mixer.get_init() is not None if audio is None else audio
        self.font_file = font_file
        self._images = {}
        self._sounds = {}
        self._fonts = {}

    def _locate(self, path):
        full = self.base_dir / path
        if not full.is_file():
            raise FileNotFoundError(f"missing resource: {full}")
        return full

    def image(self, path):
        """Return the image stored at path, loading it on first use."""
        if path not in self._images:
            self._images[path] = pygame.image.load(str(self._locate(path)))
        return self._images[path]

    def sound(self, path):
        """Return the sound stored at path, or None when audio is off."""
        if not self.audio:
            return None
        if path not in self._sounds:
            self._sounds[path] = pygame.mixer.Sound(str(self._locate(path)))
        return self._sounds[path]

    def font(self, size):
        """Return the game font at the given point size."""
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            source = None if self.font_file is None else str(self._locate(self.font_file))
            self._fonts[size] = pygame.font.Font(source, size)
        return self._fonts[size]

    def play(self, path):
        """Play a sound once; return its channel, or None if nothing played."""
        sound = self.sound(path)
        if sound is None:
            return None
        return sound.play()

    def play_kill_line(self, rng):
        """Now and then play a random kill line; return the line chosen or None."""
        if rng.randrange(100) >= KILL_LINE_CHANCE:
            return None
        line = KILL_LINES[rng.randrange(len(KILL_LINES))]
        self.play(line)
        return line