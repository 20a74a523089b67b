"""Background music and end-of-game sound effects."""

import logging
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .defs import BGM_PATH, LOSE_SOUND_PATH, WIN_SOUND_PATH  # noqa: E402

log = logging.getLogger(__name__)


class Audio:
    """Owns the mixer, the looping music and the win and lose sounds."""

    def __init__(self, music_path=BGM_PATH, win_path=WIN_SOUND_PATH, lose_path=LOSE_SOUND_PATH):
        self.music_path = music_path
        self.win_path = win_path
        self.lose_path = lose_path
        self.background_music = None
        self.win_sound = None
        self.lose_sound = None
        self.initialized = False

    def load(self):
        """Open the mixer and load every sound; failures are logged, not raised."""
        try:
            pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=2048)
        except pygame.error as exc:
            log.error("Mixer could not initialize: %s", exc)
            return
        self.initialized = True

        try:
            pygame.mixer.music.load(self.music_path)
            self.background_music = self.music_path
        except pygame.error as exc:
            log.error("Failed to load background music: %s", exc)

        self.win_sound = self._load_sound(self.win_path, "win")
        self.lose_sound = self._load_sound(self.lose_path, "lose")

    @staticmethod
    def _load_sound(path, label):
        try:
            return pygame.mixer.Sound(path)
        except (pygame.error, FileNotFoundError) as exc:
            log.error("Failed to load %s sound: %s", label, exc)
            return None

    def play_background_music(self):
        """Loop the background music forever."""
        if self.background_music:
            pygame.mixer.music.play(-1)

    def play_win_sound(self):
        if self.win_sound:
            self.win_sound.play()

    def play_lose_sound(self):
        if self.lose_sound:
            self.lose_sound.play()

    def clean_up(self):
        """Release sounds and close the mixer."""
        if not self.initialized:
            return
        if self.background_music:
            pygame.mixer.music.unload()
            self.background_music = None
        self.win_sound = None
        self.lose_sound = None
        pygame.mixer.quit()
        self.initialized = False

    def is_loaded(self):
        """True when the music and both sounds are loaded."""
        return bool(self.background_music and self.win_sound and self.lose_sound)