"""Audio loading and playback wrappers."""

from __future__ import annotations

from pathlib import Path
import logging
import pygame

logger = logging.getLogger(__name__)

SOUND_FILES = {
    "paddle_hit": "paddle_hit.mp3",
    "winner": "winner_sound.mp3",
}
MUSIC_FILES = {
    "title": "title.mp3",
}
FADE_OUT_MS = 2000


class AssetLoadError(RuntimeError):
    """An audio asset exists on disk but could not be decoded."""


class AudioManager:
    """Plays sound effects and one streamed music track.

    Without an audio device everything becomes a no-op. Missing asset files
    are skipped; asset files that fail to decode raise AssetLoadError.
    """

    def __init__(self, root: Path) -> None:
        self.root = root
        self.sound_enabled = False
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        self.music: dict[str, Path] = {}
        self.current_music: str | None = None
        self.music_volume = 1.0
        try:
            pygame.mixer.init()
            self.sound_enabled = True
        except pygame.error as exc:
            logger.warning("Audio disabled: %s", exc)
            self.sound_enabled = False

    @property
    def resources(self) -> Path:
        return self.root / "resources"

    def load_assets(self) -> None:
        """Load sound effects and locate music streams under resources/."""
        if not self.sound_enabled:
            return
        for key, name in SOUND_FILES.items():
            path = self.resources / name
            if not path.exists():
                logger.warning("Sound %r not found at %s", key, path)
                continue
            try:
                self.sounds[key] = pygame.mixer.Sound(str(path))
            except pygame.error as exc:
                raise AssetLoadError(f"could not load sound {path}: {exc}") from exc
        for key, name in MUSIC_FILES.items():
            path = self.resources / name
            if path.exists():
                self.music[key] = path
            else:
                logger.warning("Music %r not found at %s", key, path)

    def set_volumes(self, master: float, music: float, sfx: float) -> None:
        """Apply current volume settings."""
        if not self.sound_enabled:
            return
        self.music_volume = master * music
        pygame.mixer.music.set_volume(self.music_volume)
        for sound in self.sounds.values():
            sound.set_volume(master * sfx)

    def play(self, sound_id: str) -> None:
        """Play a named sound effect."""
        if not self.sound_enabled:
            return
        sound = self.sounds.get(sound_id)
        if sound:
            sound.play()

    def stop_sound(self, sound_id: str) -> None:
        if not self.sound_enabled:
            return
        sound = self.sounds.get(sound_id)
        if sound:
            sound.stop()

    def play_looping(self, music_id: str) -> None:
        """Start a music stream on loop unless it is already playing."""
        if not self.sound_enabled or music_id not in self.music:
            return
        if self.current_music == music_id and pygame.mixer.music.get_busy():
            return
        try:
            pygame.mixer.music.load(str(self.music[music_id]))
        except pygame.error as exc:
            raise AssetLoadError(f"could not load music {self.music[music_id]}: {exc}") from exc
        pygame.mixer.music.set_volume(self.music_volume)
        pygame.mixer.music.play(-1)
        self.current_music = music_id

    def stop(self, music_id: str) -> None:
        """Stop a music stream or sound effect by id."""
        if music_id in SOUND_FILES:
            self.stop_sound(music_id)
            return
        if not self.sound_enabled or self.current_music != music_id:
            return
        pygame.mixer.music.stop()
        self.current_music = None

    def fade_out(self, music_id: str) -> None:
        """Fade a music stream to silence; it restarts from the top next time."""
        if not self.sound_enabled or self.current_music != music_id:
            return
        pygame.mixer.music.fadeout(FADE_OUT_MS)
        self.current_music = None
