"""Match configuration, screen text, and persisted player preferences."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
import logging
import pygame

from . import utils

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Immutable constants for one run of the match."""

    arena_width: float = 1600.0
    arena_height: float = 1200.0
    ball_radius: float = 8.0
    initial_ball_speed: tuple[float, float] = (300.0, 300.0)
    paddle_width: float = 10.0
    paddle_height: float = 100.0
    paddle_speed: float = 500.0
    paddle_margin: float = 50.0
    speedup: float = 1.1
    # Collision box size is fixed and does not follow paddle_width/paddle_height.
    collision_size: tuple[float, float] = (10.0, 100.0)

    def validate(self) -> MatchConfig:
        """Reject configurations the simulation cannot run with."""
        positive = {
            "arena_width": self.arena_width,
            "arena_height": self.arena_height,
            "ball_radius": self.ball_radius,
            "paddle_width": self.paddle_width,
            "paddle_height": self.paddle_height,
            "paddle_speed": self.paddle_speed,
            "speedup": self.speedup,
            "collision_size[0]": self.collision_size[0],
            "collision_size[1]": self.collision_size[1],
        }
        for name, value in positive.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if not 0 <= self.paddle_margin <= self.arena_width / 2:
            raise ValueError(f"paddle_margin {self.paddle_margin} does not fit the arena")
        return self

    @property
    def center(self) -> tuple[float, float]:
        return (self.arena_width / 2.0, self.arena_height / 2.0)


@dataclass(frozen=True, slots=True)
class TextConfig:
    """Strings and font sizes shown by the renderer."""

    caption: str = "DUFFMASTERPONG"
    title: str = "LE PONG"
    return_title: str = "DUFF PONG"
    start_msg: str = "Press Space to play, Esc to quit"
    controls_msg: str = "Use W and S to control left paddle, Up and Down to control right paddle"
    restart_msg: str = "Press space to play again, B to go back to title screen"
    left_wins: str = "Left Player Wins!!"
    right_wins: str = "Right Player Wins!!"
    title_size: int = 72
    start_msg_size: int = 30
    controls_size: int = 20


@dataclass(slots=True)
class KeyBindings:
    """Key codes for paddle holds and press-edge actions."""

    left_up: int = pygame.K_w
    left_down: int = pygame.K_s
    right_up: int = pygame.K_UP
    right_down: int = pygame.K_DOWN
    confirm: int = pygame.K_SPACE
    return_to_title: int = pygame.K_b
    toggle_overlay: int = pygame.K_f
    quit: int = pygame.K_ESCAPE


@dataclass(slots=True)
class GameSettings:
    """Persistent player preferences."""

    master_volume: float = 1.0
    music_volume: float = 1.0
    sfx_volume: float = 1.0
    show_fps: bool = True
    fullscreen: bool = False
    controls: KeyBindings = field(default_factory=KeyBindings)


class SettingsManager:
    """Load, save, and mutate game settings."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else utils.SETTINGS_FILE
        self.settings = self.load()

    def load(self) -> GameSettings:
        """Load game settings from disk with safe defaults."""
        raw = utils.load_json(self.path, {})
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed settings file %s", self.path)
            raw = {}
        settings = GameSettings()

        settings.master_volume = self._volume(raw.get("master_volume", settings.master_volume))
        settings.music_volume = self._volume(raw.get("music_volume", settings.music_volume))
        settings.sfx_volume = self._volume(raw.get("sfx_volume", settings.sfx_volume))
        settings.show_fps = bool(raw.get("show_fps", settings.show_fps))
        settings.fullscreen = bool(raw.get("fullscreen", settings.fullscreen))
        settings.controls = self._load_controls(raw.get("controls", {}), settings.controls)
        return settings

    @staticmethod
    def _volume(value: object) -> float:
        try:
            return utils.clamp(float(value), 0.0, 1.0)
        except (TypeError, ValueError):
            return 1.0

    @staticmethod
    def _load_controls(payload: dict[str, int], defaults: KeyBindings) -> KeyBindings:
        if not isinstance(payload, dict):
            return defaults
        values = asdict(defaults)
        for name in values:
            try:
                values[name] = int(payload.get(name, values[name]))
            except (TypeError, ValueError):
                continue
        return KeyBindings(**values)

    def save(self) -> None:
        """Persist settings to disk."""
        utils.save_json(self.path, asdict(self.settings))

    def set_show_fps(self, show_fps: bool) -> None:
        """Persist the FPS overlay preference."""
        self.settings.show_fps = show_fps
        self.save()

