"""Host loop: window, clock, input, audio and rendering around a Match."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence
import logging
import pygame

from .audio import AudioManager
from .bridge import dispatch_events, enter_title
from .controls import InputMapper
from .match import Action, Match
from .renderer import Renderer
from .settings import GameSettings, MatchConfig, SettingsManager, TextConfig
from .utils import FPS

logger = logging.getLogger(__name__)


class PongGame:
    """Two-player local Pong: one loop reading input, simulating and drawing."""

    def __init__(
        self,
        root: Path,
        config: MatchConfig | None = None,
        text: TextConfig | None = None,
        settings_path: Path | None = None,
        fullscreen: bool | None = None,
        show_fps: bool | None = None,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.root = root
        self.settings_manager = SettingsManager(settings_path)
        self.settings: GameSettings = self.settings_manager.settings
        # Launch overrides apply to this run only and are never saved.
        self.fullscreen = self.settings.fullscreen if fullscreen is None else fullscreen
        self.show_fps = self.settings.show_fps if show_fps is None else show_fps
        self.match = Match(config)
        self.text = text or TextConfig()

        size = (int(self.match.config.arena_width), int(self.match.config.arena_height))
        flags = pygame.FULLSCREEN if self.fullscreen else 0
        self.screen = pygame.display.set_mode(size, flags)
        pygame.display.set_caption(self.text.caption)
        pygame.key.set_repeat()
        self.clock = pygame.time.Clock()

        self.input_mapper = InputMapper(self.settings.controls)
        self.renderer = Renderer(self.text)
        self.audio = AudioManager(self.root)
        self.audio.load_assets()
        self.audio.set_volumes(
            self.settings.master_volume,
            self.settings.music_volume,
            self.settings.sfx_volume,
        )
        logger.info("Window %dx%d ready", *size)

    def run(self) -> None:
        """Main event/update/render loop."""
        enter_title(self.audio)
        running = True
        while running:
            dt_ms = self.clock.tick(FPS)
            running = self.update(dt_ms / 1000.0, pygame.event.get(), pygame.key.get_pressed())
            if not running:
                break
            self.render()
        logger.info("Shutting down")
        pygame.quit()

    def update(
        self,
        elapsed: float,
        events: Iterable[pygame.event.Event],
        pressed: Sequence[bool],
    ) -> bool:
        """Process one frame of input and simulation; False means quit."""
        frame = self.input_mapper.map(events, pressed)
        if frame.quit_requested:
            return False

        transitioned = False
        for action in frame.actions:
            if action is Action.TOGGLE_OVERLAY:
                self.show_fps = not self.show_fps
                self.settings_manager.set_show_fps(self.show_fps)
                continue
            if transitioned:
                continue
            match_events = self.match.handle_action(action)
            dispatch_events(match_events, self.audio)
            transitioned = bool(match_events)

        if not transitioned and elapsed > 0:
            dispatch_events(self.match.advance(elapsed, frame.intents), self.audio)
        return True

    def render(self) -> None:
        fps = self.clock.get_fps() if self.show_fps else None
        self.renderer.render(self.screen, self.match.current_render_state(), fps)
        pygame.display.flip()
