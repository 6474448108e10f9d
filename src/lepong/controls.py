"""Keyboard to intent/action translation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence
import pygame

from .match import Action
from .physics import PaddleIntents
from .settings import KeyBindings


@dataclass(slots=True)
class FrameInput:
    """Everything the host read from the keyboard this frame."""

    intents: PaddleIntents = field(default_factory=PaddleIntents)
    actions: list[Action] = field(default_factory=list)
    quit_requested: bool = False


class InputMapper:
    """Stateless mapping from key holds and KEYDOWN events to a FrameInput.

    Press-edge actions come only from KEYDOWN events, so a held key fires once
    as long as key repeat stays disabled.
    """

    def __init__(self, bindings: KeyBindings) -> None:
        self.bindings = bindings

    def intents(self, pressed: Sequence[bool]) -> PaddleIntents:
        """Read the four paddle hold flags from a get_pressed()-style sequence."""
        keys = self.bindings
        return PaddleIntents(
            left_up=bool(pressed[keys.left_up]),
            left_down=bool(pressed[keys.left_down]),
            right_up=bool(pressed[keys.right_up]),
            right_down=bool(pressed[keys.right_down]),
        )

    def action_for_key(self, key: int) -> Action | None:
        keys = self.bindings
        if key == keys.confirm:
            return Action.CONFIRM
        if key == keys.return_to_title:
            return Action.RETURN_TO_TITLE
        if key == keys.toggle_overlay:
            return Action.TOGGLE_OVERLAY
        return None

    def map(self, events: Iterable[pygame.event.Event], pressed: Sequence[bool]) -> FrameInput:
        frame = FrameInput(intents=self.intents(pressed))
        for event in events:
            if event.type == pygame.QUIT:
                frame.quit_requested = True
                continue
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == self.bindings.quit:
                frame.quit_requested = True
                continue
            action = self.action_for_key(event.key)
            if action is not None:
                frame.actions.append(action)
        return frame
