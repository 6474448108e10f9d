"""Hooks the match drives on the presentation side."""

from __future__ import annotations

from typing import Iterable, Protocol

from .events import EventKind, MatchEvent
from .match import PhaseKind

PADDLE_HIT_SOUND = "paddle_hit"
WINNER_SOUND = "winner"
TITLE_MUSIC = "title"


class PresentationBridge(Protocol):
    """Sound and music sink; AudioManager is the pygame implementation."""

    def play(self, sound_id: str) -> None: ...

    def play_looping(self, music_id: str) -> None: ...

    def stop(self, music_id: str) -> None: ...

    def fade_out(self, music_id: str) -> None: ...


def enter_title(bridge: PresentationBridge) -> None:
    """Silence the winner jingle and start the title music."""
    bridge.stop(WINNER_SOUND)
    bridge.play_looping(TITLE_MUSIC)


def dispatch_events(events: Iterable[MatchEvent], bridge: PresentationBridge) -> None:
    """Turn match events into sound and music calls."""
    for event in events:
        if event.kind in (EventKind.WALL_HIT, EventKind.PADDLE_HIT):
            bridge.play(PADDLE_HIT_SOUND)
        elif event.kind is EventKind.GOAL:
            bridge.play(WINNER_SOUND)
        elif event.kind is EventKind.PHASE_CHANGED and event.current is not None:
            if event.current.kind is PhaseKind.TITLE:
                enter_title(bridge)
            elif event.previous is not None and event.previous.kind is PhaseKind.TITLE:
                bridge.fade_out(TITLE_MUSIC)
