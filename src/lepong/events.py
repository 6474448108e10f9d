"""Fire-and-forget notifications emitted by the match."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from .entities import Side

if TYPE_CHECKING:
    from .match import MatchPhase


class EventKind(Enum):
    """Kinds of things the presentation layer may react to."""

    WALL_HIT = auto()
    PADDLE_HIT = auto()
    GOAL = auto()
    PHASE_CHANGED = auto()


@dataclass(frozen=True, slots=True)
class MatchEvent:
    """One notification; ``side`` is the paddle hit or the winner of a goal."""

    kind: EventKind
    side: Side | None = None
    previous: MatchPhase | None = None
    current: MatchPhase | None = None

    @classmethod
    def wall_hit(cls) -> MatchEvent:
        return cls(EventKind.WALL_HIT)

    @classmethod
    def paddle_hit(cls, side: Side) -> MatchEvent:
        return cls(EventKind.PADDLE_HIT, side=side)

    @classmethod
    def goal(cls, winner: Side) -> MatchEvent:
        return cls(EventKind.GOAL, side=winner)

    @classmethod
    def phase_changed(cls, previous: MatchPhase, current: MatchPhase) -> MatchEvent:
        return cls(EventKind.PHASE_CHANGED, previous=previous, current=current)
