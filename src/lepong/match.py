"""Match aggregate: phase state machine around the simulation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import logging

from . import physics
from .entities import Ball, Paddle, Side
from .events import MatchEvent
from .physics import PaddleIntents
from .settings import MatchConfig

logger = logging.getLogger(__name__)


class PhaseKind(Enum):
    """Finite phases of a match."""

    TITLE = auto()
    PLAYING = auto()
    WON = auto()


@dataclass(frozen=True, slots=True)
class MatchPhase:
    """Current phase; ``winner`` is set exactly when the phase is WON."""

    kind: PhaseKind
    winner: Side | None = None

    def __post_init__(self) -> None:
        if (self.kind is PhaseKind.WON) != (self.winner is not None):
            raise ValueError("a winner is required for WON and forbidden otherwise")

    @classmethod
    def title(cls) -> MatchPhase:
        return cls(PhaseKind.TITLE)

    @classmethod
    def playing(cls) -> MatchPhase:
        return cls(PhaseKind.PLAYING)

    @classmethod
    def won(cls, winner: Side) -> MatchPhase:
        return cls(PhaseKind.WON, winner)

    def __str__(self) -> str:
        if self.winner is not None:
            return f"{self.kind.name}({self.winner.name})"
        return self.kind.name


class Action(Enum):
    """Discrete press-edge actions."""

    CONFIRM = auto()
    RETURN_TO_TITLE = auto()
    TOGGLE_OVERLAY = auto()


@dataclass(frozen=True, slots=True)
class BallView:
    x: float
    y: float
    vx: float
    vy: float
    radius: float


@dataclass(frozen=True, slots=True)
class PaddleView:
    side: Side
    x: float
    y: float
    width: float
    height: float
    collision_rect: tuple[float, float, float, float]
    draw_rect: tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class RenderState:
    """Read-only snapshot of everything needed to draw a frame."""

    phase: MatchPhase
    ball: BallView
    left_paddle: PaddleView
    right_paddle: PaddleView
    arena_size: tuple[float, float]
    returned_to_title: bool = False

    @property
    def winner(self) -> Side | None:
        return self.phase.winner


def _paddle_view(paddle: Paddle) -> PaddleView:
    hit = paddle.collision_rect
    drawn = paddle.draw_rect
    return PaddleView(
        side=paddle.side,
        x=paddle.x,
        y=paddle.y,
        width=paddle.width,
        height=paddle.height,
        collision_rect=(hit.x, hit.y, hit.width, hit.height),
        draw_rect=(drawn.x, drawn.y, drawn.width, drawn.height),
    )


class Match:
    """Ball, both paddles and the phase for one game session."""

    def __init__(self, config: MatchConfig | None = None) -> None:
        self.config = (config or MatchConfig()).validate()
        self.ball = Ball.centered(self.config)
        self.left_paddle = Paddle.for_side(Side.LEFT, self.config)
        self.right_paddle = Paddle.for_side(Side.RIGHT, self.config)
        self.phase = MatchPhase.title()
        self.returned_to_title = False

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        return (self.left_paddle, self.right_paddle)

    def advance(self, elapsed: float, intents: PaddleIntents) -> list[MatchEvent]:
        """Simulate one frame; does nothing unless the match is being played."""
        if self.phase.kind is not PhaseKind.PLAYING:
            return []

        result = physics.step(self.ball, self.paddles, intents, elapsed, self.config)
        if result.winner is not None:
            logger.info("Goal: %s player wins", result.winner.value)
            result.events.append(self._enter(MatchPhase.won(result.winner)))
        return result.events

    def handle_action(self, action: Action) -> list[MatchEvent]:
        """Apply a press-edge action; returns a PHASE_CHANGED event on a transition."""
        kind = self.phase.kind
        if action is Action.CONFIRM:
            if kind is PhaseKind.TITLE:
                return [self._enter(MatchPhase.playing())]
            if kind is PhaseKind.WON:
                self.reset_ball()
                return [self._enter(MatchPhase.playing())]
        elif action is Action.RETURN_TO_TITLE and kind is PhaseKind.WON:
            self.reset_ball()
            self.returned_to_title = True
            return [self._enter(MatchPhase.title())]
        return []

    def reset_ball(self) -> None:
        """Put the ball back at the arena center with the canonical speed."""
        cx, cy = self.config.center
        vx, vy = self.config.initial_ball_speed
        self.ball.reset(cx, cy, vx, vy)

    def current_render_state(self) -> RenderState:
        ball = self.ball
        return RenderState(
            phase=self.phase,
            ball=BallView(ball.x, ball.y, ball.vx, ball.vy, ball.radius),
            left_paddle=_paddle_view(self.left_paddle),
            right_paddle=_paddle_view(self.right_paddle),
            arena_size=(self.config.arena_width, self.config.arena_height),
            returned_to_title=self.returned_to_title,
        )

    def _enter(self, phase: MatchPhase) -> MatchEvent:
        previous = self.phase
        self.phase = phase
        logger.info("Phase %s -> %s", previous, phase)
        return MatchEvent.phase_changed(previous, phase)
