"""Ball and paddle entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .settings import MatchConfig


class Side(str, Enum):
    """Which half of the arena a paddle defends."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Box:
    """Axis-aligned rectangle with a top-left anchor."""

    x: float
    y: float
    width: float
    height: float


@dataclass(slots=True, init=False)
class Ball:
    """Ball state in arena coordinates; velocity is in units per second."""

    x: float
    y: float
    vx: float
    vy: float
    _radius: float

    def __init__(self, x: float, y: float, vx: float, vy: float, radius: float) -> None:
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self._radius = radius

    @classmethod
    def centered(cls, config: MatchConfig) -> Ball:
        """Create a ball at the arena center with the canonical speed."""
        cx, cy = config.center
        vx, vy = config.initial_ball_speed
        return cls(cx, cy, vx, vy, config.ball_radius)

    @property
    def radius(self) -> float:
        return self._radius

    def reset(self, x: float, y: float, vx: float, vy: float) -> None:
        """Place the ball and set its velocity."""
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy

    def stop(self) -> None:
        self.vx = 0.0
        self.vy = 0.0


@dataclass(slots=True)
class Paddle:
    """A player paddle; x is fixed for the match, y is its vertical center."""

    side: Side
    x: float
    y: float
    width: float
    height: float
    speed: float
    collision_size: tuple[float, float] = (10.0, 100.0)

    @classmethod
    def for_side(cls, side: Side, config: MatchConfig) -> Paddle:
        """Create a paddle at its starting spot for the given side."""
        if side is Side.LEFT:
            x = config.paddle_margin
        else:
            x = config.arena_width - config.paddle_margin
        return cls(
            side=side,
            x=x,
            y=config.arena_height / 2.0,
            width=config.paddle_width,
            height=config.paddle_height,
            speed=config.paddle_speed,
            collision_size=config.collision_size,
        )

    @property
    def collision_rect(self) -> Box:
        """Rectangle the ball collides with.

        Only the anchor uses ``width`` and ``height``; the size is always
        ``collision_size`` (10x100 by default), so resizing a paddle moves its
        hit box without growing it.
        """
        return Box(
            self.x - self.width,
            self.y - self.height / 2.0,
            self.collision_size[0],
            self.collision_size[1],
        )

    @property
    def draw_rect(self) -> Box:
        """Rectangle drawn centered on the paddle position."""
        return Box(
            self.x - self.width / 2.0,
            self.y - self.height / 2.0,
            self.collision_size[0],
            self.collision_size[1],
        )
