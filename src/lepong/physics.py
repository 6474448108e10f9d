"""Per-tick ball and paddle simulation.

A tick runs in a fixed order: integrate the ball, bounce it off the top and
bottom walls, move the paddles, bounce it off the paddles (left first), and
finally check whether it left the arena through a side wall.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from .entities import Ball, Box, Paddle, Side
from .events import MatchEvent
from .settings import MatchConfig
from .utils import clamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PaddleIntents:
    """Held movement keys for this frame."""

    left_up: bool = False
    left_down: bool = False
    right_up: bool = False
    right_down: bool = False

    def for_side(self, side: Side) -> tuple[bool, bool]:
        """Return the (up, down) pair for one paddle."""
        if side is Side.LEFT:
            return self.left_up, self.left_down
        return self.right_up, self.right_down


@dataclass(slots=True)
class StepResult:
    """Events produced by one tick and the winner, if the tick ended play."""

    events: list[MatchEvent] = field(default_factory=list)
    winner: Side | None = None


def circle_intersects_box(cx: float, cy: float, radius: float, box: Box) -> bool:
    """Return whether a circle touches or overlaps an axis-aligned box."""
    half_w = box.width / 2.0
    half_h = box.height / 2.0
    dx = abs(cx - (box.x + half_w))
    dy = abs(cy - (box.y + half_h))

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    corner_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_sq <= radius * radius


def integrate_ball(ball: Ball, elapsed: float) -> None:
    ball.x += ball.vx * elapsed
    ball.y += ball.vy * elapsed


def bounce_off_walls(ball: Ball, arena_height: float, previous_y: float) -> bool:
    """Clamp the ball to the top/bottom walls and reflect it; return True on a bounce.

    Landing exactly on a wall counts as a bounce only when the ball arrived
    there this tick; a ball already resting on a wall is left alone.
    """
    if ball.y > arena_height or (ball.y == arena_height and previous_y < arena_height):
        ball.y = arena_height
        ball.vy = -ball.vy
        return True
    if ball.y < 0 or (ball.y == 0 and previous_y > 0):
        ball.y = 0.0
        ball.vy = -ball.vy
        return True
    return False


def move_paddle(paddle: Paddle, up: bool, down: bool, elapsed: float, arena_height: float) -> None:
    """Apply held movement keys and keep the paddle center inside the arena."""
    if up:
        paddle.y = clamp(paddle.y - paddle.speed * elapsed, 0.0, arena_height)
    if down:
        paddle.y = clamp(paddle.y + paddle.speed * elapsed, 0.0, arena_height)


def bounce_off_paddle(ball: Ball, paddle: Paddle, speedup: float) -> bool:
    """Reflect the ball off a paddle it overlaps while heading toward it.

    The outgoing vertical speed depends on where the ball met the paddle
    relative to its center, scaled by the new horizontal speed.
    """
    if not circle_intersects_box(ball.x, ball.y, ball.radius, paddle.collision_rect):
        return False

    offset = (ball.y - paddle.y) / (paddle.height / 2.0)
    if paddle.side is Side.LEFT:
        if ball.vx >= 0:
            return False
        ball.vx *= -speedup
        ball.vy = offset * ball.vx
    else:
        if ball.vx <= 0:
            return False
        ball.vx *= -speedup
        ball.vy = offset * -ball.vx
    return True


def detect_goal(ball: Ball, arena_width: float) -> Side | None:
    """Stop the ball on the side wall it crossed and return the winning side."""
    if ball.x < 0:
        ball.x = 0.0
        ball.stop()
        return Side.RIGHT
    if ball.x > arena_width:
        ball.x = arena_width
        ball.stop()
        return Side.LEFT
    return None


def step(
    ball: Ball,
    paddles: tuple[Paddle, Paddle],
    intents: PaddleIntents,
    elapsed: float,
    config: MatchConfig,
) -> StepResult:
    """Advance one tick of active play."""
    result = StepResult()

    previous_y = ball.y
    integrate_ball(ball, elapsed)

    if bounce_off_walls(ball, config.arena_height, previous_y):
        logger.debug("Wall bounce at x=%.1f", ball.x)
        result.events.append(MatchEvent.wall_hit())

    for paddle in paddles:
        up, down = intents.for_side(paddle.side)
        move_paddle(paddle, up, down, elapsed, config.arena_height)

    for paddle in paddles:
        if bounce_off_paddle(ball, paddle, config.speedup):
            logger.debug("%s paddle hit, ball velocity now (%.1f, %.1f)", paddle.side.value, ball.vx, ball.vy)
            result.events.append(MatchEvent.paddle_hit(paddle.side))

    winner = detect_goal(ball, config.arena_width)
    if winner is not None:
        result.winner = winner
        result.events.append(MatchEvent.goal(winner))
    return result
