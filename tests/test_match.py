from __future__ import annotations

import dataclasses

import pytest

from lepong.entities import Side
from lepong.events import EventKind
from lepong.match import Action, Match, MatchPhase, PhaseKind
from lepong.physics import PaddleIntents
from lepong.settings import MatchConfig

CONFIG = MatchConfig(arena_width=800.0, arena_height=600.0)
IDLE = PaddleIntents()


def _playing_match() -> Match:
    match = Match(CONFIG)
    match.handle_action(Action.CONFIRM)
    return match


def _won_match(side: Side) -> Match:
    match = _playing_match()
    if side is Side.LEFT:
        match.ball.reset(795.0, 100.0, 10.0, 0.0)
    else:
        match.ball.reset(5.0, 100.0, -10.0, 0.0)
    match.advance(1.0, IDLE)
    assert match.phase == MatchPhase.won(side)
    return match


def test_new_match_starts_on_title_with_centered_ball() -> None:
    match = Match(CONFIG)
    state = match.current_render_state()
    assert state.phase.kind is PhaseKind.TITLE
    assert state.winner is None
    assert (state.ball.x, state.ball.y, state.ball.vx, state.ball.vy) == (400.0, 300.0, 300.0, 300.0)
    assert state.left_paddle.x == 50.0
    assert state.right_paddle.x == 750.0


def test_confirm_on_title_starts_play_without_moving_anything() -> None:
    match = Match(CONFIG)
    before = match.current_render_state()
    events = match.handle_action(Action.CONFIRM)
    after = match.current_render_state()

    assert match.phase == MatchPhase.playing()
    assert [event.kind for event in events] == [EventKind.PHASE_CHANGED]
    assert events[0].previous == MatchPhase.title()
    assert after.ball == before.ball
    assert after.left_paddle == before.left_paddle
    assert after.right_paddle == before.right_paddle


def test_title_ignores_simulation_and_other_actions() -> None:
    match = Match(CONFIG)
    assert match.advance(1.0, PaddleIntents(left_up=True)) == []
    assert match.handle_action(Action.RETURN_TO_TITLE) == []
    assert match.handle_action(Action.TOGGLE_OVERLAY) == []
    assert match.ball.x == 400.0
    assert match.left_paddle.y == 300.0


def test_one_second_tick_hits_bottom_wall() -> None:
    match = _playing_match()
    events = match.advance(1.0, IDLE)
    ball = match.ball
    assert (ball.x, ball.y) == (700.0, 600.0)
    assert (ball.vx, ball.vy) == (300.0, -300.0)
    assert [event.kind for event in events] == [EventKind.WALL_HIT]


def test_zero_elapsed_without_intents_changes_nothing() -> None:
    match = _playing_match()
    match.advance(0.37, IDLE)
    before = match.current_render_state()
    assert match.advance(0.0, IDLE) == []
    assert match.current_render_state() == before


def test_zero_elapsed_after_wall_and_paddle_hit_changes_nothing() -> None:
    match = _playing_match()
    match.left_paddle.y = 570.0
    match.ball.reset(56.0, 598.0, -60.0, 300.0)

    events = match.advance(0.1, IDLE)
    assert [event.kind for event in events] == [EventKind.WALL_HIT, EventKind.PADDLE_HIT]
    # Ball ends on the bottom wall but heading down after the paddle deflection.
    assert match.ball.y == 600.0
    assert match.ball.vy == pytest.approx(39.6)

    before = match.current_render_state()
    assert match.advance(0.0, IDLE) == []
    assert match.current_render_state() == before


def test_ball_leaving_left_side_gives_right_the_win() -> None:
    match = _playing_match()
    match.ball.reset(5.0, 100.0, -6.0, 0.0)
    events = match.advance(1.0, IDLE)

    assert match.phase == MatchPhase.won(Side.RIGHT)
    assert (match.ball.x, match.ball.vx, match.ball.vy) == (0.0, 0.0, 0.0)
    kinds = [event.kind for event in events]
    assert kinds == [EventKind.GOAL, EventKind.PHASE_CHANGED]
    assert events[0].side is Side.RIGHT


def test_ball_leaving_right_side_gives_left_the_win() -> None:
    match = _won_match(Side.LEFT)
    assert match.ball.x == 800.0
    assert match.current_render_state().winner is Side.LEFT


def test_won_freezes_paddles_and_ball() -> None:
    match = _won_match(Side.RIGHT)
    before = match.current_render_state()
    assert match.advance(0.5, PaddleIntents(left_up=True, right_down=True)) == []
    assert match.current_render_state() == before


def test_confirm_after_win_resets_ball_and_resumes() -> None:
    match = _won_match(Side.RIGHT)
    match.left_paddle.y = 120.0
    match.handle_action(Action.CONFIRM)

    assert match.phase == MatchPhase.playing()
    assert (match.ball.x, match.ball.y, match.ball.vx, match.ball.vy) == (400.0, 300.0, 300.0, 300.0)
    assert match.left_paddle.y == 120.0


def test_return_to_title_after_win() -> None:
    match = _won_match(Side.LEFT)
    events = match.handle_action(Action.RETURN_TO_TITLE)

    assert match.phase == MatchPhase.title()
    assert (match.ball.x, match.ball.y, match.ball.vx, match.ball.vy) == (400.0, 300.0, 300.0, 300.0)
    assert events[0].current == MatchPhase.title()
    assert match.current_render_state().returned_to_title


def test_playing_has_no_action_exit() -> None:
    match = _playing_match()
    assert match.handle_action(Action.RETURN_TO_TITLE) == []
    assert match.handle_action(Action.CONFIRM) == []
    assert match.phase == MatchPhase.playing()


def test_invariants_hold_over_a_long_rally() -> None:
    match = _playing_match()
    pattern = [
        PaddleIntents(left_up=True, right_down=True),
        PaddleIntents(left_down=True),
        PaddleIntents(right_up=True),
        IDLE,
    ]
    for tick in range(2000):
        if match.phase.kind is not PhaseKind.PLAYING:
            break
        match.advance(1 / 60, pattern[(tick // 45) % len(pattern)])
        assert 0.0 <= match.ball.y <= 600.0
        assert 0.0 <= match.left_paddle.y <= 600.0
        assert 0.0 <= match.right_paddle.y <= 600.0


def test_won_phase_requires_winner() -> None:
    with pytest.raises(ValueError):
        MatchPhase(PhaseKind.WON)
    with pytest.raises(ValueError):
        MatchPhase(PhaseKind.PLAYING, Side.LEFT)


def test_ball_radius_is_read_only() -> None:
    match = Match(CONFIG)
    with pytest.raises(AttributeError):
        match.ball.radius = 20.0  # type: ignore[misc]


def test_render_state_is_a_frozen_snapshot() -> None:
    match = _playing_match()
    state = match.current_render_state()
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.ball.x = 0.0  # type: ignore[misc]
    match.advance(0.1, IDLE)
    assert state.ball.x == 400.0


def test_invalid_config_is_rejected() -> None:
    with pytest.raises(ValueError):
        Match(MatchConfig(arena_width=0.0))
    with pytest.raises(ValueError):
        Match(MatchConfig(paddle_margin=-5.0))
