import pytest
from pydantic import ValidationError
from src.models.pong import Ball, GameState, InputState, Action, Paddle, Side, Viewport
from src.pong.errors import MissingEntityError


def test_new_state_has_one_ball_two_paddles_two_scores(state):
    assert (state.ball.x, state.ball.y) == (0, 0)
    assert (state.ball.velocity.x, state.ball.velocity.y) == (3, 3)
    assert state.ball.speed_factor == 1.0
    assert set(state.paddles) == {Side.LEFT, Side.RIGHT}
    assert all(paddle.is_auto for paddle in state.paddles.values())
    assert all(paddle.y == 0 for paddle in state.paddles.values())
    assert {side: score.tally for side, score in state.scores.items()} == {
        Side.LEFT: 0,
        Side.RIGHT: 0,
    }
    assert state.rally == 0


def test_lookups_match_side_tags(state):
    assert state.paddle(Side.LEFT).side is Side.LEFT
    assert state.score(Side.RIGHT).side is Side.RIGHT


def test_missing_entities_raise(state):
    del state.paddles[Side.RIGHT]
    del state.scores[Side.LEFT]
    with pytest.raises(MissingEntityError):
        state.paddle(Side.RIGHT)
    with pytest.raises(MissingEntityError):
        state.score(Side.LEFT)


def test_opposite_side():
    assert Side.LEFT.opposite is Side.RIGHT
    assert Side.RIGHT.opposite is Side.LEFT


def test_total_score(state):
    state.score(Side.LEFT).tally = 4
    state.score(Side.RIGHT).tally = 7
    assert state.total_score() == 11


def test_paddle_side_is_immutable():
    paddle = Paddle(side=Side.LEFT)
    with pytest.raises(ValidationError):
        paddle.side = Side.RIGHT


def test_speed_factor_below_one_is_rejected():
    with pytest.raises(ValidationError):
        Ball(speed_factor=0.5)


@pytest.mark.parametrize("width, height", [(0, 600), (800, 0), (-800, 600)])
def test_non_positive_viewport_is_rejected(width, height):
    with pytest.raises(ValidationError):
        Viewport(width=width, height=height)


def test_viewport_derived_sizes(viewport):
    assert viewport.half_width == 400
    assert viewport.half_height == 300
    assert viewport.paddle_step == 6


def test_copy_is_independent(state):
    copied = state.model_copy(deep=True)
    copied.ball.x = 10
    copied.paddle(Side.LEFT).y = 20
    copied.score(Side.RIGHT).tally = 1
    assert state.ball.x == 0
    assert state.paddle(Side.LEFT).y == 0
    assert state.score(Side.RIGHT).tally == 0


def test_input_state_queries():
    inputs = InputState(
        held={Action.MOVE_UP_LEFT}, just_pressed={Action.TOGGLE_AUTO_RIGHT}
    )
    assert inputs.is_held(Action.MOVE_UP_LEFT)
    assert not inputs.is_held(Action.MOVE_DOWN_LEFT)
    assert inputs.is_just_pressed(Action.TOGGLE_AUTO_RIGHT)
    assert not inputs.is_just_pressed(Action.TOGGLE_AUTO_LEFT)
