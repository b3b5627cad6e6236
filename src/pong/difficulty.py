"""
Ball speed as a function of the score and the current rally
"""

from src.pong import constants
from src.models.pong import GameState


def compute_speed_factor(total_score: int, rally: int) -> float:
    """
    The score contribution stops growing at SCORE_SPEED_CAP points,
    the rally contribution does not.
    """
    return (
        constants.BASE_SPEED_FACTOR
        + min(total_score, constants.SCORE_SPEED_CAP) / constants.SCORE_SPEED_DIVISOR
        + rally / constants.RALLY_SPEED_DIVISOR
    )


def update_speed_factor(state: GameState) -> float:
    state.ball.speed_factor = compute_speed_factor(state.total_score(), state.rally)
    return state.ball.speed_factor
