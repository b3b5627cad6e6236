"""
Wall and paddle collisions, scoring and ball reset.
"""

from src.pong import constants
from src.models.pong import (
    CollisionResult,
    GameState,
    HorizontalOutcome,
    Side,
    SoundEvent,
    Viewport,
)
from src.logger.logger import logger


def is_in_catch_window(paddle_y: float, ball_y: float) -> bool:
    """
    Check if a ball at ball_y is returned by a paddle centred at paddle_y.
    Touching the edge of the window is a miss.
    """
    return (
        paddle_y - constants.CATCH_HALF_HEIGHT
        < ball_y
        < paddle_y + constants.CATCH_HALF_HEIGHT
    )


def resolve_collisions(state: GameState, viewport: Viewport) -> CollisionResult:
    """
    Bounces the ball off the top/bottom walls, then checks whether it reached
    the left or right edge. At an edge the paddle on that side either returns
    the ball or the opposite side scores and the ball goes back to the centre.
    """
    ball = state.ball
    height = viewport.half_height - constants.PLAYFIELD_MARGIN
    width = viewport.half_width - constants.PLAYFIELD_MARGIN
    result = CollisionResult()

    if ball.y >= height or ball.y <= -height:
        ball.velocity.y = -ball.velocity.y
        result.wall_bounce = True
        result.sounds.append(SoundEvent.WALL)
        logger.debug(f"Wall bounce at ({ball.x:.1f}, {ball.y:.1f})")

    if ball.x >= width:
        _resolve_edge(state, Side.RIGHT, result)
    elif ball.x <= -width:
        _resolve_edge(state, Side.LEFT, result)

    return result


def _resolve_edge(state: GameState, side: Side, result: CollisionResult):
    """
    The ball is at the edge defended by the paddle on `side`
    """
    ball = state.ball
    paddle = state.paddle(side)

    if is_in_catch_window(paddle.y, ball.y):
        ball.velocity.x = -ball.velocity.x
        state.rally += 1
        result.outcome = HorizontalOutcome.CATCH
        result.sounds.append(SoundEvent.CATCH)
        logger.debug(f"{side.value} paddle returned the ball, rally {state.rally}")
        return

    scorer = side.opposite
    score = state.score(scorer)
    score.tally += 1
    ball.reset()
    state.rally = 0
    result.outcome = HorizontalOutcome.SCORE
    result.scorer = scorer
    result.sounds.append(SoundEvent.SCORE)
    logger.info(
        f"Point to {scorer.value}: "
        f"{state.score(Side.LEFT).tally} - {state.score(Side.RIGHT).tally}"
    )
