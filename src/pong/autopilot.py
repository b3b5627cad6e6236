"""
Auto-pilot for paddles nobody is controlling.

The controller extrapolates the ball along a straight line to the paddle's
vertical plane and nudges the paddle one step towards that point each frame.
Bounces off the top and bottom walls on the way are not taken into account,
so the prediction is only exact for balls that reach the plane directly.
"""

from typing import Optional
from src.models.pong import Ball, Paddle, Side, Viewport
from src.logger.logger import logger


def paddle_plane_x(side: Side, viewport: Viewport) -> float:
    """
    Horizontal coordinate the auto-pilot aims for on the given side
    """
    if side is Side.LEFT:
        return -viewport.half_width
    return viewport.half_width


def predict_target_y(ball: Ball, plane_x: float) -> Optional[float]:
    """
    Where the ball crosses x = plane_x if it keeps its current direction.
    Returns None when the ball has no horizontal velocity.
    """
    if ball.velocity.x == 0:
        return None
    t = (plane_x - ball.x) / ball.velocity.x
    return ball.y + ball.velocity.y * t


def steer(paddle: Paddle, ball: Ball, viewport: Viewport):
    """
    Moves the paddle at most one step towards the predicted crossing point
    """
    target_y = predict_target_y(ball, paddle_plane_x(paddle.side, viewport))
    if target_y is None:
        logger.debug(f"No prediction for the {paddle.side.value} paddle this frame")
        return

    if target_y > paddle.y:
        paddle.y += viewport.paddle_step
    elif target_y < paddle.y:
        paddle.y -= viewport.paddle_step
