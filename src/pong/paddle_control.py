"""
Paddle movement from player input or the auto-pilot
"""

from src.pong import constants
from src.pong import autopilot
from src.pong.interfaces import InputProvider
from src.models.pong import SIDE_ACTIONS, GameState, Paddle, Side, Viewport


def clamp_paddle(paddle: Paddle, viewport: Viewport):
    """
    Keeps the whole paddle inside the viewport
    """
    limit = viewport.half_height - constants.PADDLE_HALF_HEIGHT
    paddle.y = min(paddle.y, limit)
    paddle.y = max(paddle.y, -limit)


def control_paddles(state: GameState, viewport: Viewport, inputs: InputProvider):
    """
    Updates both paddles. Auto-piloted paddles follow the ball, the others
    follow the held move actions of their side. A toggle action pressed this
    frame switches the mode from the next frame on.
    """
    step = viewport.paddle_step

    for side in Side:
        paddle = state.paddle(side)
        up, down, toggle = SIDE_ACTIONS[side]

        if paddle.is_auto:
            autopilot.steer(paddle, state.ball, viewport)
        else:
            if inputs.is_held(up):
                paddle.y += step
            if inputs.is_held(down):
                paddle.y -= step

        if inputs.is_just_pressed(toggle):
            paddle.is_auto = not paddle.is_auto

        clamp_paddle(paddle, viewport)
