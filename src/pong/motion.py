"""
Ball kinematics
"""

from src.models.pong import GameState


def advance_ball(state: GameState):
    """
    Moves the ball by its velocity scaled by its speed factor.
    Leaving the playfield is dealt with by the collision stage.
    """
    ball = state.ball
    ball.x += ball.velocity.x * ball.speed_factor
    ball.y += ball.velocity.y * ball.speed_factor
