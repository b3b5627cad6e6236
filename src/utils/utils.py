"""
Common utility functions used by various packages
"""

from src.models.pong import GameState, Side
from src.logger.logger import logger


def print_horizontal_line():
    """
    Print a horizontal line to the console
    """
    logger.info("=" * 40)


def format_scoreboard(state: GameState) -> str:
    """
    One line summary of both scores and the current rally
    """
    return (
        f"Left {state.score(Side.LEFT).tally} - "
        f"{state.score(Side.RIGHT).tally} Right (rally {state.rally})"
    )


def log_scoreboard(state: GameState, frames: int):
    """
    Log the scoreboard after a number of frames
    """
    print_horizontal_line()
    logger.info(f"After {frames} frames: {format_scoreboard(state)}")
    print_horizontal_line()
