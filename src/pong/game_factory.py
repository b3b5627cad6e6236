"""
Game factory to get the Pong host based on the mode name
"""

from src.pong.base_game import BasePongGame
from src.pong.headless_game import HeadlessPongGame
from src.pong.pygame_game import PygamePongGame
from src.pong import constants


def get_pong_game(mode: str) -> type[BasePongGame]:
    """
    Get the Pong host class for the mode
    """
    match (mode):
        case constants.MODE_WINDOW:
            return PygamePongGame
        case constants.MODE_HEADLESS:
            return HeadlessPongGame
        case _:
            raise ValueError(f"Invalid mode: {mode}")
