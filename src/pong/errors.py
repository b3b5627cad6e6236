"""
Errors raised by the Pong simulation core
"""


class MissingEntityError(LookupError):
    """
    A required entity (paddle or score for a side) is absent from the game state.
    This is a programming error: the frame cannot proceed.
    """
