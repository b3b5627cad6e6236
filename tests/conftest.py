"""
Shared fixtures for the Pong tests
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest  # pylint: disable=wrong-import-position
from src.models.pong import GameState, InputState, Viewport  # pylint: disable=wrong-import-position


@pytest.fixture
def viewport() -> Viewport:
    """800x600 playfield: walls at y=+-280, edges at x=+-380"""
    return Viewport(width=800, height=600)


@pytest.fixture
def state() -> GameState:
    return GameState.new()


@pytest.fixture
def no_input() -> InputState:
    return InputState()
