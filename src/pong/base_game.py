"""
Common methods implemented by all Pong hosts
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.models.pong import FrameResult, GameState
from src.pong.interfaces import InputProvider


class BasePongGame(ABC):
    """
    Interface implemented by all applications hosting the Pong simulation
    """

    @abstractmethod
    def reset(self) -> GameState:
        """Reset the game state and return the initial state."""

    @abstractmethod
    def step(self, inputs: InputProvider) -> FrameResult:
        """Advance the simulation one frame with the given inputs, play the
        resulting sounds and update the score display."""

    @abstractmethod
    def render(self):
        """Render the current game state."""

    @abstractmethod
    def close(self):
        """Release whatever the host holds (window, mixer)."""

    @abstractmethod
    def run(self, max_frames: Optional[int] = None):
        """Main game loop"""
