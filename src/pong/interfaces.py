"""
What the simulation needs from the application hosting it
"""

from abc import ABC, abstractmethod
from typing import Tuple
from src.models.pong import Action, InputState, Side, SoundEvent


class ViewportProvider(ABC):
    """
    Supplies the playfield size
    """

    @abstractmethod
    def current_size(self) -> Tuple[float, float]:
        """Return the current (width, height) of the playfield."""


class InputProvider(ABC):
    """
    Supplies the state of the logical actions
    """

    @abstractmethod
    def is_held(self, action: Action) -> bool:
        """Whether the action is held down this frame."""

    @abstractmethod
    def is_just_pressed(self, action: Action) -> bool:
        """Whether the action went down this frame."""


class SoundSink(ABC):
    """
    Plays sound effects. Must return without waiting for playback.
    """

    @abstractmethod
    def play(self, event: SoundEvent):
        """Start playing the sound for the event."""


class ScoreDisplaySink(ABC):
    """
    Shows the scores
    """

    @abstractmethod
    def show(self, side: Side, tally: int):
        """Display the tally of one side."""


# A frozen InputState answers the same questions as a live input device
InputProvider.register(InputState)
