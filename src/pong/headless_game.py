"""
Runs the Pong simulation without a window, for demos and smoke tests.
"""

from typing import Dict, List, Optional, Tuple
from src.pong import constants
from src.pong.base_game import BasePongGame
from src.pong.interfaces import (
    InputProvider,
    ScoreDisplaySink,
    SoundSink,
    ViewportProvider,
)
from src.pong.simulation import PongSimulation
from src.models.pong import FrameResult, GameState, InputState, Side, SoundEvent
from src.utils.utils import log_scoreboard
from src.logger.logger import logger


class FixedViewport(ViewportProvider):
    """
    A playfield whose size never changes
    """

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def current_size(self) -> Tuple[float, float]:
        return self.width, self.height


class RecordingSoundSink(SoundSink):
    """
    Remembers the sounds instead of playing them
    """

    def __init__(self):
        self.events: List[SoundEvent] = []

    def play(self, event: SoundEvent):
        logger.debug(f"sound: {event.value}")
        self.events.append(event)


class RecordingScoreBoard(ScoreDisplaySink):
    """
    Keeps the last tally shown for each side
    """

    def __init__(self):
        self.tallies: Dict[Side, int] = {}

    def show(self, side: Side, tally: int):
        self.tallies[side] = tally


class HeadlessPongGame(BasePongGame):
    """
    Pong without pygame. Both paddles stay on auto-pilot unless
    the caller steps the game with other inputs.
    """

    def __init__(
        self,
        width: float = constants.SCREEN_WIDTH,
        height: float = constants.SCREEN_HEIGHT,
    ):
        self.viewport = FixedViewport(width, height)
        self.sounds = RecordingSoundSink()
        self.scoreboard = RecordingScoreBoard()
        self.simulation = PongSimulation(
            self.viewport, InputState(), self.sounds, self.scoreboard
        )
        self.frames = 0

    @property
    def state(self) -> GameState:
        return self.simulation.state

    def reset(self) -> GameState:
        self.frames = 0
        self.sounds.events.clear()
        self.scoreboard.tallies.clear()
        return self.simulation.reset()

    def step(self, inputs: InputProvider) -> FrameResult:
        self.simulation.input_provider = inputs
        result = self.simulation.tick()
        self.frames += 1
        return result

    def render(self):
        """Nothing to draw."""

    def close(self):
        """Nothing to release."""

    def run(self, max_frames: Optional[int] = None):
        """
        Let the auto-pilots play for a number of frames and log the result
        """
        frames = constants.HEADLESS_FRAMES if max_frames is None else max_frames
        idle = InputState()
        for _ in range(frames):
            self.step(idle)
        log_scoreboard(self.state, self.frames)
        self.close()
