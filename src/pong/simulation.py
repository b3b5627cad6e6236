"""
One frame of the Pong simulation, and a driver binding it to a host.
"""

from typing import Optional
from src.models.pong import (
    Action,
    FrameResult,
    GameState,
    InputState,
    Side,
    Viewport,
)
from src.pong.interfaces import (
    InputProvider,
    ScoreDisplaySink,
    SoundSink,
    ViewportProvider,
)
from src.pong.motion import advance_ball
from src.pong.collision import resolve_collisions
from src.pong.difficulty import update_speed_factor
from src.pong.paddle_control import control_paddles


def advance_frame(
    state: GameState, viewport: Viewport, inputs: InputProvider
) -> FrameResult:
    """
    Runs the stages of a frame in order on a copy of `state`:
    motion, collisions and scoring, difficulty, paddles.
    The given state is left untouched.
    """
    next_state = state.model_copy(deep=True)

    advance_ball(next_state)
    collision = resolve_collisions(next_state, viewport)
    update_speed_factor(next_state)
    control_paddles(next_state, viewport, inputs)

    return FrameResult(
        state=next_state, sounds=list(collision.sounds), collision=collision
    )


def snapshot_inputs(inputs: InputProvider) -> InputState:
    """
    Freeze the provider's answers for every action so a frame sees one consistent input state
    """
    return InputState(
        held={action for action in Action if inputs.is_held(action)},
        just_pressed={action for action in Action if inputs.is_just_pressed(action)},
    )


class PongSimulation:
    """
    Keeps the current game state and advances it one frame at a time,
    reading from and reporting to the host's collaborators.
    """

    def __init__(
        self,
        viewport_provider: ViewportProvider,
        input_provider: InputProvider,
        sound_sink: SoundSink,
        score_sink: ScoreDisplaySink,
        state: Optional[GameState] = None,
    ):
        self.viewport_provider = viewport_provider
        self.input_provider = input_provider
        self.sound_sink = sound_sink
        self.score_sink = score_sink
        self.state = state if state is not None else GameState.new()

    def reset(self) -> GameState:
        """Start a new session from the startup state."""
        self.state = GameState.new()
        return self.state

    def tick(self) -> FrameResult:
        """
        Advance one frame, play its sounds and publish both scores
        """
        width, height = self.viewport_provider.current_size()
        viewport = Viewport(width=width, height=height)
        inputs = snapshot_inputs(self.input_provider)

        result = advance_frame(self.state, viewport, inputs)
        self.state = result.state

        for sound in result.sounds:
            self.sound_sink.play(sound)
        for side in Side:
            self.score_sink.show(side, self.state.score(side).tally)

        return result
