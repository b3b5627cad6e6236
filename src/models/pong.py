# pylint: disable=missing-class-docstring
"""
Models related to Pong games
"""
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple
from pydantic import BaseModel, Field
from src.pong import constants
from src.pong.errors import MissingEntityError


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "Side":
        """The side facing this one across the playfield"""
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class SoundEvent(Enum):
    WALL = "wall"
    CATCH = "catch"
    SCORE = "score"


class Action(Enum):
    MOVE_UP_LEFT = "move-up-left"
    MOVE_DOWN_LEFT = "move-down-left"
    TOGGLE_AUTO_LEFT = "toggle-auto-left"
    MOVE_UP_RIGHT = "move-up-right"
    MOVE_DOWN_RIGHT = "move-down-right"
    TOGGLE_AUTO_RIGHT = "toggle-auto-right"


# Up, down and toggle actions per side
SIDE_ACTIONS: Dict[Side, Tuple[Action, Action, Action]] = {
    Side.LEFT: (Action.MOVE_UP_LEFT, Action.MOVE_DOWN_LEFT, Action.TOGGLE_AUTO_LEFT),
    Side.RIGHT: (
        Action.MOVE_UP_RIGHT,
        Action.MOVE_DOWN_RIGHT,
        Action.TOGGLE_AUTO_RIGHT,
    ),
}


class HorizontalOutcome(Enum):
    NONE = "none"
    CATCH = "catch"
    SCORE = "score"


class Velocity(BaseModel):

    x: float
    y: float


class Viewport(BaseModel):
    """
    Playfield size for one frame. Non-positive sizes are rejected here,
    at the boundary with whatever supplies them.
    """

    width: float = Field(gt=0)
    height: float = Field(gt=0)

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    @property
    def paddle_step(self) -> float:
        """Distance a paddle travels in one frame"""
        return self.height / constants.PADDLE_STEP_DIVISOR


class Ball(BaseModel):

    x: float = constants.BALL_START_X
    y: float = constants.BALL_START_Y
    velocity: Velocity = Field(
        default_factory=lambda: Velocity(
            x=constants.BALL_VELOCITY_X, y=constants.BALL_VELOCITY_Y
        )
    )
    speed_factor: float = Field(default=constants.BASE_SPEED_FACTOR, ge=1.0)

    def reset(self):
        """
        Puts the ball back at the centre. The direction is kept.
        """
        self.x = constants.BALL_START_X
        self.y = constants.BALL_START_Y


class Paddle(BaseModel):

    side: Side = Field(frozen=True)
    y: float = 0.0
    is_auto: bool = True


class Score(BaseModel):

    side: Side = Field(frozen=True)
    tally: int = Field(default=0, ge=0)


class GameState(BaseModel):
    """
    Everything the simulation reads and writes in a frame
    """

    ball: Ball
    paddles: Dict[Side, Paddle]
    scores: Dict[Side, Score]
    rally: int = Field(default=0, ge=0)

    @staticmethod
    def new() -> "GameState":
        """
        Create the startup state: a centred ball, two auto-piloted paddles
        and two empty scores
        """
        return GameState(
            ball=Ball(),
            paddles={side: Paddle(side=side) for side in Side},
            scores={side: Score(side=side) for side in Side},
        )

    def paddle(self, side: Side) -> Paddle:
        try:
            return self.paddles[side]
        except KeyError as e:
            raise MissingEntityError(f"No paddle on the {side.value} side") from e

    def score(self, side: Side) -> Score:
        try:
            return self.scores[side]
        except KeyError as e:
            raise MissingEntityError(f"No score for the {side.value} side") from e

    def total_score(self) -> int:
        return sum(score.tally for score in self.scores.values())


class InputState(BaseModel):
    """
    Snapshot of the logical actions for one frame
    """

    held: Set[Action] = Field(default_factory=set)
    just_pressed: Set[Action] = Field(default_factory=set)

    def is_held(self, action: Action) -> bool:
        return action in self.held

    def is_just_pressed(self, action: Action) -> bool:
        return action in self.just_pressed


class CollisionResult(BaseModel):

    wall_bounce: bool = False
    outcome: HorizontalOutcome = HorizontalOutcome.NONE
    scorer: Optional[Side] = None
    sounds: List[SoundEvent] = Field(default_factory=list)


class FrameResult(BaseModel):

    state: GameState
    sounds: List[SoundEvent]
    collision: CollisionResult


Color = Tuple[int, int, int]
