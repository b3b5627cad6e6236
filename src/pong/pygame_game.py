# pylint: disable=no-member
"""
Pygame host: window, keyboard, sound effects and score labels around the
Pong simulation.
"""

import math
import struct
from typing import Dict, Iterable, Optional, Sequence, Set, Tuple
import pygame
from src.pong import constants
from src.pong.base_game import BasePongGame
from src.pong.interfaces import (
    InputProvider,
    ScoreDisplaySink,
    SoundSink,
    ViewportProvider,
)
from src.pong.simulation import PongSimulation
from src.models.pong import Action, Color, FrameResult, GameState, Side, SoundEvent
from src.logger.logger import logger

KEY_BINDINGS: Dict[Action, int] = {
    Action.MOVE_UP_LEFT: pygame.K_w,
    Action.MOVE_DOWN_LEFT: pygame.K_s,
    Action.TOGGLE_AUTO_LEFT: pygame.K_q,
    Action.MOVE_UP_RIGHT: pygame.K_UP,
    Action.MOVE_DOWN_RIGHT: pygame.K_DOWN,
    Action.TOGGLE_AUTO_RIGHT: pygame.K_p,
}

# Walls and paddles share the short blip, points get the longer ping
SOUND_NAMES: Dict[SoundEvent, str] = {
    SoundEvent.WALL: "button",
    SoundEvent.CATCH: "button",
    SoundEvent.SCORE: "ping",
}

SCORE_COLORS: Dict[Side, Color] = {
    Side.LEFT: constants.RED,
    Side.RIGHT: constants.BLUE,
}


def to_screen(x: float, y: float, screen_size: Tuple[int, int]) -> Tuple[float, float]:
    """
    Convert simulation coordinates (origin at the centre, y up)
    to pygame coordinates (origin top left, y down)
    """
    width, height = screen_size
    return width / 2 + x, height / 2 - y


class PygameViewport(ViewportProvider):
    """
    The window surface is the playfield
    """

    def __init__(self, screen: pygame.Surface):
        self.screen = screen

    def current_size(self) -> Tuple[float, float]:
        width, height = self.screen.get_size()
        return float(width), float(height)


class PygameInput(InputProvider):
    """
    Keyboard state for one frame. `update` must be called once per frame with
    that frame's events and the keys currently held.
    """

    def __init__(self, key_bindings: Optional[Dict[Action, int]] = None):
        self.key_bindings = key_bindings or KEY_BINDINGS
        self.pressed: Sequence[bool] = ()
        self.just_pressed_keys: Set[int] = set()

    def update(self, events: Iterable[pygame.event.Event], pressed: Sequence[bool]):
        self.pressed = pressed
        self.just_pressed_keys = {
            event.key for event in events if event.type == pygame.KEYDOWN
        }

    def is_held(self, action: Action) -> bool:
        key = self.key_bindings[action]
        try:
            return bool(self.pressed[key])
        except (IndexError, KeyError):
            return False

    def is_just_pressed(self, action: Action) -> bool:
        return self.key_bindings[action] in self.just_pressed_keys


class PygameSound(SoundSink):
    """
    Procedurally generated sound effects, no asset files needed.
    If the mixer cannot be opened the game runs silently.
    """

    def __init__(self):
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init(
                frequency=constants.SOUND_SAMPLE_RATE, size=-16, channels=2
            )
        except pygame.error as e:
            logger.warning(f"Sound disabled: {e}")
            self.enabled = False
            return
        self.enabled = True
        self.sounds["button"] = self.generate_wave(
            constants.BUTTON_SOUND_DURATION, *constants.BUTTON_SOUND_FREQUENCIES
        )
        self.sounds["ping"] = self.generate_wave(
            constants.PING_SOUND_DURATION, *constants.PING_SOUND_FREQUENCIES
        )

    @staticmethod
    def generate_wave(
        duration: float, freq_start: float, freq_end: float
    ) -> pygame.mixer.Sound:
        """
        A sine sweep from freq_start to freq_end with a quadratic fade out
        """
        sample_rate = constants.SOUND_SAMPLE_RATE
        n_samples = int(sample_rate * duration)
        buf = bytearray()
        for i in range(n_samples):
            t = i / sample_rate
            freq = freq_start + (freq_end - freq_start) * (t / duration)
            envelope = (1.0 - t / duration) ** 2
            value = int(
                math.sin(2 * math.pi * freq * t)
                * envelope
                * constants.SOUND_VOLUME
                * 32767
            )
            buf.extend(struct.pack("<hh", value, value))
        return pygame.mixer.Sound(buffer=bytes(buf))

    def play(self, event: SoundEvent):
        if self.enabled:
            self.sounds[SOUND_NAMES[event]].play()


class PygameScoreBoard(ScoreDisplaySink):
    """
    "Score: n" labels in the bottom corners of the window
    """

    def __init__(self, font: pygame.font.Font):
        self.font = font
        self.tallies: Dict[Side, int] = {side: 0 for side in Side}

    def show(self, side: Side, tally: int):
        self.tallies[side] = tally

    def draw(self, screen: pygame.Surface):
        width, height = screen.get_size()
        for side in Side:
            surface = self.font.render(
                constants.SCORE_LABEL.format(tally=self.tallies[side]),
                True,
                SCORE_COLORS[side],
            )
            rect = surface.get_rect()
            if side is Side.LEFT:
                rect.bottomleft = (10, height - 10)
            else:
                rect.bottomright = (width - 10, height - 10)
            screen.blit(surface, rect)


class PygamePongGame(BasePongGame):
    """
    Pong in a resizable pygame window
    """

    def __init__(
        self,
        width: int = constants.SCREEN_WIDTH,
        height: int = constants.SCREEN_HEIGHT,
        fps: int = constants.FPS,
    ):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(constants.SCREEN_CAPTION)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.font = pygame.font.Font(None, constants.SCORE_FONT_SIZE)

        self.keyboard = PygameInput()
        self.sound = PygameSound()
        self.scoreboard = PygameScoreBoard(self.font)
        self.simulation = PongSimulation(
            PygameViewport(self.screen), self.keyboard, self.sound, self.scoreboard
        )

    @property
    def state(self) -> GameState:
        return self.simulation.state

    def reset(self) -> GameState:
        """Reset the game state and return the initial state."""
        for side in Side:
            self.scoreboard.show(side, 0)
        return self.simulation.reset()

    def step(self, inputs: InputProvider) -> FrameResult:
        self.simulation.input_provider = inputs
        return self.simulation.tick()

    def render(self):
        """Render the current game state."""
        self.screen.fill(constants.BACKGROUND_COLOR)
        size = self.screen.get_size()

        ball = self.state.ball
        ball_rect = pygame.Rect(0, 0, constants.BALL_SIZE, constants.BALL_SIZE)
        ball_rect.center = to_screen(ball.x, ball.y, size)
        pygame.draw.ellipse(self.screen, constants.BALL_COLOR, ball_rect)

        paddle_x = size[0] / 2 - constants.PADDLE_INSET
        for side in Side:
            paddle = self.state.paddle(side)
            x = -paddle_x if side is Side.LEFT else paddle_x
            paddle_rect = pygame.Rect(
                0, 0, constants.PADDLE_WIDTH, constants.PADDLE_HEIGHT
            )
            paddle_rect.center = to_screen(x, paddle.y, size)
            pygame.draw.rect(self.screen, constants.PADDLE_COLOR, paddle_rect)

        self.scoreboard.draw(self.screen)
        pygame.display.flip()

    def close(self):
        """Close the Pygame window."""
        pygame.quit()

    def run(self, max_frames: Optional[int] = None):
        """Main game loop for human play."""
        frames = 0
        while max_frames is None or frames < max_frames:
            events = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                break

            self.keyboard.update(events, pygame.key.get_pressed())
            self.step(self.keyboard)
            self.render()
            self.clock.tick(self.fps)
            frames += 1

        self.close()
