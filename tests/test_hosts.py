import collections
import pygame
import pytest
from src.models.pong import Action, InputState, Side, SoundEvent
from src.pong import constants
from src.pong.game_factory import get_pong_game
from src.pong.headless_game import HeadlessPongGame
from src.pong.main import main, parse_args
from src.pong.pygame_game import (
    PygameInput,
    PygamePongGame,
    PygameViewport,
    SOUND_NAMES,
    to_screen,
)


def test_factory():
    assert get_pong_game(constants.MODE_HEADLESS) is HeadlessPongGame
    assert get_pong_game(constants.MODE_WINDOW) is PygamePongGame
    with pytest.raises(ValueError):
        get_pong_game("terminal")


def test_parse_args_defaults():
    args = parse_args([])
    assert args.mode == constants.MODE_WINDOW
    assert (args.width, args.height) == (800, 600)
    assert args.fps == constants.FPS
    assert args.frames is None


def test_main_headless(caplog):
    with caplog.at_level("INFO", logger="pong"):
        main(["--mode", "headless", "--frames", "50", "--width", "640"])
    assert "After 50 frames" in caplog.text


class TestHeadlessPongGame:
    def test_run_counts_frames(self):
        game = HeadlessPongGame()
        game.run(max_frames=120)
        assert game.frames == 120

    def test_auto_pilots_keep_paddles_in_bounds(self):
        game = HeadlessPongGame(width=640, height=480)
        limit = 480 / 2 - 50
        step = 480 / 100
        previous = {side: 0.0 for side in Side}
        for _ in range(2000):
            game.step(InputState())
            for side in Side:
                y = game.state.paddle(side).y
                assert -limit <= y <= limit
                assert abs(y - previous[side]) <= step + 1e-9
                previous[side] = y

    def test_sounds_and_scores_are_recorded(self):
        game = HeadlessPongGame()
        game.state.ball.x = 378
        game.state.ball.y = 200
        game.step(InputState())
        assert game.sounds.events == [SoundEvent.SCORE]
        assert game.scoreboard.tallies == {Side.LEFT: 1, Side.RIGHT: 0}

    def test_reset(self):
        game = HeadlessPongGame()
        game.run(max_frames=10)
        state = game.reset()
        assert game.frames == 0
        assert state.total_score() == 0
        assert game.sounds.events == []


def test_to_screen():
    assert to_screen(0, 0, (800, 600)) == (400, 300)
    assert to_screen(10, 20, (800, 600)) == (410, 280)
    assert to_screen(-400, -300, (800, 600)) == (0, 600)


def test_wall_and_catch_share_a_sound():
    assert SOUND_NAMES[SoundEvent.WALL] == SOUND_NAMES[SoundEvent.CATCH]
    assert SOUND_NAMES[SoundEvent.SCORE] != SOUND_NAMES[SoundEvent.CATCH]


class TestPygameInput:
    def test_held_keys(self):
        keyboard = PygameInput()
        pressed = collections.defaultdict(bool, {pygame.K_w: True, pygame.K_DOWN: True})
        keyboard.update([], pressed)
        assert keyboard.is_held(Action.MOVE_UP_LEFT)
        assert keyboard.is_held(Action.MOVE_DOWN_RIGHT)
        assert not keyboard.is_held(Action.MOVE_DOWN_LEFT)
        assert not keyboard.is_just_pressed(Action.TOGGLE_AUTO_LEFT)

    def test_just_pressed_comes_from_keydown_events(self):
        keyboard = PygameInput()
        events = [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q),
            pygame.event.Event(pygame.KEYUP, key=pygame.K_p),
        ]
        keyboard.update(events, collections.defaultdict(bool))
        assert keyboard.is_just_pressed(Action.TOGGLE_AUTO_LEFT)
        assert not keyboard.is_just_pressed(Action.TOGGLE_AUTO_RIGHT)

        keyboard.update([], collections.defaultdict(bool))
        assert not keyboard.is_just_pressed(Action.TOGGLE_AUTO_LEFT)

    def test_nothing_held_before_first_update(self):
        assert not PygameInput().is_held(Action.MOVE_UP_RIGHT)


class TestPygamePongGame:
    @pytest.fixture
    def game(self):
        game = PygamePongGame(width=640, height=480)
        yield game
        game.close()

    def test_viewport_is_the_window(self, game):
        assert PygameViewport(game.screen).current_size() == (640.0, 480.0)

    def test_step_and_render(self, game):
        result = game.step(InputState())
        game.render()
        assert (result.state.ball.x, result.state.ball.y) == (3, 3)
        assert game.scoreboard.tallies == {Side.LEFT: 0, Side.RIGHT: 0}

    def test_sound_plays_without_blocking(self, game):
        for event in SoundEvent:
            game.sound.play(event)

    def test_run_stops_after_max_frames(self, game):
        game.run(max_frames=3)
        assert game.state.ball.x == pytest.approx(9)
