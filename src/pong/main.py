"""
Starting point of the Pong game, in a window or headless
"""

import argparse
from src.pong.game_factory import get_pong_game
from src.pong import constants


def parse_args(argv=None) -> argparse.Namespace:
    """
    Command line options of the game
    """
    parser = argparse.ArgumentParser(description="Play Pong")

    parser.add_argument(
        f"--{constants.ARG_MODE}",
        type=str,
        choices=[constants.MODE_WINDOW, constants.MODE_HEADLESS],
        default=constants.MODE_WINDOW,
        help="Play in a window or simulate without one",
    )
    parser.add_argument(
        f"--{constants.ARG_WIDTH}",
        type=int,
        default=constants.SCREEN_WIDTH,
        help="Width of the playfield",
    )
    parser.add_argument(
        f"--{constants.ARG_HEIGHT}",
        type=int,
        default=constants.SCREEN_HEIGHT,
        help="Height of the playfield",
    )
    parser.add_argument(
        f"--{constants.ARG_FPS}",
        type=int,
        default=constants.FPS,
        help="Frames per second in window mode",
    )
    parser.add_argument(
        f"--{constants.ARG_FRAMES}",
        type=int,
        default=None,
        help="Stop after this many frames (headless default: "
        f"{constants.HEADLESS_FRAMES}, window default: until closed)",
    )

    return parser.parse_args(argv)


def main(argv=None):
    """
    Starting point of Pong game
    """
    args = parse_args(argv)

    options = {"width": args.width, "height": args.height}
    if args.mode == constants.MODE_WINDOW:
        options["fps"] = args.fps

    game = get_pong_game(args.mode)(**options)
    game.run(max_frames=args.frames)


if __name__ == "__main__":
    main()
