"""The game's entry point: sets up model, view and controller and runs the main loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from asteroids.sound import DEFAULT_SOUND_DIR


def run(game, renderer, controller, timer) -> int:
    """Run the main loop until the controller asks to quit; returns an exit status."""
    if not renderer.init():
        return 1
    while True:
        timer.reset()
        renderer.render()
        controller.do_user_interactions()
        if controller.exit_game():
            break
        controller.do_game_events()
        timer.tick_and_delay(controller.tick_time)
    renderer.exit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="asteroids", description="Play Asteroids.")
    parser.add_argument(
        "--sound-dir",
        default=str(DEFAULT_SOUND_DIR),
        help="directory holding the game's wav files",
    )
    args = parser.parse_args(argv)

    from asteroids.controller import PygameGameController
    from asteroids.game import Game
    from asteroids.renderer import PygameRenderer
    from asteroids.sound import Sound
    from asteroids.timer import Timer

    game = Game()
    sound = Sound(args.sound_dir)
    sound.init()
    controller = PygameGameController(game, sound)
    renderer = PygameRenderer(game, "Asteroids", 1024, 768)
    return run(game, renderer, controller, Timer())


if __name__ == "__main__":
    raise SystemExit(main())