"""Command-line entry point that runs the game loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .game import Game, GameError

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game until it stops; return the process exit status.

    Command-line arguments are accepted and ignored.
    """
    game = Game()
    try:
        try:
            game.init("Pixel Blast", SCREEN_WIDTH, SCREEN_HEIGHT, False)
        except GameError as exc:
            print(f"Failed to initialize game! ({exc})", file=sys.stderr)
            return 1
        while game.running:
            game.handle_events()
            game.update()
            game.render()
        print("Game exited cleanly.", file=sys.stderr)
        return 0
    finally:
        game.clean()


if __name__ == "__main__":
    sys.exit(main())