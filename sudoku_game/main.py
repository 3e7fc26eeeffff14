import argparse
import logging
import sys

from sudoku_game.game import Game
from sudoku_game.loader import FORMATS, GridLoadError
from sudoku_game.prompt import read_path

EXIT_OK = 0
EXIT_LOAD_ERROR = 2
EXIT_INTERRUPTED = 130


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Play a Sudoku puzzle in the terminal.")
    p.add_argument("puzzle", nargs="?", help="Puzzle file (81 binary integers). Prompted for if omitted.")
    p.add_argument("--int-size", type=int, choices=sorted(FORMATS), default=4,
                   help="Bytes per cell in the puzzle file (default 4)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    game = Game()
    try:
        path = args.puzzle if args.puzzle else read_path("Puzzle file: ")
        try:
            game.load(path, args.int_size)
        except GridLoadError as e:
            print(f"Error: {e}")
            return EXIT_LOAD_ERROR
        game.run()
    except (EOFError, KeyboardInterrupt):
        print("\nGame abandoned.")
        return EXIT_INTERRUPTED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
