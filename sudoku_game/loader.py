from __future__ import annotations
import logging
import struct

from sudoku_game.board import SIZE, Board

log = logging.getLogger(__name__)

CELL_COUNT = SIZE * SIZE
# little-endian signed ints, one per cell, row-major
FORMATS = {4: "<81i", 8: "<81q"}


class GridLoadError(Exception):
    pass


def load_grid(path: str, int_size: int = 4) -> Board:
    """
    Read a puzzle file: 81 fixed-width little-endian integers, row-major,
    0 for an empty cell. Values are taken as-is (no range or rule check).
    Trailing bytes past the 81st cell are ignored.
    """
    if int_size not in FORMATS:
        raise ValueError(f"Unsupported integer size {int_size}; expected 4 or 8.")
    fmt = FORMATS[int_size]
    needed = struct.calcsize(fmt)

    try:
        with open(path, "rb") as f:
            data = f.read(needed)
    except OSError as e:
        log.warning("Cannot open puzzle file %s: %s", path, e)
        raise GridLoadError(f"Cannot open puzzle file '{path}': {e.strerror or e}") from e

    if len(data) < needed:
        log.warning("Puzzle file %s is %d bytes, expected %d", path, len(data), needed)
        raise GridLoadError(
            f"Puzzle file '{path}' is too short: expected {needed} bytes, got {len(data)}."
        )

    board = Board.from_flat(list(struct.unpack(fmt, data)))
    log.info("Loaded %s (%d of %d cells filled)", path, board.filled_count(), CELL_COUNT)
    return board


def encode_grid(board: Board, int_size: int = 4) -> bytes:
    """Inverse of load_grid: the on-disk bytes for a board."""
    if int_size not in FORMATS:
        raise ValueError(f"Unsupported integer size {int_size}; expected 4 or 8.")
    flat = [board.grid[r][c] for r in range(SIZE) for c in range(SIZE)]
    return struct.pack(FORMATS[int_size], *flat)
