from __future__ import annotations
from typing import List

from sudoku_game.board import BOX, EMPTY, SIZE, Board

PLACEHOLDER = "."
ROW_LABEL_WIDTH = 3


def _cell(v: int) -> str:
    return PLACEHOLDER if v == EMPTY else str(v)


def _with_block_bars(items: List[str], bar: str) -> str:
    out = []
    for i, item in enumerate(items):
        if i and i % BOX == 0:
            out.append(bar)
        out.append(item)
    return " ".join(out)


def render_grid(board: Board) -> str:
    """
    Text view of the board with 1-based row/column numbers, e.g.

           1 2 3   4 5 6   7 8 9
           ---------------------
        1  5 3 . | . 7 . | . . .
    """
    header = " " * ROW_LABEL_WIDTH + _with_block_bars([str(c + 1) for c in range(SIZE)], " ")
    separator = " " * ROW_LABEL_WIDTH + "-" * 21

    lines = [header, separator]
    for r in range(SIZE):
        if r in (3, 6):
            lines.append(separator)
        label = str(r + 1).ljust(ROW_LABEL_WIDTH)
        lines.append(label + _with_block_bars([_cell(v) for v in board.grid[r]], "|"))
    return "\n".join(lines)
