from __future__ import annotations
from typing import List

from sudoku_game.board import BOX, SIZE
from sudoku_game.models import ConflictType, PlacementResult


def block_origin(r: int, c: int):
    return r - r % BOX, c - c % BOX


def check_placement(grid: List[List[int]], r: int, c: int, value: int) -> PlacementResult:
    """
    Decide whether `value` may go into (r, c), 0-indexed.

    Row and column are scanned first and reported as ROW/COL; the 3x3 block is
    only consulted when neither holds the value, so a BOX result always means
    the clash is in the block alone.
    """
    for cc in range(SIZE):
        if grid[r][cc] == value:
            return PlacementResult(False, ConflictType.ROW, (r, cc))
    for rr in range(SIZE):
        if grid[rr][c] == value:
            return PlacementResult(False, ConflictType.COL, (rr, c))

    br, bc = block_origin(r, c)
    for rr in range(br, br + BOX):
        for cc in range(bc, bc + BOX):
            if grid[rr][cc] == value:
                return PlacementResult(False, ConflictType.BOX, (rr, cc))

    return PlacementResult(True)


def conflict_message(result: PlacementResult, r: int, c: int, value: int) -> str:
    if result.is_valid:
        return ""
    if result.is_row_or_col:
        unit = "row" if result.conflict_type == ConflictType.ROW else "column"
        index = r + 1 if result.conflict_type == ConflictType.ROW else c + 1
        return (
            f"Row/column conflict: {value} already appears in {unit} {index}.\n"
            "Sudoku rule: each digit 1-9 may appear at most once per row and column."
        )
    br, bc = block_origin(r, c)
    return (
        f"Block conflict: {value} already appears in the 3x3 block starting at "
        f"(r{br + 1}, c{bc + 1}).\n"
        "Sudoku rule: each digit 1-9 may appear at most once per 3x3 block."
    )
