from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

RC = Tuple[int, int]

SIZE = 9
BOX = 3
EMPTY = 0


def parse_81(s: str) -> List[List[int]]:
    s = "".join(ch for ch in s if not ch.isspace())
    if len(s) != SIZE * SIZE:
        raise ValueError(f"Expected 81 characters after removing whitespace, got {len(s)}")
    grid: List[List[int]] = []
    for r in range(SIZE):
        row: List[int] = []
        for c in range(SIZE):
            ch = s[r * SIZE + c]
            if ch in ".0":
                row.append(EMPTY)
            elif ch.isdigit():
                row.append(int(ch))
            else:
                raise ValueError(f"Invalid char '{ch}' in grid.")
        grid.append(row)
    return grid


def empty_grid() -> List[List[int]]:
    return [[EMPTY] * SIZE for _ in range(SIZE)]


class Board:
    """
    Playing board:
    - grid[r][c] = 0..9, 0 = empty
    - indices are 0-based; conversion from the 1-based prompts happens in the game loop
    - the initial grid is trusted as loaded (no duplicate check)
    """

    def __init__(self, grid: Optional[List[List[int]]] = None):
        if grid is None:
            grid = empty_grid()
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            raise ValueError("Grid must be 9x9.")
        self.grid = [row[:] for row in grid]

    @staticmethod
    def from_string(s: str) -> "Board":
        return Board(parse_81(s))

    @staticmethod
    def from_flat(values: List[int]) -> "Board":
        if len(values) != SIZE * SIZE:
            raise ValueError(f"Expected 81 values, got {len(values)}")
        return Board([list(values[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE)])

    def clone(self) -> "Board":
        return Board(self.grid)

    def value_at(self, r: int, c: int) -> int:
        return self.grid[r][c]

    def is_empty(self, r: int, c: int) -> bool:
        return self.grid[r][c] == EMPTY

    def place(self, r: int, c: int, d: int) -> None:
        """Write a digit. Callers validate first; no rule check happens here."""
        self.grid[r][c] = d

    def empty_cells(self) -> Iterator[RC]:
        for r in range(SIZE):
            for c in range(SIZE):
                if self.grid[r][c] == EMPTY:
                    yield (r, c)

    def filled_count(self) -> int:
        return sum(1 for r in range(SIZE) for c in range(SIZE) if self.grid[r][c] != EMPTY)

    def is_full(self) -> bool:
        return all(self.grid[r][c] != EMPTY for r in range(SIZE) for c in range(SIZE))

    def to_string(self) -> str:
        return "".join(str(self.grid[r][c]) for r in range(SIZE) for c in range(SIZE))
