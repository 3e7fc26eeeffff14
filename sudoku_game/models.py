from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

RC = Tuple[int, int]  # (row, col), 0-indexed


class ConflictType(str, Enum):
    ROW = "ROW"
    COL = "COL"
    BOX = "BOX"
    NONE = "NONE"


@dataclass(frozen=True)
class PlacementResult:
    is_valid: bool
    conflict_type: ConflictType = ConflictType.NONE
    conflict_cell: Optional[RC] = None

    @property
    def is_row_or_col(self) -> bool:
        return self.conflict_type in (ConflictType.ROW, ConflictType.COL)


class GameState(str, Enum):
    LOADING = "LOADING"
    PLAYING = "PLAYING"
    FULL = "FULL"


class TurnOutcome(str, Enum):
    PLACED = "PLACED"
    OCCUPIED = "OCCUPIED"
    REJECTED = "REJECTED"
