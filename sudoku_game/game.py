from __future__ import annotations
import logging
from typing import Optional

from sudoku_game.board import Board
from sudoku_game.loader import load_grid
from sudoku_game.models import GameState, TurnOutcome
from sudoku_game.prompt import InputFn, OutputFn, read_int
from sudoku_game.render import render_grid
from sudoku_game.validator import check_placement, conflict_message

log = logging.getLogger(__name__)

BANNER = (
    "=" * 30,
    "  Puzzle complete. Well done!",
    "=" * 30,
)


class Game:
    """
    LOADING -> PLAYING -> FULL.

    The game owns its Board for the whole session. Console access goes
    through input_fn/out so a scripted session can drive it.
    """

    def __init__(self, input_fn: Optional[InputFn] = None, out: Optional[OutputFn] = None):
        self.input_fn = input_fn
        self.out = out or print
        self.board: Optional[Board] = None
        self.state = GameState.LOADING

    def load(self, path: str, int_size: int = 4) -> None:
        self.start(load_grid(path, int_size))

    def start(self, board: Board) -> None:
        if self.state != GameState.LOADING:
            raise RuntimeError(f"Game already started (state {self.state.value}).")
        self.board = board
        self.state = GameState.PLAYING
        # a puzzle file can already be complete
        self._check_full()

    def _ask(self, prompt: str) -> int:
        return read_int(prompt, self.input_fn, self.out)

    def _check_full(self) -> None:
        if self.board.is_full():
            self.state = GameState.FULL
            for line in BANNER:
                self.out(line)

    def play_turn(self) -> TurnOutcome:
        if self.state != GameState.PLAYING:
            raise RuntimeError(f"Cannot play a turn in state {self.state.value}.")

        self.out(render_grid(self.board))
        r = self._ask("Row (1-9): ") - 1
        c = self._ask("Column (1-9): ") - 1

        if not self.board.is_empty(r, c):
            self.out(f"Cell (r{r + 1}, c{c + 1}) is occupied by {self.board.value_at(r, c)}.")
            outcome = TurnOutcome.OCCUPIED
        else:
            value = self._ask("Value (1-9): ")
            result = check_placement(self.board.grid, r, c, value)
            if result.is_valid:
                self.board.place(r, c, value)
                log.debug("Placed %d at (%d, %d)", value, r, c)
                outcome = TurnOutcome.PLACED
            else:
                log.debug("Rejected %d at (%d, %d): %s", value, r, c, result.conflict_type.value)
                self.out(conflict_message(result, r, c, value))
                outcome = TurnOutcome.REJECTED

        self._check_full()
        return outcome

    def run(self) -> None:
        if self.state == GameState.LOADING:
            raise RuntimeError("No puzzle loaded.")
        while self.state == GameState.PLAYING:
            self.play_turn()
