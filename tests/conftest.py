# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudoku_game" and "flask_api" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_game.board import Board  # noqa: E402

PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


class Script:
    """Feeds canned answers to prompts and records what was asked."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def puzzle_board():
    return Board.from_string(PUZZLE)


@pytest.fixture
def solved_board():
    return Board.from_string(SOLUTION)


@pytest.fixture
def one_left_board():
    # solution with (8, 8) cleared; only 9 fits there
    return Board.from_string(SOLUTION[:-1] + "0")


@pytest.fixture
def lone_five_board():
    b = Board()
    b.place(0, 0, 5)
    return b
