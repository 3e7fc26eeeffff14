import pytest

from sudoku_game.board import Board
from sudoku_game.game import BANNER, Game
from sudoku_game.loader import GridLoadError, encode_grid
from sudoku_game.models import GameState, TurnOutcome

from conftest import Script


def make_game(board, answers):
    out = []
    script = Script(answers)
    game = Game(input_fn=script, out=out.append)
    game.start(board)
    return game, script, out


def test_new_game_is_loading():
    assert Game().state == GameState.LOADING


def test_run_without_puzzle_fails():
    with pytest.raises(RuntimeError):
        Game().run()


def test_lone_five_scenario(lone_five_board):
    game, script, out = make_game(lone_five_board, ["1", "2", "5", "2", "2", "5", "4", "4", "5"])

    assert game.play_turn() == TurnOutcome.REJECTED
    assert out[-1].startswith("Row/column conflict")
    assert game.board.is_empty(0, 1)

    assert game.play_turn() == TurnOutcome.REJECTED
    assert out[-1].startswith("Block conflict")
    assert game.board.is_empty(1, 1)

    assert game.play_turn() == TurnOutcome.PLACED
    assert game.board.value_at(3, 3) == 5
    assert game.state == GameState.PLAYING


def test_occupied_cell_skips_value_prompt(lone_five_board):
    game, script, out = make_game(lone_five_board, ["1", "1"])
    assert game.play_turn() == TurnOutcome.OCCUPIED
    assert script.prompts == ["Row (1-9): ", "Column (1-9): "]
    assert "occupied" in out[-1]
    assert game.board.value_at(0, 0) == 5


def test_turn_renders_grid_first(lone_five_board):
    game, script, out = make_game(lone_five_board, ["9", "9", "1"])
    game.play_turn()
    assert out[0].splitlines()[0] == "   1 2 3   4 5 6   7 8 9"


def test_last_cell_completes_game(one_left_board):
    game, script, out = make_game(one_left_board, ["9", "9", "9"])
    game.run()
    assert game.state == GameState.FULL
    assert game.board.is_full()
    assert out[-3:] == list(BANNER)
    assert out.count(BANNER[1]) == 1
    assert script.answers == []


def test_rejected_last_cell_keeps_playing(one_left_board):
    game, script, out = make_game(one_left_board, ["9", "9", "1"])
    assert game.play_turn() == TurnOutcome.REJECTED
    assert game.state == GameState.PLAYING
    assert BANNER[1] not in out


def test_no_false_completion(puzzle_board):
    game, script, out = make_game(puzzle_board, ["1", "1"])
    game.play_turn()
    assert game.state == GameState.PLAYING
    with pytest.raises(RuntimeError):
        Game().play_turn()


def test_full_puzzle_finishes_without_input(solved_board):
    game, script, out = make_game(solved_board, [])
    assert game.state == GameState.FULL
    game.run()
    assert script.prompts == []
    assert out == list(BANNER)


def test_banner_is_three_lines():
    assert len(BANNER) == 3


def test_end_of_input_propagates(lone_five_board):
    game, script, out = make_game(lone_five_board, ["3"])
    with pytest.raises(EOFError):
        game.run()


def test_start_twice_fails(lone_five_board):
    game, script, out = make_game(lone_five_board, [])
    with pytest.raises(RuntimeError):
        game.start(Board())


def test_load_from_file(tmp_path, one_left_board):
    path = tmp_path / "p.bin"
    path.write_bytes(encode_grid(one_left_board))
    out = []
    game = Game(input_fn=Script(["9", "9", "9"]), out=out.append)
    game.load(str(path))
    assert game.state == GameState.PLAYING
    game.run()
    assert game.state == GameState.FULL


def test_load_failure_leaves_game_loading(tmp_path):
    game = Game()
    with pytest.raises(GridLoadError):
        game.load(str(tmp_path / "missing.bin"))
    assert game.state == GameState.LOADING
