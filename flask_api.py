from __future__ import annotations

import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

from sudoku_game.board import Board
from sudoku_game.render import render_grid
from sudoku_game.validator import check_placement, conflict_message

log = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)


def _norm81(s: str) -> str:
    if s is not None and not isinstance(s, str):
        raise ValueError("Grid must be an 81-character string")
    s = (s or "").replace(".", "0")
    s = "".join(s.split())
    if len(s) != 81:
        raise ValueError(f"Expected 81 characters, got {len(s)}")
    if any(ch not in "0123456789" for ch in s):
        raise ValueError("Only digits, 0, '.' and whitespace are allowed")
    return s


def _body():
    data = request.get_json(force=True) or {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def _coord(data, key: str) -> int:
    """1-indexed field from the request body, returned 0-indexed."""
    v = data.get(key)
    if isinstance(v, bool) or not isinstance(v, int) or not 1 <= v <= 9:
        raise ValueError(f"'{key}' must be an integer from 1 to 9")
    return v - 1


@app.get("/health")
def health():
    return jsonify({"ok": True})


@app.post("/check")
def check():
    """
    One turn without the console: is `value` legal at (row, col)?
    The grid is not modified; clients apply accepted values themselves.
    """
    try:
        data = _body()
        board = Board.from_string(_norm81(data.get("grid", "")))
        r = _coord(data, "row")
        c = _coord(data, "col")
        value = _coord(data, "value") + 1

        if not board.is_empty(r, c):
            return jsonify({
                "ok": False,
                "occupied": True,
                "conflict": None,
                "message": f"Cell (r{r + 1}, c{c + 1}) is occupied by {board.value_at(r, c)}.",
            })

        result = check_placement(board.grid, r, c, value)
        return jsonify({
            "ok": result.is_valid,
            "occupied": False,
            "conflict": None if result.is_valid else result.conflict_type.value,
            "message": conflict_message(result, r, c, value),
        })

    except (ValueError, TypeError) as e:
        log.debug("Bad /check request: %s", e)
        return jsonify({"error": str(e)}), 400


@app.post("/render")
def render():
    try:
        data = _body()
        board = Board.from_string(_norm81(data.get("grid", "")))
        return jsonify({"text": render_grid(board), "full": board.is_full()})

    except (ValueError, TypeError) as e:
        log.debug("Bad /render request: %s", e)
        return jsonify({"error": str(e)}), 400


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8000, debug=False)
