from __future__ import annotations
from typing import Callable, Optional

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def read_int(
    prompt: str,
    input_fn: Optional[InputFn] = None,
    out: Optional[OutputFn] = None,
    low: int = 1,
    high: int = 9,
) -> int:
    """
    Ask until the user types an integer in [low, high].
    There is no quit command; EOFError from input_fn propagates.
    """
    input_fn = input_fn or input
    out = out or print
    while True:
        raw = input_fn(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            out(f"'{raw}' is not a number. Enter a whole number from {low} to {high}.")
            continue
        if low <= value <= high:
            return value
        out(f"{value} is out of range. Enter a number from {low} to {high}.")


def read_path(prompt: str, input_fn: Optional[InputFn] = None) -> str:
    return (input_fn or input)(prompt).strip()
