from __future__ import annotations

from collapse.constants import EMPTY
from collapse.game import Game


class DummyWindow:
    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height


def column_values(game: Game, col: int) -> list[int]:
    """Column contents, bottom to top."""
    return [game.get_color(row, col) for row in range(game.width)]


def assert_settled(game: Game) -> None:
    """Fail unless every cell is in range, nothing floats and empty columns sit on the right."""

    width = game.width
    for row in range(width):
        for col in range(width):
            value = game.get_color(row, col)
            assert EMPTY <= value <= game.colors, f"value {value} out of range at {(row, col)}"
            if value != EMPTY and row > 0:
                assert game.get_color(row - 1, col) != EMPTY, f"floating tile at {(row, col)}"
    empties = [all(v == EMPTY for v in column_values(game, col)) for col in range(width)]
    if True in empties:
        first = empties.index(True)
        assert all(empties[first:]), f"non-empty column right of empty column {first}"
