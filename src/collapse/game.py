"""Board engine for the collapse puzzle.

A ``Game`` owns a :class:`~collapse.components.board.Board` and the random
source used to deal and refill it. Queries never raise: coordinates outside
the board read as empty. ``perform_move`` either applies a whole move or
leaves the board untouched.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from collapse.components.board import Board, Position
from collapse.constants import DEFAULT_COLORS, EMPTY
from collapse.systems import board_ops

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MoveResult:
    color: int
    removed: List[Position] = field(default_factory=list)
    cleared_columns: int = 0
    refilled: List[Position] = field(default_factory=list)


class Game:
    def __init__(
        self,
        width: int,
        colors: int = DEFAULT_COLORS,
        rng: random.Random | None = None,
        *,
        board: Board | None = None,
    ):
        self.rng = rng or random.Random()
        if board is None:
            board = Board(width=width, colors=colors)
            board_ops.fill_board(board, self.rng)
        elif (board.width, board.colors) != (width, colors):
            raise ValueError(
                f"Board is {board.width} wide with {board.colors} colors, "
                f"expected {width} wide with {colors} colors"
            )
        self.board = board

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[int]],
        colors: Optional[int] = None,
        rng: random.Random | None = None,
    ) -> "Game":
        """Build a game around a fixed layout, rows listed bottom to top."""
        width = len(rows)
        if width == 0 or any(len(row) != width for row in rows):
            raise ValueError("Rows must form a non-empty square grid")
        cells = [value for row in rows for value in row]
        if colors is None:
            colors = max(max(cells), 1)
        board = Board(width=width, colors=colors, cells=cells)
        board_ops.check_layout(board)
        return cls(width, colors, rng, board=board)

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def colors(self) -> int:
        return self.board.colors

    @property
    def score(self) -> int:
        return self.board.score

    def get_color(self, row: int, col: int) -> int:
        return self.board.get(row, col)

    def is_empty(self, row: int, col: int) -> bool:
        return self.board.get(row, col) == EMPTY

    def is_valid_move(self, row: int, col: int) -> bool:
        return board_ops.is_valid_move(self.board, row, col)

    def has_valid_moves(self) -> bool:
        return board_ops.has_valid_moves(self.board)

    def perform_move(self, row: int, col: int) -> MoveResult | None:
        """Clear the region at (row, col), settle, score and refill.

        Returns None, without touching the board, when the move is not valid.
        """
        if not self.is_valid_move(row, col):
            return None
        board = self.board
        color = board.get(row, col)
        region = board_ops.find_region(board, row, col)
        board_ops.remove_tiles(board, region)
        board_ops.fall_down(board)
        board_ops.fall_left(board)
        cleared = board_ops.empty_columns(board)
        board.score += len(cleared)
        refilled = board_ops.refill_columns(board, cleared, self.rng)
        logger.debug(
            "Cleared %d tiles of color %d at %s; %d empty columns refilled",
            len(region), color, (row, col), len(cleared),
        )
        return MoveResult(color=color, removed=region, cleared_columns=len(cleared), refilled=refilled)

    def rows(self) -> List[List[int]]:
        """Snapshot of the grid, bottom row first."""
        width = self.board.width
        return [self.board.cells[r * width:(r + 1) * width] for r in range(width)]
