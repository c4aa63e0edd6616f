from __future__ import annotations

import random
from typing import Iterable, List, Sequence

from collapse.components.board import Board, Position
from collapse.constants import EMPTY

NEIGHBOR_OFFSETS = ((1, 0), (-1, 0), (0, -1), (0, 1))


def random_tile(board: Board, rng: random.Random) -> int:
    return rng.randint(1, board.colors)


def fill_column(board: Board, col: int, rng: random.Random) -> List[Position]:
    """Give every cell in col a fresh random color, bottom to top."""
    spawned: List[Position] = []
    for row in range(board.width):
        board.set(row, col, random_tile(board, rng))
        spawned.append((row, col))
    return spawned


def fill_board(board: Board, rng: random.Random) -> None:
    for col in range(board.width):
        fill_column(board, col, rng)


def is_valid_move(board: Board, row: int, col: int) -> bool:
    """A tile can be cleared when at least one orthogonal neighbour shares its color."""
    color = board.get(row, col)
    if color == EMPTY:
        return False
    return any(board.get(row + dr, col + dc) == color for dr, dc in NEIGHBOR_OFFSETS)


def has_valid_moves(board: Board) -> bool:
    # Checking right and up covers every adjacent pair once. Reads past the
    # top/right edge return EMPTY, so border tiles never match outward.
    for row, col in board.positions():
        color = board.get(row, col)
        if color == EMPTY:
            continue
        if board.get(row, col + 1) == color or board.get(row + 1, col) == color:
            return True
    return False


def find_region(board: Board, row: int, col: int) -> List[Position]:
    """Return the 4-connected same-color region containing (row, col)."""
    color = board.get(row, col)
    if color == EMPTY:
        return []
    visited = [False] * (board.width * board.width)
    visited[board.index(row, col)] = True
    stack: List[Position] = [(row, col)]
    region: List[Position] = []
    while stack:
        r, c = stack.pop()
        region.append((r, c))
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = r + dr, c + dc
            if board.get(nr, nc) != color:
                continue
            idx = board.index(nr, nc)
            if visited[idx]:
                continue
            visited[idx] = True
            stack.append((nr, nc))
    return region


def remove_tiles(board: Board, positions: Iterable[Position]) -> None:
    for row, col in positions:
        board.set(row, col, EMPTY)


def fall_down(board: Board) -> None:
    """Settle every column so no tile rests above an empty cell."""
    width = board.width
    for _ in range(width):
        for row in range(1, width):
            for col in range(width):
                if board.get(row, col) != EMPTY and board.get(row - 1, col) == EMPTY:
                    board.swap((row, col), (row - 1, col))


def is_column_empty(board: Board, col: int) -> bool:
    return all(board.get(row, col) == EMPTY for row in range(board.width))


def swap_columns(board: Board, a: int, b: int) -> None:
    for row in range(board.width):
        board.swap((row, a), (row, b))


def fall_left(board: Board) -> None:
    """Shift non-empty columns left until every empty column sits on the right."""
    width = board.width
    for _ in range(width):
        for col in range(width - 1):
            if is_column_empty(board, col) and not is_column_empty(board, col + 1):
                swap_columns(board, col, col + 1)


def empty_columns(board: Board) -> List[int]:
    return [col for col in range(board.width) if is_column_empty(board, col)]


def refill_columns(board: Board, columns: Sequence[int], rng: random.Random) -> List[Position]:
    spawned: List[Position] = []
    for col in columns:
        spawned.extend(fill_column(board, col, rng))
    return spawned


def check_layout(board: Board) -> None:
    """Raise ValueError unless the grid is settled and uses only palette values."""
    for row, col in board.positions():
        value = board.get(row, col)
        if value < EMPTY or value > board.colors:
            raise ValueError(f"Tile value {value} at {(row, col)} outside 0..{board.colors}")
        if value != EMPTY and row > 0 and board.get(row - 1, col) == EMPTY:
            raise ValueError(f"Floating tile at {(row, col)}")
    seen_empty = False
    for col in range(board.width):
        if is_column_empty(board, col):
            seen_empty = True
        elif seen_empty:
            raise ValueError(f"Column {col} is left of an empty column gap")
