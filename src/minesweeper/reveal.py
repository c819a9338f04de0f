"""
Reveal engine for Minesweeper.

Opens single cells, expands zero-count regions breadth-first and
performs chord opens around numbered cells.
"""
from collections import deque
from dataclasses import replace
from typing import NamedTuple

from .board import Board


class RevealResult(NamedTuple):
    """Outcome of a reveal: the new board and whether a mine went off."""

    board: Board
    exploded: bool


def reveal_cascade(board: Board, row: int, col: int) -> RevealResult:
    """
    Reveal a cell and flood-fill outward from zero-count cells.

    Revealed or flagged targets are left alone. A mine target is revealed
    on its own and reported as exploded. Otherwise the target is revealed
    and every zero-count cell reached opens its hidden, unflagged
    neighbors; only zero-count neighbors continue the expansion.

    The cascade runs on a private copy, so callers only ever see the
    board before or after the whole expansion.
    """
    start = board.get_cell(row, col)
    if start.is_revealed or start.is_flagged:
        return RevealResult(board, False)

    grid = board.to_grid()
    grid[row][col] = start.revealed()
    if start.is_mine:
        return RevealResult(board.with_grid(grid), True)

    queue = deque()
    if start.neighbor_count == 0:
        queue.append((row, col))

    while queue:
        current_row, current_col = queue.popleft()
        for neighbor_row, neighbor_col in board.neighbors(
            current_row, current_col
        ):
            neighbor = grid[neighbor_row][neighbor_col]
            if neighbor.is_revealed or neighbor.is_flagged or neighbor.is_mine:
                continue
            grid[neighbor_row][neighbor_col] = neighbor.revealed()
            if neighbor.neighbor_count == 0:
                queue.append((neighbor_row, neighbor_col))

    return RevealResult(board.with_grid(grid), False)


def count_adjacent_flags(board: Board, row: int, col: int) -> int:
    """Count flagged cells adjacent to position."""
    return sum(
        1 for neighbor in board.neighbor_cells(row, col) if neighbor.is_flagged
    )


def can_chord(board: Board, row: int, col: int) -> bool:
    """Check if a chord is allowed: a revealed number with matching flags."""
    cell = board.get_cell(row, col)
    if not cell.is_revealed or cell.is_mine or cell.neighbor_count == 0:
        return False
    return count_adjacent_flags(board, row, col) == cell.neighbor_count


def chord_open(board: Board, row: int, col: int) -> RevealResult:
    """
    Open every hidden, unflagged neighbor of a satisfied number.

    Each neighbor goes through reveal_cascade in turn. If any of them is
    a mine the whole chord is exploded, and the returned board still
    holds every cell opened by the other neighbors.
    """
    if not can_chord(board, row, col):
        return RevealResult(board, False)

    working = board
    exploded = False
    for neighbor_row, neighbor_col in board.neighbors(row, col):
        target = working.get_cell(neighbor_row, neighbor_col)
        if target.is_revealed or target.is_flagged:
            continue
        working, hit = reveal_cascade(working, neighbor_row, neighbor_col)
        exploded = exploded or hit

    return RevealResult(working, exploded)


def reveal_all_mines(board: Board) -> Board:
    """Expose every mine, flagged or not, after a loss."""
    return board.with_cells(
        replace(cell, is_revealed=True)
        for cell in board.iter_cells()
        if cell.is_mine and not cell.is_revealed
    )
