"""
Flag and win tracking for Minesweeper.
"""
from dataclasses import replace
from typing import NamedTuple

from .board import Board


class FlagResult(NamedTuple):
    """Outcome of a flag toggle."""

    board: Board
    changed: bool


def toggle_flag(board: Board, row: int, col: int) -> FlagResult:
    """
    Toggle flag on a cell.

    Returns:
        The new board, and changed=False (with the board untouched) if the
        cell is already revealed.
    """
    cell = board.get_cell(row, col)
    if cell.is_revealed:
        return FlagResult(board, False)
    return FlagResult(board.with_cells([cell.toggled_flag()]), True)


def count_flags(board: Board) -> int:
    """Number of flagged cells on the board."""
    return board.count(lambda cell: cell.is_flagged)


def check_win(board: Board) -> bool:
    """
    Check if all non-mine cells are revealed.

    Flags play no part; a game can be won without flagging anything.
    """
    return all(
        cell.is_revealed for cell in board.iter_cells() if not cell.is_mine
    )


def flag_all_mines(board: Board) -> Board:
    """Flag every mine that is not flagged yet."""
    return board.with_cells(
        replace(cell, is_flagged=True)
        for cell in board.iter_cells()
        if cell.is_mine and not cell.is_flagged
    )
