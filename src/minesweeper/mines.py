"""
Mine placement for Minesweeper.

Mines are placed lazily on the first open so that the clicked cell and
its neighbors are always safe.
"""
import logging
import random
from dataclasses import replace
from typing import List, Optional, Set

from .board import Board, Position


logger = logging.getLogger(__name__)


def _safe_zone(board: Board, row: int, col: int) -> Set[Position]:
    """The clicked position plus all of its in-bounds neighbors."""
    zone = {(row, col)}
    zone.update(board.neighbors(row, col))
    return zone


def _get_valid_mine_positions(
    board: Board, exclude: Set[Position]
) -> List[Position]:
    """Get all positions eligible for a mine, in row-major order."""
    return [
        cell.position
        for cell in board.iter_cells()
        if cell.position not in exclude
    ]


def compute_neighbor_counts(board: Board) -> Board:
    """
    Recalculate adjacent mine counts for all cells.

    Mine cells get a count of 0; it is never displayed.
    """
    grid = board.to_grid()
    for cell in board.iter_cells():
        if cell.is_mine:
            count = 0
        else:
            count = sum(
                1 for neighbor in board.neighbor_cells(cell.row, cell.col)
                if neighbor.is_mine
            )
        if count != cell.neighbor_count:
            grid[cell.row][cell.col] = replace(cell, neighbor_count=count)
    return board.with_grid(grid)


def place_mines_after_first_click(
    board: Board,
    click_row: int,
    click_col: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Place mines randomly, keeping the first click and its neighbors clear.

    Args:
        board: Board without mines.
        click_row: Row of the first opened cell.
        click_col: Column of the first opened cell.
        mine_count: Requested number of mines.
        rng: Random source; a fresh unseeded one is used if omitted.

    Returns:
        New board with min(mine_count, eligible) mines and up to date
        neighbor counts. Requests larger than the eligible area are
        capped rather than rejected.
    """
    rng = rng or random.Random()
    positions = _get_valid_mine_positions(
        board, _safe_zone(board, click_row, click_col)
    )
    to_place = min(mine_count, len(positions))
    if to_place < mine_count:
        logger.debug(
            "Only %d eligible cells for %d mines", len(positions), mine_count
        )

    mine_positions = rng.sample(positions, to_place)
    mined = board.with_cells(
        replace(board.get_cell(row, col), is_mine=True)
        for row, col in mine_positions
    )
    logger.debug(
        "Placed %d mines around first click at (%d, %d)",
        to_place, click_row, click_col,
    )
    return compute_neighbor_counts(mined)
