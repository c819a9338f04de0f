"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Iterable, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
# Project root, for the main.py entry point
sys.path.append(str(Path(__file__).parent.parent))

from minesweeper import (
    Board,
    Cell,
    Difficulty,
    ElapsedTimer,
    Game,
    compute_neighbor_counts,
    create_empty_board,
)


def build_board(
    rows: int, cols: int, mines: Iterable[Tuple[int, int]]
) -> Board:
    """Board with mines at fixed positions and correct neighbor counts."""
    board = create_empty_board(rows, cols)
    board = board.with_cells(
        Cell(row, col, is_mine=True) for row, col in mines
    )
    return compute_neighbor_counts(board)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """A 5x5 board with no mines for cascade testing."""
    return create_empty_board(5, 5)


@pytest.fixture
def corner_mine_board() -> Board:
    """
    A 3x3 board with a single mine in the top-left corner.

        * 1 0
        1 1 0
        0 0 0
    """
    return build_board(3, 3, [(0, 0)])


@pytest.fixture
def chord_board() -> Board:
    """
    A 5x5 board with one mine at (1, 1) and (2, 2) already revealed.

    (2, 2) is a "1" whose other seven neighbors are safe.
    """
    board = build_board(5, 5, [(1, 1)])
    return board.with_cells([board.get_cell(2, 2).revealed()])


# ============================================================================
# Random Source Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for repeatable mine layouts."""
    return random.Random(1234)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def tiny_difficulty() -> Difficulty:
    """A 1x1 board without mines."""
    return Difficulty("tiny", 1, 1, 0)


@pytest.fixture
def small_difficulty() -> Difficulty:
    """A 4x4 board with 3 mines."""
    return Difficulty("small", 4, 4, 3)


# ============================================================================
# Controller Fixtures
# ============================================================================

@pytest.fixture
def timer() -> ElapsedTimer:
    """Timer with an interval long enough never to fire during a test."""
    elapsed = ElapsedTimer(interval=3600)
    yield elapsed
    elapsed.stop()


@pytest.fixture
def game(rng: random.Random, timer: ElapsedTimer) -> Game:
    """Beginner game with a seeded random source."""
    controller = Game("beginner", rng=rng, timer=timer)
    yield controller
    controller.close()


@pytest.fixture
def make_board():
    """Factory fixture: make_board(rows, cols, mine_positions)."""
    return build_board
