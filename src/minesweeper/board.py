"""
Board module for Minesweeper game.

Implements the immutable board snapshot, neighbor enumeration and the
difficulty presets the game is played on.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Tuple

import numpy as np

from .cell import Cell, CellState


Position = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


# ============================================================================
# Difficulty Presets
# ============================================================================

@dataclass(frozen=True)
class Difficulty:
    """
    Named board configuration.

    Attributes:
        name: Preset key (e.g. "beginner").
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
    """

    name: str
    rows: int
    cols: int
    mines: int

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def label(self) -> str:
        """Human readable description, e.g. "beginner (9x9 / 10)"."""
        return f"{self.name} ({self.rows}x{self.cols} / {self.mines})"


BEGINNER = Difficulty("beginner", 9, 9, 10)
INTERMEDIATE = Difficulty("intermediate", 16, 16, 40)
EXPERT = Difficulty("expert", 16, 30, 99)

DIFFICULTIES: Dict[str, Difficulty] = {
    preset.name: preset for preset in (BEGINNER, INTERMEDIATE, EXPERT)
}


def get_difficulty(name: str) -> Difficulty:
    """Look up a preset by name, raising ValueError if unknown."""
    try:
        return DIFFICULTIES[name]
    except KeyError:
        choices = ", ".join(DIFFICULTIES)
        raise ValueError(
            f"Unknown difficulty {name!r} (expected one of: {choices})"
        ) from None


# ============================================================================
# Board Class
# ============================================================================

@dataclass(frozen=True)
class Board:
    """
    Immutable snapshot of a Minesweeper grid.

    Every state-changing operation builds a new Board; use with_cells()
    to derive one with some cells replaced.
    """

    rows: int
    cols: int
    cells: Tuple[Tuple[Cell, ...], ...]

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        positions = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.is_valid_position(new_row, new_col):
                positions.append((new_row, new_col))
        return positions

    def neighbor_cells(self, row: int, col: int) -> List[Cell]:
        """Get the cells around a position."""
        return [self.cells[r][c] for r, c in self.neighbors(row, col)]

    # ========================================================================
    # Accessors
    # ========================================================================

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at position."""
        return self.cells[row][col]

    def iter_cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for row in self.cells:
            yield from row

    def count(self, predicate: Callable[[Cell], bool]) -> int:
        """Count cells matching a predicate."""
        return sum(1 for cell in self.iter_cells() if predicate(cell))

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def mine_count(self) -> int:
        return self.count(lambda cell: cell.is_mine)

    def with_cells(self, updates: Iterable[Cell]) -> "Board":
        """
        Derive a new board with some cells replaced.

        Args:
            updates: Cells to place; each goes to its own (row, col).

        Returns:
            New Board sharing untouched rows with this one.
        """
        changed: Dict[int, Dict[int, Cell]] = {}
        for cell in updates:
            changed.setdefault(cell.row, {})[cell.col] = cell
        if not changed:
            return self
        rows = list(self.cells)
        for row_index, row_updates in changed.items():
            row = list(rows[row_index])
            for col_index, cell in row_updates.items():
                row[col_index] = cell
            rows[row_index] = tuple(row)
        return Board(self.rows, self.cols, tuple(rows))

    def with_grid(self, grid: List[List[Cell]]) -> "Board":
        """Build a board of the same shape from a mutable row grid."""
        return Board(self.rows, self.cols, tuple(tuple(row) for row in grid))

    def to_grid(self) -> List[List[Cell]]:
        """Mutable copy of the cells for transactional edits."""
        return [list(row) for row in self.cells]

    # ========================================================================
    # Agent Views
    # ========================================================================

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for cell in self.iter_cells():
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def get_hidden_positions(self) -> List[Position]:
        """Positions of cells that can still be opened."""
        return [
            cell.position
            for cell in self.iter_cells()
            if cell.state == CellState.HIDDEN
        ]


def create_empty_board(rows: int, cols: int) -> Board:
    """
    Create a board with no mines and every cell hidden.

    Dimensions are assumed positive; Difficulty validates presets.
    """
    cells = tuple(
        tuple(Cell(row, col) for col in range(cols))
        for row in range(rows)
    )
    return Board(rows, cols, cells)
