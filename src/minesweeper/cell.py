"""
Cell module for Minesweeper game.

Represents individual cells on the game board: their fixed position,
content (mine/number) and visibility (hidden/revealed/flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass, replace


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Cells are immutable; operations that change a cell return a copy.

    Attributes:
        row: Row index on the board.
        col: Column index on the board.
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the cell has been opened.
        is_flagged: Whether the player marked this cell with a flag.
        neighbor_count: Count of mines in neighboring cells (0-8).
    """

    row: int
    col: int
    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    neighbor_count: int = 0

    @property
    def position(self) -> tuple:
        """(row, col) of this cell."""
        return self.row, self.col

    @property
    def state(self) -> CellState:
        """Visual state; a revealed cell shows as revealed even if flagged."""
        if self.is_revealed:
            return CellState.REVEALED
        if self.is_flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return self.state == CellState.HIDDEN

    def revealed(self) -> "Cell":
        """
        Return a revealed copy of this cell.

        Returns:
            The same cell if already revealed or flagged, else a copy
            with is_revealed set.
        """
        if self.is_revealed or self.is_flagged:
            return self
        return replace(self, is_revealed=True)

    def toggled_flag(self) -> "Cell":
        """
        Return a copy with the flag flipped.

        Returns:
            The same cell if it is revealed, else a copy with is_flagged
            inverted.
        """
        if self.is_revealed:
            return self
        return replace(self, is_flagged=not self.is_flagged)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for agents.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.neighbor_count
