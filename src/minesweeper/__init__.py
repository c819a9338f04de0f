"""
Minesweeper game module.

Provides the board-state engine (board model, mine placement, reveal,
flags), the session controller and an agent-facing environment.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    Difficulty,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
    create_empty_board,
    get_difficulty,
)
from .mines import compute_neighbor_counts, place_mines_after_first_click
from .reveal import (
    RevealResult,
    chord_open,
    count_adjacent_flags,
    reveal_all_mines,
    reveal_cascade,
)
from .flags import FlagResult, check_win, count_flags, flag_all_mines, toggle_flag
from .timer import ElapsedTimer
from .game import (
    Game,
    GameStatus,
    SessionState,
    chord_cell,
    flag_cell,
    new_game,
    open_cell,
)
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "Difficulty",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "create_empty_board",
    "get_difficulty",
    "compute_neighbor_counts",
    "place_mines_after_first_click",
    "RevealResult",
    "chord_open",
    "count_adjacent_flags",
    "reveal_all_mines",
    "reveal_cascade",
    "FlagResult",
    "check_win",
    "count_flags",
    "flag_all_mines",
    "toggle_flag",
    "ElapsedTimer",
    "Game",
    "GameStatus",
    "SessionState",
    "chord_cell",
    "flag_cell",
    "new_game",
    "open_cell",
    "MinesweeperEnv",
]
