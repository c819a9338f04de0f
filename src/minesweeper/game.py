"""
Game controller for Minesweeper.

The functional API (new_game, open_cell, flag_cell, chord_cell) threads
an immutable SessionState through every player action. Game wraps it
for presentation layers that want a single mutable handle with reset,
difficulty selection and an elapsed-time counter.
"""
import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Optional, Union

from .board import BEGINNER, Board, Difficulty, create_empty_board, get_difficulty
from .flags import check_win, count_flags, flag_all_mines, toggle_flag
from .mines import place_mines_after_first_click
from .reveal import RevealResult, chord_open, reveal_all_mines, reveal_cascade
from .timer import ElapsedTimer


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    READY = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        """Check if no further moves are accepted."""
        return self in (GameStatus.WON, GameStatus.LOST)


# ============================================================================
# Session State
# ============================================================================

@dataclass(frozen=True)
class SessionState:
    """
    Snapshot of one game session.

    Attributes:
        board: Current board snapshot.
        status: Where the session is in the READY/PLAYING/WON/LOST cycle.
        flags_remaining: Total mines minus placed flags; may go negative.
        difficulty: Preset the session was started with.
        rng: Random source used for mine placement.
    """

    board: Board
    status: GameStatus
    flags_remaining: int
    difficulty: Difficulty = BEGINNER
    rng: random.Random = field(
        default_factory=random.Random, compare=False, repr=False
    )

    @property
    def total_mines(self) -> int:
        return self.difficulty.mines


def new_game(
    difficulty: Difficulty = BEGINNER,
    rng: Optional[random.Random] = None,
) -> SessionState:
    """
    Start a session with an empty board.

    Args:
        difficulty: Board preset.
        rng: Random source for mine placement (seed it for repeatable
            games).

    Returns:
        A READY session; mines are placed on the first open.
    """
    return SessionState(
        board=create_empty_board(difficulty.rows, difficulty.cols),
        status=GameStatus.READY,
        flags_remaining=difficulty.mines,
        difficulty=difficulty,
        rng=rng or random.Random(),
    )


def _resolve(session: SessionState, result: RevealResult) -> SessionState:
    """Apply loss/win/continue rules after cells were opened."""
    board, exploded = result
    if exploded:
        logger.info("Mine hit, game lost")
        return replace(
            session, board=reveal_all_mines(board), status=GameStatus.LOST
        )
    if check_win(board):
        logger.info("All safe cells revealed, game won")
        return replace(
            session,
            board=flag_all_mines(board),
            status=GameStatus.WON,
            flags_remaining=0,
        )
    return replace(
        session,
        board=board,
        status=GameStatus.PLAYING,
        flags_remaining=session.total_mines - count_flags(board),
    )


def open_cell(session: SessionState, row: int, col: int) -> SessionState:
    """
    Open a cell.

    The first open of a session places the mines around it and moves the
    session from READY to PLAYING. Opening a revealed or flagged cell, or
    any cell once the game is over, returns the session unchanged.
    """
    if session.status.is_terminal:
        return session
    cell = session.board.get_cell(row, col)
    if cell.is_revealed or cell.is_flagged:
        return session

    board = session.board
    if session.status == GameStatus.READY:
        board = place_mines_after_first_click(
            board, row, col, session.total_mines, session.rng
        )
        logger.debug("First open at (%d, %d), game started", row, col)

    return _resolve(session, reveal_cascade(board, row, col))


def flag_cell(session: SessionState, row: int, col: int) -> SessionState:
    """
    Toggle the flag on a hidden cell.

    Flags may be placed before the first open. Revealed cells and
    finished games are left unchanged.
    """
    if session.status.is_terminal:
        return session
    board, changed = toggle_flag(session.board, row, col)
    if not changed:
        return session
    return replace(
        session,
        board=board,
        flags_remaining=session.total_mines - count_flags(board),
    )


def chord_cell(session: SessionState, row: int, col: int) -> SessionState:
    """
    Open all unflagged neighbors of a revealed number.

    Only acts while PLAYING and when the number of flagged neighbors
    equals the cell's count; otherwise the session is returned unchanged.
    """
    if session.status != GameStatus.PLAYING:
        return session
    result = chord_open(session.board, row, col)
    if result.board is session.board:
        return session
    return _resolve(session, result)


# ============================================================================
# Stateful Controller
# ============================================================================

class Game:
    """
    Mutable handle on the current session for a presentation layer.

    Holds the selected difficulty, the current SessionState and an
    ElapsedTimer that runs only while the game is PLAYING.
    """

    def __init__(
        self,
        difficulty: Union[Difficulty, str] = BEGINNER,
        rng: Optional[random.Random] = None,
        timer: Optional[ElapsedTimer] = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            difficulty: Preset or preset name.
            rng: Random source shared by every session of this game.
            timer: Elapsed-time counter (default: 1 second ticks).
        """
        self.difficulty = _as_difficulty(difficulty)
        self.rng = rng or random.Random()
        self.timer = timer or ElapsedTimer()
        self.session = new_game(self.difficulty, self.rng)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self.session.board

    @property
    def status(self) -> GameStatus:
        return self.session.status

    @property
    def flags_remaining(self) -> int:
        return self.session.flags_remaining

    @property
    def elapsed_seconds(self) -> int:
        return self.timer.seconds

    # ========================================================================
    # Player Actions
    # ========================================================================

    def open(self, row: int, col: int) -> SessionState:
        return self._apply(open_cell(self.session, row, col))

    def flag(self, row: int, col: int) -> SessionState:
        return self._apply(flag_cell(self.session, row, col))

    def chord(self, row: int, col: int) -> SessionState:
        return self._apply(chord_cell(self.session, row, col))

    def reset(self) -> SessionState:
        """Start over with the current difficulty."""
        logger.info("New game: %s", self.difficulty.label)
        return self._apply(new_game(self.difficulty, self.rng))

    def change_difficulty(self, difficulty: Union[Difficulty, str]) -> SessionState:
        """Select another preset and reset."""
        self.difficulty = _as_difficulty(difficulty)
        return self.reset()

    def close(self) -> None:
        """Stop the timer; call when the game is torn down."""
        self.timer.stop()

    def _apply(self, session: SessionState) -> SessionState:
        previous = self.session.status
        self.session = session
        if session.status != previous:
            logger.debug(
                "Status %s -> %s", previous.name, session.status.name
            )
        self._sync_timer()
        return session

    def _sync_timer(self) -> None:
        status = self.session.status
        if status == GameStatus.PLAYING:
            self.timer.start()
        elif status == GameStatus.READY:
            self.timer.reset()
        else:
            self.timer.stop()


def _as_difficulty(difficulty: Union[Difficulty, str]) -> Difficulty:
    if isinstance(difficulty, Difficulty):
        return difficulty
    return get_difficulty(difficulty)
