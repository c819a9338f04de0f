"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface on top of the session API.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BEGINNER, Difficulty
from .game import GameStatus, SessionState, chord_cell, new_game, open_cell


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine (only after a loss)

    Actions:
        Discrete action space of size rows * cols.
        Action i targets cell (i // cols, i % cols): a hidden cell is
        opened, a revealed number is chorded.

    Rewards:
        - +1 for an action that opens at least one cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty: Optional[Difficulty] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Board preset (default: beginner 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.difficulty = difficulty or BEGINNER
        self.render_mode = render_mode
        self.session: SessionState = new_game(self.difficulty)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.difficulty.rows, self.difficulty.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(
            self.difficulty.rows * self.difficulty.cols
        )

        self._steps = 0
        self._total_safe_cells = (
            self.difficulty.rows * self.difficulty.cols - self.difficulty.mines
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        # Mine placement draws from a Random derived from the env's np_random.
        placement_seed = int(self.np_random.integers(0, 2**32))
        self.session = new_game(self.difficulty, random.Random(placement_seed))
        self._steps = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(int(action))
        self._steps += 1

        reward = self._apply_action(row, col)
        observation = self.session.board.get_observation()
        terminated = self.session.status.is_terminal
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(action, self.difficulty.cols)

    def _apply_action(self, row: int, col: int) -> float:
        """
        Open or chord the target cell and score the result.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        before = self.session
        if before.board.get_cell(row, col).is_revealed:
            after = chord_cell(before, row, col)
        else:
            after = open_cell(before, row, col)
        self.session = after

        if after is before:
            return -0.1
        if after.status == GameStatus.WON:
            return 10.0
        if after.status == GameStatus.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        revealed = board.count(lambda cell: cell.is_revealed and not cell.is_mine)

        return {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": self._total_safe_cells,
            "game_state": self.session.status.name,
            "flags_remaining": self.session.flags_remaining,
            "valid_actions": len(board.get_hidden_positions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        symbols = {-1: ".", -2: "F", 9: "*", 0: " "}
        obs = self.session.board.get_observation()
        lines = []
        for row in obs:
            lines.append(
                "".join(symbols.get(int(val), str(val)) + " " for val in row)
            )
        return "\n".join(lines)

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of cells that can be opened.

        Returns:
            Boolean array where True = hidden, unflagged cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.session.board.get_hidden_positions():
            mask[row * self.difficulty.cols + col] = True
        return mask
