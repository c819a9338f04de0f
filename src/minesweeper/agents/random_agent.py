"""
Random agent for Minesweeper.

Serves as a baseline by opening hidden cells at random.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """
    Agent that opens hidden cells uniformly at random.

    Because the first open is always safe and usually cascades, it wins
    a handful of beginner games by luck alone.
    """

    def __init__(
        self,
        rows: int = 9,
        cols: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            rows: Number of rows in the board.
            cols: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(rows, cols)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Returns:
            Random action index from valid actions, or 0 when none are
            left (the environment treats it as an invalid move).
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            return 0

        return int(self.rng.choice(valid_indices))
