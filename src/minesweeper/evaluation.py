"""
Agent evaluation for Minesweeper.

Plays batches of games through MinesweeperEnv and aggregates results.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .agents.base_agent import BaseAgent
from .board import BEGINNER, Difficulty
from .environment import MinesweeperEnv


logger = logging.getLogger(__name__)


# ============================================================================
# Evaluation Configuration
# ============================================================================

@dataclass
class EvaluationConfig:
    """
    Configuration for an evaluation run.

    Attributes:
        difficulty: Board preset to play.
        num_episodes: Games to play per agent.
        max_steps: Step limit per game.
        seed: Seed for the first episode's mine layout.
    """

    difficulty: Difficulty = BEGINNER
    num_episodes: int = 100
    max_steps: int = 500
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.num_episodes < 1:
            raise ValueError("num_episodes must be at least 1")
        if self.max_steps < 1:
            raise ValueError("max_steps must be at least 1")


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate an agent on a fixed preset.
    """

    def __init__(self, config: Optional[EvaluationConfig] = None) -> None:
        self.config = config or EvaluationConfig()

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with win_rate, avg_reward, avg_steps and
            avg_revealed.
        """
        env = MinesweeperEnv(difficulty=self.config.difficulty)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.config.num_episodes):
            seed = self.config.seed if episode == 0 else None
            observation, info = env.reset(seed=seed)
            agent.reset()

            for _ in range(self.config.max_steps):
                action = agent.select_action(
                    observation, env.get_action_mask()
                )
                observation, reward, terminated, truncated, info = env.step(
                    action
                )
                total_reward += reward
                total_steps += 1
                if terminated or truncated:
                    break

            if info["game_state"] == "WON":
                wins += 1
            total_revealed += info["revealed"]
            logger.debug(
                "Episode %d finished: %s after %d steps",
                episode, info["game_state"], info["steps"],
            )

        episodes = self.config.num_episodes
        return {
            "win_rate": wins / episodes,
            "avg_reward": total_reward / episodes,
            "avg_steps": total_steps / episodes,
            "avg_revealed": total_revealed / episodes,
        }
