"""
Minesweeper agents.

Agents pick cells to act on from an observation array:
- RandomAgent: Baseline uniform selection over hidden cells
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
