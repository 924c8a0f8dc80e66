"""
A* solver for the corridor-and-rooms maze.

Finds the minimum total energy needed to move every object into its room.
"""

from .config import SearchConfig
from .heuristic import estimate_remaining_energy
from .solver import NO_SOLUTION, AStarSolver, SearchResult, solve_energy

__all__ = [
    "AStarSolver",
    "NO_SOLUTION",
    "SearchConfig",
    "SearchResult",
    "estimate_remaining_energy",
    "solve_energy",
]
