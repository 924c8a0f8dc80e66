"""
Configuration for the maze search.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    """Configuration for the best-first maze search."""

    use_heuristic: bool = True  # False degrades A* to plain Dijkstra
    max_expansions: Optional[int] = None  # Stop after this many dequeued states
    timeout_ms: Optional[float] = None  # Wall-clock budget for one solve
    log_every: int = 10_000  # Expansions between progress logs (DEBUG)
