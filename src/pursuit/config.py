"""
Configuration for the pursuit solvers.
"""

from dataclasses import dataclass

from .graph import MAX_EDGES, MAX_NODES


@dataclass
class PursuitConfig:
    """Configuration for a pursuit solve."""

    start_node: str = "a"  # Where the virus starts
    strategy: str = "backtracking"  # backtracking, greedy
    max_nodes: int = MAX_NODES
    max_edges: int = MAX_EDGES
