"""
Virus pursuit on an undirected graph.

The player cuts one gateway edge per turn so that the virus, which always
walks toward its nearest gateway, never reaches one.
"""

from .config import PursuitConfig
from .graph import Graph, GraphInvariantError, GraphValidationError, PathsInfo, is_gateway
from .parser import graph_from_lines, parse_edges
from .solver import (BacktrackingPursuitSolver, GreedyPursuitSolver,
                     PursuitResult, PursuitSolver, create_solver)
from .virus import ReplayResult, find_virus_target, next_virus_step, replay_cuts

__all__ = [
    "BacktrackingPursuitSolver",
    "Graph",
    "GraphInvariantError",
    "GraphValidationError",
    "GreedyPursuitSolver",
    "PathsInfo",
    "PursuitConfig",
    "PursuitResult",
    "PursuitSolver",
    "ReplayResult",
    "create_solver",
    "find_virus_target",
    "graph_from_lines",
    "is_gateway",
    "next_virus_step",
    "parse_edges",
    "replay_cuts",
]
