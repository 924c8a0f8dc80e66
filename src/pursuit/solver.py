"""
Edge-cutting strategies that keep the virus away from every gateway.

Each turn the player cuts one gateway edge, then the virus moves one step
toward its nearest reachable gateway.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from ..util.logger import logger
from .config import PursuitConfig
from .graph import Edge, Graph, is_gateway
from .virus import find_virus_target, format_cut, next_virus_step

StateKey = Tuple[str, Tuple[Edge, ...]]


@dataclass
class PursuitResult:
    """Result of a pursuit solve."""

    cuts: List[str] = field(default_factory=list)
    success: bool = False
    nodes_explored: int = 0
    time_taken_ms: float = 0.0


class PursuitSolver(ABC):
    """Common driver: timing, logging and result packaging."""

    name = "pursuit"

    def __init__(self, config: Optional[PursuitConfig] = None):
        self.config = config or PursuitConfig()
        self.logger = logger.bind(component="pursuit_solver")
        self.nodes_explored = 0

    def solve(self, graph: Graph, start: Optional[str] = None) -> PursuitResult:
        """Find the cuts to apply, in order, so the virus never reaches a gateway.

        The graph passed in is never modified.

        Args:
            graph: Graph with its gateways
            start: Virus start node, defaults to the configured one

        Returns:
            PursuitResult; on failure cuts is empty and success is False
        """
        start = start if start is not None else self.config.start_node
        start_time = time.time()
        self.nodes_explored = 0

        self.logger.info(
            f"{self.name}: virus at {start}, {len(graph.gateways)} gateways, "
            f"{len(graph.gateway_edges())} gateway edges"
        )

        edges = None if is_gateway(start) else self._find_cuts(graph.copy(), start)

        elapsed_ms = (time.time() - start_time) * 1000
        if edges is None:
            self.logger.warning(
                f"{self.name}: no safe cut sequence from {start} "
                f"({self.nodes_explored} positions explored)"
            )
            return PursuitResult(
                nodes_explored=self.nodes_explored, time_taken_ms=elapsed_ms
            )

        self.logger.info(
            f"{self.name}: {len(edges)} cuts after {self.nodes_explored} positions "
            f"in {elapsed_ms:.1f}ms"
        )
        return PursuitResult(
            cuts=[format_cut(edge) for edge in edges],
            success=True,
            nodes_explored=self.nodes_explored,
            time_taken_ms=elapsed_ms,
        )

    @abstractmethod
    def _find_cuts(self, graph: Graph, virus: str) -> Optional[List[Edge]]:
        """Cut sequence from this position, or None if the virus cannot be stopped."""
        pass


class BacktrackingPursuitSolver(PursuitSolver):
    """Tries every gateway cut in order and backtracks out of lost positions.

    Positions already proven lost are remembered by virus node plus the
    remaining gateway edges, which are the only edges that can still change.
    """

    name = "backtracking"

    def _find_cuts(self, graph: Graph, virus: str) -> Optional[List[Edge]]:
        self._lost: Set[StateKey] = set()
        return self._search(graph, virus)

    def _search(self, graph: Graph, virus: str) -> Optional[List[Edge]]:
        self.nodes_explored += 1
        if find_virus_target(graph, virus) is None:
            return []

        key = (virus, tuple(graph.gateway_edges()))
        if key in self._lost:
            return None

        for gateway, neighbor in graph.gateway_edges():
            trial = graph.copy()
            trial.remove_edge(gateway, neighbor)

            target = find_virus_target(trial, virus)
            if target is None:
                return [(gateway, neighbor)]

            next_position = next_virus_step(trial, virus, target)
            if next_position is None or is_gateway(next_position):
                continue

            rest = self._search(trial, next_position)
            if rest is not None:
                return [(gateway, neighbor)] + rest

        self.logger.debug(f"Virus at {virus} wins against {len(key[1])} gateway edges")
        self._lost.add(key)
        return None


class GreedyPursuitSolver(PursuitSolver):
    """Single pass, no backtracking.

    Each turn, for every reachable gateway, follows the virus's route to it
    and collects the edge that enters the gateway; the smallest such edge by
    (gateway, node) is cut.
    """

    name = "greedy"

    def _find_cuts(self, graph: Graph, virus: str) -> Optional[List[Edge]]:
        cuts: List[Edge] = []
        while True:
            self.nodes_explored += 1
            candidates = []
            for gateway in graph.gateways:
                node = self._gateway_entry(graph, virus, gateway)
                if node is not None:
                    candidates.append((gateway, node))
            if not candidates:
                return cuts

            cut = min(candidates)
            cuts.append(cut)
            graph.remove_edge(*cut)

            target = find_virus_target(graph, virus)
            if target is None:
                return cuts
            virus = next_virus_step(graph, virus, target)
            if virus is None:
                return cuts
            if is_gateway(virus):
                return None

    @staticmethod
    def _gateway_entry(graph: Graph, virus: str, gateway: str) -> Optional[str]:
        """Last node before the gateway on the virus's route to it."""
        current = virus
        while True:
            next_node = next_virus_step(graph, current, gateway)
            if next_node is None:
                return None
            if next_node == gateway:
                return current
            current = next_node


STRATEGIES = {
    BacktrackingPursuitSolver.name: BacktrackingPursuitSolver,
    GreedyPursuitSolver.name: GreedyPursuitSolver,
}


def create_solver(config: Optional[PursuitConfig] = None) -> PursuitSolver:
    config = config or PursuitConfig()
    if config.strategy not in STRATEGIES:
        raise ValueError(
            f"Unknown strategy {config.strategy!r}, expected one of {sorted(STRATEGIES)}"
        )
    return STRATEGIES[config.strategy](config)
