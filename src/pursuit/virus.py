"""
Movement rules for the virus.

The virus heads for the nearest reachable gateway (ties broken by label) and
moves one edge per turn, always to the first neighbor in sorted order that is
strictly closer to that gateway.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .graph import Edge, Graph, PathsInfo, is_gateway


def find_virus_target(graph: Graph, virus: str) -> Optional[str]:
    """Nearest gateway reachable from the virus, or None if it is contained."""
    return nearest_gateway(graph, graph.shortest_paths_from(virus))


def nearest_gateway(graph: Graph, paths: PathsInfo) -> Optional[str]:
    best_target = None
    best_distance = None
    for gateway in graph.gateways:
        distance = paths.distances.get(gateway)
        if distance is None:
            continue
        if best_distance is None or distance < best_distance:
            best_target, best_distance = gateway, distance
    return best_target


def next_virus_step(graph: Graph, virus: str, target: str) -> Optional[str]:
    to_target = graph.shortest_paths_from(target).distances
    if virus not in to_target:
        return None
    for neighbor in graph.neighbors(virus):
        if neighbor in to_target and to_target[neighbor] < to_target[virus]:
            return neighbor
    return None


def move_virus(graph: Graph, virus: str) -> Optional[str]:
    """Where the virus goes this turn, or None if no gateway is reachable."""
    target = find_virus_target(graph, virus)
    if target is None:
        return None
    return next_virus_step(graph, virus, target)


@dataclass
class ReplayResult:
    """Outcome of replaying a cut sequence against the virus."""

    trail: List[str] = field(default_factory=list)
    safe: bool = True
    invalid_cut: Optional[str] = None


def replay_cuts(graph: Graph, start: str, cuts: Sequence[str]) -> ReplayResult:
    """Apply cuts in order on a copy, moving the virus after each one.

    The sequence is safe if the virus never stands on a gateway and, once every
    cut is applied, no gateway is reachable from where it ends up.
    """
    graph = graph.copy()
    virus = start
    result = ReplayResult(trail=[start])
    if is_gateway(virus):
        result.safe = False
        return result

    for cut in cuts:
        gateway, node = _split_cut(cut)
        if not graph.remove_edge(gateway, node):
            result.safe = False
            result.invalid_cut = cut
            return result
        next_position = move_virus(graph, virus)
        if next_position is None:
            continue
        virus = next_position
        result.trail.append(virus)
        if is_gateway(virus):
            result.safe = False
            return result

    result.safe = find_virus_target(graph, virus) is None
    return result


def format_cut(edge: Edge) -> str:
    return f"{edge[0]}-{edge[1]}"


def _split_cut(cut: str) -> Edge:
    gateway, _, node = cut.partition("-")
    return gateway, node
