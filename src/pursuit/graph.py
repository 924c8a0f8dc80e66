from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set, Tuple

Edge = Tuple[str, str]

MAX_NODES = 64
MAX_EDGES = 128


class GraphValidationError(ValueError):
    """Raised when edges violate the graph's construction rules."""


class GraphInvariantError(RuntimeError):
    """Raised when the adjacency relation is found to be asymmetric."""


def is_gateway(node: str) -> bool:
    """Gateways are the nodes whose label starts with an uppercase letter."""
    return bool(node) and node[0].isupper()


@dataclass
class PathsInfo:
    """Breadth-first distances and predecessors from one start node."""

    start: str
    distances: Dict[str, int]
    came_from: Dict[str, str]

    def reaches(self, node: str) -> bool:
        return node in self.distances

    def path_to(self, node: str) -> Optional[List[str]]:
        if node not in self.distances:
            return None
        path = [node]
        while path[-1] != self.start:
            path.append(self.came_from[path[-1]])
        path.reverse()
        return path


class Graph:
    """Undirected graph whose uppercase-labelled nodes are gateways.

    Edges can be removed after construction but never added.
    """

    def __init__(
        self,
        edges: Iterable[Edge],
        max_nodes: int = MAX_NODES,
        max_edges: int = MAX_EDGES,
    ):
        self._adjacency: Dict[str, Set[str]] = {}
        self._gateways: Set[str] = set()
        self.max_nodes = max_nodes
        self.max_edges = max_edges

        edge_count = 0
        for a, b in edges:
            if a == b:
                raise GraphValidationError(f"Self-loops are not supported: {a}-{b}")
            if not a or not b:
                raise GraphValidationError(f"Edge has an empty endpoint: {a!r}-{b!r}")
            self._add_directed(a, b)
            self._add_directed(b, a)
            edge_count += 1
            if edge_count > max_edges:
                raise GraphValidationError(
                    f"Graph has more than {max_edges} edges"
                )
            if len(self._adjacency) > max_nodes:
                raise GraphValidationError(
                    f"Graph has more than {max_nodes} nodes"
                )
            for node in (a, b):
                if is_gateway(node):
                    self._gateways.add(node)

    def _add_directed(self, a: str, b: str) -> None:
        neighbors = self._adjacency.setdefault(a, set())
        if b in neighbors:
            raise GraphValidationError(f"Duplicate edges are not supported: {a}-{b}")
        neighbors.add(b)

    @property
    def nodes(self) -> List[str]:
        return sorted(self._adjacency)

    @property
    def gateways(self) -> List[str]:
        return sorted(self._gateways)

    def __contains__(self, node: str) -> bool:
        return node in self._adjacency

    def neighbors(self, node: str) -> List[str]:
        """Adjacent nodes in ordinal order; unknown nodes have none."""
        return sorted(self._adjacency.get(node, ()))

    def has_edge(self, a: str, b: str) -> bool:
        return b in self._adjacency.get(a, ())

    def edges(self) -> List[Edge]:
        return sorted(
            (a, b) for a, neighbors in self._adjacency.items() for b in neighbors if a < b
        )

    def gateway_edges(self) -> List[Edge]:
        """Every (gateway, neighbor) pair, ordered by gateway then neighbor."""
        return [
            (gateway, neighbor)
            for gateway in self.gateways
            for neighbor in self.neighbors(gateway)
        ]

    def remove_edge(self, a: str, b: str) -> bool:
        """Cut the edge a-b in both directions.

        Returns:
            False if there is no such edge, True once it is removed

        Raises:
            GraphInvariantError: If only one direction of the edge exists
        """
        if not self.has_edge(a, b):
            return False
        if not self.has_edge(b, a):
            raise GraphInvariantError(
                f"Graph should contain both ({a}, {b}) and ({b}, {a}) edges"
            )
        self._adjacency[a].discard(b)
        self._adjacency[b].discard(a)
        return True

    def shortest_paths_from(self, start: str) -> PathsInfo:
        distances = {start: 0}
        came_from: Dict[str, str] = {}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbor in self.neighbors(current):
                if neighbor not in distances:
                    distances[neighbor] = distances[current] + 1
                    came_from[neighbor] = current
                    queue.append(neighbor)

        return PathsInfo(start, distances, came_from)

    def copy(self) -> "Graph":
        new_graph = Graph([], self.max_nodes, self.max_edges)
        new_graph._adjacency = {
            node: set(neighbors) for node, neighbors in self._adjacency.items()
        }
        new_graph._gateways = set(self._gateways)
        return new_graph

    def __str__(self) -> str:
        return "\n".join(f"{a}-{b}" for a, b in self.edges())
