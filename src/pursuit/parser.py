from typing import Iterable, List

from .graph import MAX_EDGES, MAX_NODES, Edge, Graph, GraphValidationError


def parse_edges(lines: Iterable[str]) -> List[Edge]:
    """Read "node-node" lines up to the first empty one."""
    edges = []
    for line_no, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            break
        parts = line.split("-")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise GraphValidationError(
                f"Line {line_no} is not an edge of the form 'node-node': {line!r}"
            )
        edges.append((parts[0], parts[1]))
    return edges


def graph_from_lines(
    lines: Iterable[str], max_nodes: int = MAX_NODES, max_edges: int = MAX_EDGES
) -> Graph:
    return Graph(parse_edges(lines), max_nodes=max_nodes, max_edges=max_edges)
