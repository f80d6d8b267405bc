"""
Problem instances and final answers.

An instance is a line ``N M K`` followed by M edge lines ``u v`` over the
vertices 1..N. Answers are ``True``/``False`` followed, when true, by the
decoded vertices (clique) or colors (coloring).
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Set, TextIO, Tuple

from .graph import Graph


@dataclass
class Problem:
    """
    A parsed graph problem instance.

    Attributes:
        n: Number of vertices
        m: Number of edges listed in the input
        k: Clique size or number of colors
        graph: Graph built from the edge lines
    """
    n: int
    m: int
    k: int
    graph: Graph

    @classmethod
    def from_edges(cls, n: int, k: int, edges: Iterable[Tuple[int, int]]) -> "Problem":
        edges = list(edges)
        return cls(n=n, m=len(edges), k=k, graph=Graph.from_edges(edges))


def _parse_ints(line: str, count: int, line_num: int) -> List[int]:
    tokens = line.split()
    if len(tokens) != count:
        raise ValueError(f"Expected {count} integers at line {line_num}: {line}")
    try:
        return [int(token) for token in tokens]
    except ValueError as e:
        raise ValueError(f"Invalid integer at line {line_num}: {line}") from e


def parse_problem_string(content: str) -> Problem:
    """
    Parse a problem instance.

    Args:
        content: Text with the ``N M K`` line and M edge lines

    Returns:
        Problem with its graph built

    Raises:
        ValueError: On a missing or malformed line, or an edge endpoint
            outside [1, N]
    """
    lines = [
        (line_num, line.strip())
        for line_num, line in enumerate(content.split('\n'), 1)
        if line.strip()
    ]
    if not lines:
        raise ValueError("Missing problem line (N M K)")

    line_num, header = lines[0]
    n, m, k = _parse_ints(header, 3, line_num)

    edge_lines = lines[1:m + 1]
    if len(edge_lines) < m:
        raise ValueError(f"Expected {m} edges, found {len(edge_lines)}")

    graph = Graph()
    for line_num, line in edge_lines:
        u, v = _parse_ints(line, 2, line_num)
        for vertex in (u, v):
            if not 1 <= vertex <= n:
                raise ValueError(f"Vertex {vertex} outside [1, {n}] at line {line_num}")
        graph.add_edge(u, v)

    return Problem(n=n, m=m, k=k, graph=graph)


def parse_problem(stream: TextIO) -> Problem:
    """Parse a problem instance from an open text stream."""
    return parse_problem_string(stream.read())


def format_clique_answer(vertices: Set[int]) -> str:
    """``False`` for an empty set, else ``True`` and the vertices in ascending order."""
    if not vertices:
        return "False\n"
    return "True\n" + ' '.join(str(v) for v in sorted(vertices)) + "\n"


def format_coloring_answer(coloring: Dict[int, int], n: int) -> str:
    """``True`` and the colors of vertices 1..n when every vertex is colored, else ``False``."""
    if len(coloring) != n:
        return "False\n"
    return "True\n" + ' '.join(str(coloring[v]) for v in range(1, n + 1)) + "\n"
