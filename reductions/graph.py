"""
Undirected graph used by the reduction encoders.

Vertices are positive integers. Adjacency is stored as a set per vertex, so
only membership is meaningful and duplicate edges collapse.
"""

from typing import Dict, Iterable, Iterator, List, Set, Tuple


class Graph:
    """
    Undirected adjacency-set graph.

    Built once from an edge list and read afterwards; encoders only ask
    ``has_edge``.
    """

    def __init__(self):
        self._adjacency: Dict[int, Set[int]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[int, int]], vertices: Iterable[int] = ()) -> "Graph":
        """
        Build a graph from an edge list.

        Args:
            edges: Iterable of (u, v) pairs
            vertices: Extra vertices to add even if they have no edges

        Returns:
            Graph containing every listed vertex and edge
        """
        graph = cls()
        for vertex in vertices:
            graph.add_vertex(vertex)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    def add_vertex(self, vertex: int) -> None:
        """Ensure ``vertex`` exists; an existing vertex keeps its neighbours."""
        self._adjacency.setdefault(vertex, set())

    def add_edge(self, u: int, v: int) -> None:
        """Add the undirected edge (u, v), creating unknown endpoints."""
        self.add_vertex(u)
        self.add_vertex(v)
        self._adjacency[u].add(v)
        self._adjacency[v].add(u)

    def has_edge(self, u: int, v: int) -> bool:
        """Return True iff v is adjacent to u. Unknown vertices have no edges."""
        neighbors = self._adjacency.get(u)
        if neighbors is None:
            return False
        return v in neighbors

    def neighbors(self, vertex: int) -> Set[int]:
        """Return a copy of the neighbour set of ``vertex`` (empty if unknown)."""
        return set(self._adjacency.get(vertex, ()))

    @property
    def vertices(self) -> List[int]:
        """Known vertices in ascending order."""
        return sorted(self._adjacency)

    @property
    def num_vertices(self) -> int:
        return len(self._adjacency)

    @property
    def num_edges(self) -> int:
        """Number of unordered adjacent pairs (a self-loop counts once)."""
        loops = sum(1 for v, nbrs in self._adjacency.items() if v in nbrs)
        total = sum(len(nbrs) for nbrs in self._adjacency.values())
        return (total - loops) // 2 + loops

    def __contains__(self, vertex: int) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adjacency == other._adjacency

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices}, num_edges={self.num_edges})"
