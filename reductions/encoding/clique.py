"""
Reduction of k-clique to SAT.

Variable var(i, v) is true when clique slot i holds vertex v. The formula is
satisfiable iff the graph restricted to vertices 1..N has a clique of size K.
"""

import logging
from typing import List

from ..graph import Graph
from .cnf import CNF, Clause
from .variables import variable_index

logger = logging.getLogger(__name__)


def coverage_clauses(n: int, k: int) -> List[Clause]:
    """Every slot holds at least one vertex."""
    return [
        tuple(variable_index(i, v, k) for v in range(1, n + 1))
        for i in range(1, k + 1)
    ]


def non_edge_clauses(graph: Graph, n: int, k: int) -> List[Clause]:
    """Two non-adjacent vertices never occupy two different slots, in either order."""
    clauses = []
    for i in range(1, k):
        for j in range(i + 1, k + 1):
            for v in range(1, n):
                for w in range(v + 1, n + 1):
                    if graph.has_edge(v, w):
                        continue
                    clauses.append((-variable_index(i, v, k), -variable_index(j, w, k)))
                    clauses.append((-variable_index(i, w, k), -variable_index(j, v, k)))
    return clauses


def distinctness_clauses(n: int, k: int) -> List[Clause]:
    """Two different slots never hold the same vertex."""
    clauses = []
    for i in range(1, k):
        for j in range(i + 1, k + 1):
            for v in range(1, n + 1):
                clauses.append((-variable_index(i, v, k), -variable_index(j, v, k)))
    return clauses


def encode_clique(graph: Graph, n: int, k: int) -> CNF:
    """
    Encode "does ``graph`` contain a clique of size ``k``" as CNF.

    Args:
        graph: Graph whose vertices are 1..n
        n: Number of vertices
        k: Clique size

    Returns:
        CNF over n * k variables. Non-positive n or k are not rejected and
        give a degenerate formula.
    """
    clauses = coverage_clauses(n, k)
    clauses += non_edge_clauses(graph, n, k)
    clauses += distinctness_clauses(n, k)

    cnf = CNF.from_clauses(max(n * k, 0), clauses)
    logger.debug(f"Clique encoding: {cnf.num_variables} variables, {cnf.num_clauses} clauses")
    return cnf
