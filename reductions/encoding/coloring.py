"""
Reduction of k-coloring to SAT.

Variable var(i, v) is true when vertex v gets color i. Colors double as
register numbers in the register allocation reading of the problem.
"""

import logging
from typing import List

from ..graph import Graph
from .cnf import CNF, Clause
from .variables import variable_index

logger = logging.getLogger(__name__)


def coverage_clauses(n: int, k: int) -> List[Clause]:
    """Every vertex gets at least one color."""
    return [
        tuple(variable_index(i, v, k) for i in range(1, k + 1))
        for v in range(1, n + 1)
    ]


def at_most_one_color_clauses(n: int, k: int) -> List[Clause]:
    clauses = []
    for v in range(1, n + 1):
        for i in range(1, k):
            for j in range(i + 1, k + 1):
                clauses.append((-variable_index(i, v, k), -variable_index(j, v, k)))
    return clauses


def adjacent_color_clauses(graph: Graph, n: int, k: int) -> List[Clause]:
    """Adjacent vertices never share a color."""
    clauses = []
    for i in range(1, k + 1):
        for v in range(1, n):
            for w in range(v + 1, n + 1):
                if graph.has_edge(v, w):
                    clauses.append((-variable_index(i, v, k), -variable_index(i, w, k)))
    return clauses


def encode_coloring(graph: Graph, n: int, k: int) -> CNF:
    """
    Encode "is ``graph`` ``k``-colorable" as CNF.

    Args:
        graph: Graph whose vertices are 1..n
        n: Number of vertices
        k: Number of colors

    Returns:
        CNF over n * k variables with N + N*C(K,2) + K*|E| clauses
    """
    clauses = coverage_clauses(n, k)
    clauses += at_most_one_color_clauses(n, k)
    clauses += adjacent_color_clauses(graph, n, k)

    cnf = CNF.from_clauses(max(n * k, 0), clauses)
    logger.debug(f"Coloring encoding: {cnf.num_variables} variables, {cnf.num_clauses} clauses")
    return cnf
