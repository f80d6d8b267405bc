"""
Decoding of k-coloring assignments.

Each true variable var(i, v) gives vertex v the color (register) i.
"""

import logging
from typing import Dict

from ..errors import InconsistentDecoding
from ..encoding.variables import split_variable
from .clique import check_assignment, check_variable_range
from .outcome import SolverOutcome

logger = logging.getLogger(__name__)


def decode_coloring(outcome: SolverOutcome, n: int, k: int, strict: bool = True) -> Dict[int, int]:
    """
    Recover the vertex -> color map from a solver outcome.

    Colors come from the closed form ((x - 1) mod K) + 1, which matches
    walking the variables 1..N*K while cycling colors 1..K.

    Args:
        outcome: Oracle verdict for the coloring formula
        n: Number of vertices
        k: Number of colors
        strict: Raise on a map that misses vertices instead of reporting the
                instance as infeasible

    Returns:
        Map from every vertex in [1, n] to its color, or an empty map if the
        instance is infeasible

    Raises:
        MalformedAssignment: If the assignment does not cover n * k variables, or a
            true variable lies outside [1, n * k]
        InconsistentDecoding: If a vertex gets two colors, or (strict only)
            fewer than n vertices are colored
    """
    if not outcome.satisfiable:
        return {}

    check_assignment(outcome, n, k)

    coloring: Dict[int, int] = {}
    for variable in outcome.true_variables():
        check_variable_range(variable, n, k)
        color, vertex = split_variable(variable, k)
        previous = coloring.get(vertex)
        if previous is not None and previous != color:
            raise InconsistentDecoding(
                f"colors {previous} and {color} both assigned", vertex=vertex
            )
        coloring[vertex] = color

    if len(coloring) != n:
        missing = [v for v in range(1, n + 1) if v not in coloring]
        if strict:
            raise InconsistentDecoding(f"vertices {missing} have no color")
        logger.warning(f"Vertices {missing} have no color; reporting the instance as infeasible")
        return {}

    return dict(sorted(coloring.items()))
