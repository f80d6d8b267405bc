"""
Variable numbering shared by the encoders and decoders.

Variable ``var(i, v)`` stands for "slot i holds vertex v" in the clique
reduction and "vertex v has color i" in the coloring reduction. Positions
``i`` range over [1, K], vertices ``v`` over [1, N], and the numbering

    var(i, v) = (i - 1) + K * (v - 1) + 1

maps the pairs one-to-one onto [1, N * K]. Every vertex owns a band of K
consecutive variables.
"""

from typing import Tuple


def variable_index(position: int, vertex: int, k: int) -> int:
    """Return the variable for (position, vertex) with K positions per vertex."""
    return (position - 1) + k * (vertex - 1) + 1


def vertex_of(variable: int, k: int) -> int:
    """Recover the vertex whose band contains ``variable``."""
    if variable % k == 0:
        return variable // k
    return variable // k + 1


def position_of(variable: int, k: int) -> int:
    """Recover the slot (clique) or color (coloring) of ``variable``."""
    return (variable - 1) % k + 1


def split_variable(variable: int, k: int) -> Tuple[int, int]:
    """Invert ``variable_index``: return (position, vertex)."""
    return position_of(variable, k), vertex_of(variable, k)
