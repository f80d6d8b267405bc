"""
Decoding of k-clique assignments.

Each true variable var(i, v) binds slot i to vertex v. The answer is the set
of vertices bound to the K slots.
"""

import logging
from typing import Dict, Set

from ..errors import InconsistentDecoding, MalformedAssignment
from ..encoding.variables import split_variable
from .outcome import SolverOutcome

logger = logging.getLogger(__name__)


def check_variable_range(variable: int, n: int, k: int) -> None:
    """Raise MalformedAssignment unless ``variable`` lies in [1, n * k]."""
    if not 1 <= variable <= n * k:
        raise MalformedAssignment(
            f"variable {variable} outside [1, {n * k}] for N={n} K={k}"
        )


def check_assignment(outcome: SolverOutcome, n: int, k: int) -> None:
    """Raise MalformedAssignment unless a satisfiable outcome covers all n * k variables."""
    expected = max(n * k, 0)
    if outcome.satisfiable and outcome.num_variables != expected:
        raise MalformedAssignment(
            f"expected {expected} values for N={n} K={k}, got {outcome.num_variables}"
        )


def decode_clique(outcome: SolverOutcome, n: int, k: int) -> Set[int]:
    """
    Recover the clique from a solver outcome.

    The formula only forces each slot to hold at least one vertex, so a slot
    bound to several vertices keeps the lowest one. The K kept vertices are
    pairwise adjacent and distinct.

    Args:
        outcome: Oracle verdict for the clique formula
        n: Number of vertices
        k: Clique size

    Returns:
        Set of K vertices, or an empty set if the formula is unsatisfiable

    Raises:
        MalformedAssignment: If the assignment does not cover n * k variables, or a
            true variable lies outside [1, n * k]
        InconsistentDecoding: If a slot is empty or a vertex fills two slots
    """
    if not outcome.satisfiable:
        return set()

    check_assignment(outcome, n, k)

    slots: Dict[int, int] = {}
    for variable in outcome.true_variables():
        check_variable_range(variable, n, k)
        slot, vertex = split_variable(variable, k)
        if slot in slots:
            logger.debug(f"Slot {slot} bound to vertices {slots[slot]} and {vertex}")
            vertex = min(vertex, slots[slot])
        slots[slot] = vertex

    missing = [slot for slot in range(1, k + 1) if slot not in slots]
    if missing:
        raise InconsistentDecoding(f"clique slots {missing} hold no vertex")

    vertices = set(slots.values())
    if len(vertices) != len(slots):
        seen = set()
        for vertex in slots.values():
            if vertex in seen:
                raise InconsistentDecoding("vertex bound to two clique slots", vertex=vertex)
            seen.add(vertex)

    return vertices
