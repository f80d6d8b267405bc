"""
Decoders for Oracle answers.

Provides:
- Solver outcome parsing and writing
- k-clique and k-coloring decoders
"""

from .outcome import (
    SolverOutcome,
    format_outcome,
    parse_outcome,
    parse_outcome_string,
    write_outcome,
)
from .clique import decode_clique
from .coloring import decode_coloring

__all__ = [
    # Outcome files
    'SolverOutcome',
    'format_outcome',
    'parse_outcome',
    'parse_outcome_string',
    'write_outcome',
    # Decoders
    'decode_clique',
    'decode_coloring',
]
