"""
Graph problem encoders.

Provides:
- Shared variable numbering
- CNF formulas and DIMACS text
- k-clique and k-coloring reductions
"""

from .cnf import CNF, Clause, format_dimacs, parse_dimacs, parse_dimacs_string, write_dimacs
from .variables import variable_index, vertex_of, position_of, split_variable
from .clique import encode_clique
from .coloring import encode_coloring

__all__ = [
    # CNF
    'CNF',
    'Clause',
    'format_dimacs',
    'parse_dimacs',
    'parse_dimacs_string',
    'write_dimacs',
    # Variable numbering
    'variable_index',
    'vertex_of',
    'position_of',
    'split_variable',
    # Encoders
    'encode_clique',
    'encode_coloring',
]
