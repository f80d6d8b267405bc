"""
Reductions of graph decision problems to SAT.

Encodes k-clique and k-coloring instances as CNF, asks a SAT Oracle, and
decodes the satisfying assignment back to a vertex set or a coloring.

Submodules:
- encoding: Variable numbering, CNF/DIMACS, clique and coloring encoders
- decoding: Solver outcome files, clique and coloring decoders
- solvers: Oracle backends (pycosat, external executable)
"""

from .errors import ReductionError, MalformedAssignment, InconsistentDecoding, OracleError
from .graph import Graph
from .problem import (
    Problem,
    parse_problem,
    parse_problem_string,
    format_clique_answer,
    format_coloring_answer,
)
from .encoding import CNF, encode_clique, encode_coloring, format_dimacs, write_dimacs
from .decoding import SolverOutcome, decode_clique, decode_coloring, parse_outcome
from .solvers import PycosatOracle, ExternalOracle, create_oracle
from .pipeline import ReductionPipeline

__all__ = [
    # Errors
    'ReductionError',
    'MalformedAssignment',
    'InconsistentDecoding',
    'OracleError',
    # Graph and problems
    'Graph',
    'Problem',
    'parse_problem',
    'parse_problem_string',
    'format_clique_answer',
    'format_coloring_answer',
    # Encoding
    'CNF',
    'encode_clique',
    'encode_coloring',
    'format_dimacs',
    'write_dimacs',
    # Decoding
    'SolverOutcome',
    'decode_clique',
    'decode_coloring',
    'parse_outcome',
    # Oracles
    'PycosatOracle',
    'ExternalOracle',
    'create_oracle',
    # Pipeline
    'ReductionPipeline',
]
