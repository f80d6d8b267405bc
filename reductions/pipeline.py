"""
Reduction pipeline.

Graph -> encoder -> DIMACS file -> Oracle -> outcome file -> decoder -> answer.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Set, TextIO, Union

from omegaconf import DictConfig

from .decoding import decode_clique, decode_coloring, parse_outcome
from .encoding import CNF, encode_clique, encode_coloring, write_dimacs
from .problem import Problem, format_clique_answer, format_coloring_answer, parse_problem
from .solvers import create_oracle

logger = logging.getLogger(__name__)

TASKS = ('clique', 'coloring')

Answer = Union[Set[int], Dict[int, int]]


class ReductionPipeline:
    """
    Solve one graph problem through the Oracle.

    Steps run in order: read_problem, encode, ask_oracle, decode,
    format_answer. ``run`` chains them.
    """

    def __init__(
        self,
        task: str,
        oracle,
        cnf_path: str | Path = 'sat.cnf',
        solution_path: str | Path = 'sat.sol',
        strict: bool = True,
    ):
        if task not in TASKS:
            raise ValueError(f"Unknown task {task!r}; expected one of {TASKS}")
        self.task = task
        self.oracle = oracle
        self.cnf_path = Path(cnf_path)
        self.solution_path = Path(solution_path)
        self.strict = strict

        self.problem: Optional[Problem] = None
        self.cnf: Optional[CNF] = None
        self.answer: Optional[Answer] = None

    @classmethod
    def from_config(cls, cfg: DictConfig, oracle=None) -> "ReductionPipeline":
        """
        Build a pipeline from the ``task``, ``paths``, ``oracle`` and
        ``decoding`` config sections.
        """
        paths = cfg.get('paths', {})
        if oracle is None:
            oracle = create_oracle(cfg.get('oracle', {}))
        return cls(
            task=cfg.get('task', 'clique'),
            oracle=oracle,
            cnf_path=paths.get('cnf', 'sat.cnf'),
            solution_path=paths.get('solution', 'sat.sol'),
            strict=cfg.get('decoding', {}).get('strict', True),
        )

    def read_problem(self, stream: TextIO) -> Problem:
        self.problem = parse_problem(stream)
        logger.info(f"Read {self.task} instance: N={self.problem.n} "
                    f"M={self.problem.m} K={self.problem.k}")
        return self.problem

    def encode(self) -> CNF:
        """Encode the current problem and write the DIMACS file."""
        problem = self._require_problem()
        if self.task == 'clique':
            self.cnf = encode_clique(problem.graph, problem.n, problem.k)
        else:
            self.cnf = encode_coloring(problem.graph, problem.n, problem.k)

        write_dimacs(self.cnf, self.cnf_path)
        logger.info(f"Wrote {self.cnf_path}: {self.cnf.num_variables} variables, "
                    f"{self.cnf.num_clauses} clauses")
        return self.cnf

    def ask_oracle(self) -> None:
        if self.solution_path.exists():
            self.solution_path.unlink()
        self.oracle.solve(self.cnf_path, self.solution_path)

    def decode(self) -> Answer:
        """Read the outcome file and decode it for the current problem."""
        problem = self._require_problem()
        outcome = parse_outcome(self.solution_path)
        logger.info(f"Oracle answered {outcome.satisfiable}")

        if self.task == 'clique':
            self.answer = decode_clique(outcome, problem.n, problem.k)
        else:
            self.answer = decode_coloring(outcome, problem.n, problem.k, strict=self.strict)
        return self.answer

    def format_answer(self) -> str:
        problem = self._require_problem()
        if self.answer is None:
            raise RuntimeError("decode() must run before format_answer()")
        if self.task == 'clique':
            return format_clique_answer(self.answer)
        return format_coloring_answer(self.answer, problem.n)

    def solve_problem(self, problem: Problem) -> str:
        """Run encode, Oracle and decode on an already parsed problem."""
        self.problem = problem
        self.cnf = None
        self.answer = None
        self.encode()
        self.ask_oracle()
        self.decode()
        return self.format_answer()

    def run(self, stream: TextIO) -> str:
        """Read a problem from ``stream`` and return the final answer text."""
        return self.solve_problem(self.read_problem(stream))

    def _require_problem(self) -> Problem:
        if self.problem is None:
            raise RuntimeError("No problem loaded; call read_problem() first")
        return self.problem
