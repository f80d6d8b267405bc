"""
CNF formulas and their DIMACS text form.

Encoders build a ``CNF`` value from clause tuples; the text is produced once,
when the formula is handed to the Oracle.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple
import re

Clause = Tuple[int, ...]

_PROBLEM_LINE = re.compile(r'p\s+cnf\s+(-?\d+)\s+(-?\d+)')


@dataclass
class CNF:
    """
    A CNF formula over variables 1..num_variables.

    Attributes:
        num_variables: Number of variables declared in the header
        num_clauses: Number of clauses, always equal to len(clauses)
        clauses: Clauses as tuples of non-zero signed literals
        comments: Optional comment lines, written as ``c <comment>``
    """
    num_variables: int
    num_clauses: int
    clauses: List[Clause]
    comments: List[str] = field(default_factory=list)

    @classmethod
    def from_clauses(
        cls,
        num_variables: int,
        clauses: List[Clause],
        comments: Optional[List[str]] = None
    ) -> "CNF":
        """Build a formula whose clause count is taken from ``clauses``."""
        return cls(
            num_variables=num_variables,
            num_clauses=len(clauses),
            clauses=list(clauses),
            comments=list(comments or []),
        )

    def has_empty_clause(self) -> bool:
        """An empty clause makes the formula unsatisfiable."""
        return any(len(clause) == 0 for clause in self.clauses)


def format_dimacs(cnf: CNF) -> str:
    """
    Render a formula in DIMACS CNF format.

    Args:
        cnf: Formula to render

    Returns:
        Text with comment lines, the ``p cnf`` header and one clause per line
    """
    lines = [f"c {comment}" for comment in cnf.comments]
    lines.append(f"p cnf {cnf.num_variables} {len(cnf.clauses)}")
    for clause in cnf.clauses:
        lines.append(' '.join([str(lit) for lit in clause] + ['0']))
    return '\n'.join(lines) + '\n'


def write_dimacs(cnf: CNF, filepath: str | Path) -> None:
    """
    Write a formula to a DIMACS file.

    Args:
        cnf: Formula to write
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        f.write(format_dimacs(cnf))


def parse_dimacs_string(content: str) -> CNF:
    """
    Parse a DIMACS CNF format string.

    - Lines starting with 'c' are comments
    - Problem line: 'p cnf <num_vars> <num_clauses>'
    - Clause lines: space-separated literals ending with 0; a lone 0 is the
      empty clause

    Args:
        content: String containing DIMACS CNF format data

    Returns:
        CNF object containing the parsed formula

    Raises:
        ValueError: If the problem line is missing or malformed, or a literal
            is not an integer
    """
    comments = []
    num_variables = None
    clauses = []
    current_clause = []

    for line_num, line in enumerate(content.split('\n'), 1):
        line = line.strip()

        if not line:
            continue

        if line.startswith('c'):
            comments.append(line[1:].strip())
            continue

        if line.startswith('p'):
            match = _PROBLEM_LINE.match(line)
            if not match:
                raise ValueError(f"Invalid problem line at line {line_num}: {line}")
            num_variables = int(match.group(1))
            continue

        try:
            literals = [int(x) for x in line.split()]
        except ValueError as e:
            raise ValueError(f"Invalid literal at line {line_num}: {line}") from e

        for lit in literals:
            if lit == 0:
                clauses.append(tuple(current_clause))
                current_clause = []
            else:
                current_clause.append(lit)

    # Some files omit the terminating 0 on the last clause
    if current_clause:
        clauses.append(tuple(current_clause))

    if num_variables is None:
        raise ValueError("Missing problem line (p cnf ...)")

    return CNF.from_clauses(num_variables, clauses, comments)


def parse_dimacs(filepath: str | Path) -> CNF:
    """
    Parse a DIMACS CNF format file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file format is invalid
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"CNF file not found: {filepath}")

    with open(filepath, 'r') as f:
        return parse_dimacs_string(f.read())
