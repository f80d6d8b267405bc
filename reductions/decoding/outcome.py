"""
Solver outcome files.

The Oracle answers with:
- line 1: ``True`` or ``False`` (case-insensitive)
- line 2 (True only): number of variables
- line 3 (True only): that many space-separated signed integers
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ..errors import MalformedAssignment


@dataclass
class SolverOutcome:
    """
    Oracle verdict for one formula.

    Attributes:
        satisfiable: False when the Oracle proved the formula unsatisfiable
        assignment: One signed integer per variable, positive meaning true.
                    Empty when unsatisfiable.
    """
    satisfiable: bool
    assignment: List[int] = field(default_factory=list)

    @classmethod
    def unsatisfiable(cls) -> "SolverOutcome":
        return cls(satisfiable=False)

    @property
    def num_variables(self) -> int:
        return len(self.assignment)

    def true_variables(self) -> List[int]:
        """Return the variables set to true, in assignment order."""
        return [lit for lit in self.assignment if lit > 0]


def parse_outcome_string(content: str) -> SolverOutcome:
    """
    Parse the text of a solver outcome file.

    Raises:
        MalformedAssignment: On an unknown verdict, a missing line, a
            non-integer token, or a token count that differs from the
            declared variable count
    """
    lines = [line.strip() for line in content.strip().split('\n')]
    if not lines or not lines[0]:
        raise MalformedAssignment("empty solver outcome", line=1)

    verdict = lines[0].lower()
    if verdict == 'false':
        return SolverOutcome.unsatisfiable()
    if verdict != 'true':
        raise MalformedAssignment(f"expected True or False, got {lines[0]!r}", line=1)

    if len(lines) < 2:
        raise MalformedAssignment("missing variable count", line=2)
    try:
        declared = int(lines[1])
    except ValueError as e:
        raise MalformedAssignment(f"invalid variable count {lines[1]!r}", line=2) from e

    tokens = lines[2].split() if len(lines) > 2 else []
    try:
        assignment = [int(token) for token in tokens]
    except ValueError as e:
        raise MalformedAssignment(f"invalid literal in {lines[2]!r}", line=3) from e

    if len(assignment) != declared:
        raise MalformedAssignment(
            f"declared {declared} variables but found {len(assignment)} values", line=3
        )

    return SolverOutcome(satisfiable=True, assignment=assignment)


def parse_outcome(filepath: str | Path) -> SolverOutcome:
    """
    Parse a solver outcome file.

    Raises:
        FileNotFoundError: If the file does not exist
        MalformedAssignment: If the file content is invalid
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Solution file not found: {filepath}")

    with open(filepath, 'r') as f:
        return parse_outcome_string(f.read())


def format_outcome(outcome: SolverOutcome) -> str:
    """Render an outcome in the solver outcome file format."""
    if not outcome.satisfiable:
        return "False\n"
    values = ' '.join(str(lit) for lit in outcome.assignment)
    return f"True\n{outcome.num_variables}\n{values}\n"


def write_outcome(outcome: SolverOutcome, filepath: str | Path) -> None:
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        f.write(format_outcome(outcome))
