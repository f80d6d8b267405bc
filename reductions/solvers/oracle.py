"""
Oracle interfaces.

The Oracle reads a DIMACS file and writes a solver outcome file. Two backends
are provided:
- PycosatOracle: in-process, through the pycosat (PicoSAT) bindings
- ExternalOracle: any executable that follows the file protocol
"""

import subprocess
import logging
from pathlib import Path
from typing import List, Optional, Sequence

import pycosat

from ..decoding.outcome import SolverOutcome, write_outcome
from ..encoding.cnf import parse_dimacs
from ..errors import OracleError

logger = logging.getLogger(__name__)


class PycosatOracle:
    """Answer Oracle questions with pycosat."""

    name = 'pycosat'

    def __init__(self, prop_limit: int = 0):
        self.prop_limit = prop_limit

    def solve(self, cnf_file: str | Path, solution_file: str | Path) -> None:
        """
        Solve ``cnf_file`` and write the outcome to ``solution_file``.

        Raises:
            FileNotFoundError: If the CNF file does not exist
            OracleError: If pycosat gives up before reaching a verdict
        """
        cnf = parse_dimacs(cnf_file)

        if cnf.has_empty_clause():
            logger.info("Formula contains an empty clause; answering False")
            write_outcome(SolverOutcome.unsatisfiable(), solution_file)
            return

        clauses = [list(clause) for clause in cnf.clauses]
        result = pycosat.solve(clauses, vars=cnf.num_variables, prop_limit=self.prop_limit)

        if result == 'UNSAT':
            outcome = SolverOutcome.unsatisfiable()
        elif result == 'UNKNOWN':
            raise OracleError(f"pycosat hit the propagation limit ({self.prop_limit}) on {cnf_file}")
        else:
            outcome = SolverOutcome(satisfiable=True, assignment=list(result))

        logger.info(f"pycosat answered {outcome.satisfiable} for {cnf.num_variables} variables, "
                    f"{cnf.num_clauses} clauses")
        write_outcome(outcome, solution_file)


class ExternalOracle:
    """
    Answer Oracle questions with an external executable.

    ``command`` is an argument list; ``{cnf}`` and ``{solution}`` inside any
    argument are replaced by the file paths.
    """

    name = 'external'

    def __init__(self, command: Sequence[str], timeout: Optional[int] = 300):
        if not command:
            raise ValueError("External oracle needs a command")
        self.command = list(command)
        self.timeout = timeout

    def build_command(self, cnf_file: str | Path, solution_file: str | Path) -> List[str]:
        return [
            str(arg).format(cnf=str(cnf_file), solution=str(solution_file))
            for arg in self.command
        ]

    def solve(self, cnf_file: str | Path, solution_file: str | Path) -> None:
        """
        Run the external solver on ``cnf_file``.

        Raises:
            OracleError: If the solver is missing, times out, exits with a
                non-zero status, or leaves no solution file
        """
        cnf_file = Path(cnf_file)
        solution_file = Path(solution_file)
        if not cnf_file.exists():
            raise FileNotFoundError(f"CNF file not found: {cnf_file}")

        cmd = self.build_command(cnf_file, solution_file)
        logger.debug(f"Running oracle: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired as e:
            raise OracleError(f"Oracle timed out after {self.timeout}s for {cnf_file}") from e
        except FileNotFoundError as e:
            raise OracleError(f"Oracle not found at '{cmd[0]}'") from e

        if result.stderr:
            logger.debug(f"stderr: {result.stderr}")

        if result.returncode != 0:
            logger.warning(f"Oracle failed with return code {result.returncode}")
            raise OracleError(f"Oracle exited with status {result.returncode}")

        if not solution_file.exists():
            raise OracleError(f"Oracle did not write {solution_file}")


def create_oracle(cfg) -> PycosatOracle | ExternalOracle:
    """
    Build the Oracle named by an ``oracle`` config section.

    Args:
        cfg: Mapping with ``backend`` and, for the external backend,
             ``command`` and ``timeout``

    Raises:
        ValueError: On an unknown backend or a missing external command
    """
    backend = cfg.get('backend', 'pycosat')

    if backend == 'pycosat':
        return PycosatOracle(prop_limit=cfg.get('prop_limit', 0))
    if backend == 'external':
        command = cfg.get('command', None)
        if command is None:
            raise ValueError("oracle.command must be set for the external backend")
        if isinstance(command, str):
            command = command.split()
        return ExternalOracle(list(command), timeout=cfg.get('timeout', 300))

    raise ValueError(f"Unknown oracle backend: {backend}")


def is_oracle_available(command: Sequence[str]) -> bool:
    """
    Check if an external solver can be launched.

    Args:
        command: Argument list; only the executable is probed

    Returns:
        True if the executable starts
    """
    try:
        subprocess.run(
            [command[0], '--help'],
            capture_output=True,
            timeout=10
        )
        return True
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return False
