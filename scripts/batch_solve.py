"""
Solve every problem instance in a directory.

Each instance file holds ``N M K`` and M edge lines. Results are written to a
JSON file mapping the file name to its answer.
"""

import json
import logging
import tempfile
from pathlib import Path
from typing import Dict, Optional

from tqdm import tqdm

from reductions import ReductionError, ReductionPipeline, create_oracle, parse_problem

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def solve_directory(
    input_dir: str,
    output_file: str,
    task: str = "clique",
    pattern: str = "*.txt",
    oracle_cfg: Optional[dict] = None,
    strict: bool = True,
    max_instances: Optional[int] = None
) -> Dict[str, dict]:
    """
    Solve all instances matching ``pattern`` below ``input_dir``.

    Args:
        input_dir: Directory containing problem files
        output_file: Output JSON file for results
        task: "clique" or "coloring"
        pattern: Glob for problem files
        oracle_cfg: Oracle config section (defaults to pycosat)
        strict: Strict coloring decoding
        max_instances: Maximum number of instances to process

    Returns:
        Dictionary mapping file name to {"satisfiable", "answer"} or {"error"}
    """
    files = sorted(Path(input_dir).rglob(pattern))
    if max_instances:
        files = files[:max_instances]

    logger.info(f"Processing {len(files)} {task} instances from {input_dir}")

    oracle = create_oracle(oracle_cfg or {'backend': 'pycosat'})
    results = {}
    failed = 0

    with tempfile.TemporaryDirectory() as workdir:
        pipeline = ReductionPipeline(
            task=task,
            oracle=oracle,
            cnf_path=Path(workdir) / "sat.cnf",
            solution_path=Path(workdir) / "sat.sol",
            strict=strict,
        )

        for problem_file in tqdm(files, desc=f"Solving {task}"):
            try:
                with open(problem_file, 'r') as f:
                    problem = parse_problem(f)
                text = pipeline.solve_problem(problem)
            except (ReductionError, ValueError) as e:
                failed += 1
                results[problem_file.name] = {"error": str(e)}
                logger.error(f"Error processing {problem_file}: {e}")
                continue

            lines = text.split('\n')
            results[problem_file.name] = {
                "satisfiable": lines[0] == "True",
                "answer": lines[1] if lines[0] == "True" else None,
            }
            logger.debug(f"{problem_file.name}: {lines[0]}")

    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(results, f, indent=2)

    logger.info(f"Solved {len(results) - failed} instances, {failed} failed")
    logger.info(f"Results saved to {output_file}")

    return results


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Solve graph problem instances through SAT")
    parser.add_argument("--input-dir", required=True, help="Directory of problem files")
    parser.add_argument("--output", default="results.json", help="Output results file")
    parser.add_argument("--task", default="clique", choices=["clique", "coloring"])
    parser.add_argument("--pattern", default="*.txt", help="Glob for problem files")
    parser.add_argument("--oracle-command", nargs="+", default=None,
                        help="External solver command; {cnf} and {solution} are substituted")
    parser.add_argument("--timeout", type=int, default=300, help="External solver timeout")
    parser.add_argument("--lenient", action="store_true",
                        help="Report incomplete colorings as False instead of failing")
    parser.add_argument("--max-instances", type=int, default=None, help="Max instances to process")

    args = parser.parse_args()

    if args.oracle_command:
        oracle_cfg = {'backend': 'external', 'command': args.oracle_command, 'timeout': args.timeout}
    else:
        oracle_cfg = {'backend': 'pycosat'}

    solve_directory(
        args.input_dir,
        args.output,
        args.task,
        args.pattern,
        oracle_cfg,
        not args.lenient,
        args.max_instances
    )
