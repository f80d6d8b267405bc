"""
Command line entry point for the graph reductions.

Usage:
    python solve.py < instance.txt
    python solve.py task=coloring < instance.txt
    python solve.py task=coloring paths.input=instance.txt
    python solve.py oracle.backend=external 'oracle.command=[my-solver,"{cnf}","{solution}"]'
"""

import sys
import logging

import hydra
from omegaconf import DictConfig, OmegaConf

from reductions import ReductionError, ReductionPipeline

logger = logging.getLogger(__name__)


def run(cfg: DictConfig, stdin=None, stdout=None) -> int:
    """
    Solve one instance and write the answer.

    Returns the process exit status: 0 on success, 1 when the input, the
    configuration or the Oracle fails.
    """
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    input_path = cfg.get('paths', {}).get('input', None)

    try:
        pipeline = ReductionPipeline.from_config(cfg)
        if input_path is None:
            answer = pipeline.run(stdin)
        else:
            with open(input_path, 'r') as f:
                answer = pipeline.run(f)
    except (ReductionError, ValueError, OSError) as e:
        logger.error(f"Reduction failed: {e}")
        return 1

    stdout.write(answer)
    return 0


@hydra.main(config_path="conf", config_name="config", version_base=None)
def solve(cfg: DictConfig) -> None:
    """Solve one instance and print the answer."""
    logger.debug(f"Configuration:\n{OmegaConf.to_yaml(cfg)}")

    status = run(cfg)
    if status != 0:
        sys.exit(status)


def main():
    solve()


if __name__ == '__main__':
    main()
