"""
Oracle interfaces.

Provides in-process (pycosat) and external SAT solver backends that follow
the file-based request/response protocol.
"""

from .oracle import (
    PycosatOracle,
    ExternalOracle,
    create_oracle,
    is_oracle_available,
)

__all__ = [
    'PycosatOracle',
    'ExternalOracle',
    'create_oracle',
    'is_oracle_available',
]
