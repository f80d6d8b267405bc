"""
Exceptions raised while decoding Oracle answers.

An unsatisfiable instance is a valid "no" answer and is never reported
through these exceptions.
"""


class ReductionError(Exception):
    """Base class for reduction failures."""


class MalformedAssignment(ReductionError):
    """Raised when a solver outcome does not fit the encoded formula."""

    def __init__(self, reason: str, line: int = -1):
        self.reason = reason
        self.line = line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.line >= 0:
            return f"Malformed assignment at line {self.line}: {self.reason}"
        return f"Malformed assignment: {self.reason}"


class InconsistentDecoding(ReductionError):
    """Raised when a satisfying assignment decodes to an impossible answer."""

    def __init__(self, reason: str, vertex: int = -1):
        self.reason = reason
        self.vertex = vertex
        msg = f"Inconsistent decoding: {reason}"
        if vertex >= 0:
            msg += f" (vertex {vertex})"
        super().__init__(msg)


class OracleError(ReductionError):
    """Raised when the Oracle fails to produce an outcome."""

    def __init__(self, message: str):
        super().__init__(message)
