"""
Error types raised by the simulator.

Configuration problems (bad gate labels, malformed index specifications,
register size mismatches) are ``ValueError`` subclasses so callers can
catch them the usual way. Complex division by zero raises the builtin
``ZeroDivisionError``.
"""

__all__ = [
    "QuliteError",
    "CircuitConfigError",
    "IndexSpecError",
    "RegisterIndexError",
    "GateDispatchError",
]


class QuliteError(Exception):
    """Base class for all simulator errors."""


class CircuitConfigError(QuliteError, ValueError):
    """A gate or circuit was configured with the wrong shape of arguments."""


class IndexSpecError(CircuitConfigError):
    """An index specification could not be parsed."""


class RegisterIndexError(QuliteError, IndexError):
    """A queued gate addressed a qubit outside the register."""


class GateDispatchError(QuliteError, RuntimeError):
    """A gate kind resolved to no known operation."""
