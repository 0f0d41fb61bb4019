"""Error kinds raised by the expression engine.

Both failures derive from ``ValueError`` so callers that already report
bad user input with ``except ValueError`` keep working.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    INVALID_ARGUMENT = "InvalidArgument"
    DIVIDE_BY_ZERO = "DivideByZero"


class AlgebraError(ValueError):
    """Base class for engine failures. ``kind`` names the failure."""

    kind: ErrorKind

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.kind.value)


class InvalidArgument(AlgebraError):
    """An operand of a shape the operation does not support."""

    kind = ErrorKind.INVALID_ARGUMENT


class DivideByZero(AlgebraError, ZeroDivisionError):
    """A zero-valued divisor or denominator."""

    kind = ErrorKind.DIVIDE_BY_ZERO
