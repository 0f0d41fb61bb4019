"""linexpr — exact linear expressions for the equation-solving toolkit.

Expressions have the form ``constant + Σ(coefficient · variable)`` with
rational coefficients. Parsing and solving live in the calling layer.
"""

import logging

from linexpr.exceptions import AlgebraError, DivideByZero, ErrorKind, InvalidArgument
from linexpr.expressions import Expression, OperandKind
from linexpr.rational import Fraction
from linexpr.terms import Term

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AlgebraError",
    "DivideByZero",
    "ErrorKind",
    "Expression",
    "Fraction",
    "InvalidArgument",
    "OperandKind",
    "Term",
]
