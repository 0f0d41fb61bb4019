"""A single ``coefficient · variable`` monomial."""

import logging

from linexpr.exceptions import InvalidArgument
from linexpr.rational import Fraction

logger = logging.getLogger(__name__)


class Term:
    """One variable scaled by a rational coefficient.

    The variable is an opaque token compared with ``==``; in practice a
    name such as ``"x"``. Constants never live on a Term.
    """

    def __init__(self, variable, coefficient=1):
        if variable is None:
            logger.debug("rejecting a term without a variable")
            raise InvalidArgument("A term needs a variable.")
        self.variable = variable
        self.coefficient = Fraction.coerce(coefficient)

    def copy(self) -> "Term":
        return Term(self.variable, self.coefficient.copy())

    def has_the_same_variable_as(self, other: "Term") -> bool:
        return self.variable == other.variable

    def _magnitude(self):
        """Reduced absolute coefficient, or ``None`` when it is exactly 1."""
        coefficient = self.coefficient.reduce().abs()
        if coefficient.numer == 1 and coefficient.denom == 1:
            return None
        return coefficient

    def print(self) -> str:
        # The sign is rendered by the enclosing expression.
        coefficient = self._magnitude()
        if coefficient is None:
            return str(self.variable)
        return coefficient.print() + str(self.variable)

    def tex(self) -> str:
        coefficient = self._magnitude()
        if coefficient is None:
            return str(self.variable)
        return coefficient.tex() + str(self.variable)

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.has_the_same_variable_as(other) and self.coefficient == other.coefficient

    __hash__ = None

    def __str__(self):
        return self.print()

    def __repr__(self):
        return f"Term({self.variable!r}, {self.coefficient!r})"
