"""Linear expressions: a rational constant plus a sum of terms.

The constant is kept on the Expression itself; everything else is held in
an ordered list of ``Term`` objects with at most one term per variable and
no zero coefficients. Every public operation works on a copy, so an
Expression behaves as a value.
"""

import logging
from enum import Enum

from linexpr.exceptions import DivideByZero, InvalidArgument
from linexpr.rational import Fraction, _parts
from linexpr.terms import Term

logger = logging.getLogger(__name__)


class OperandKind(Enum):
    NUMBER = "number"
    TERM = "term"
    EXPRESSION = "expression"


def _classify(a):
    """Return ``(kind, operand)`` with numbers converted to ``Fraction``."""
    if isinstance(a, Expression):
        return OperandKind.EXPRESSION, a
    if isinstance(a, Term):
        return OperandKind.TERM, a
    if _parts(a) is not None:
        return OperandKind.NUMBER, Fraction.coerce(a)
    logger.debug("unsupported operand of type %s", type(a).__name__)
    raise InvalidArgument(f"Unsupported operand of type {type(a).__name__}")


def _number(a) -> Fraction:
    kind, operand = _classify(a)
    if kind is not OperandKind.NUMBER:
        logger.debug("expected a number, got %s operand", kind.value)
        raise InvalidArgument(f"Expected an integer or Fraction, got a {kind.value}")
    return operand


class Expression:

    def __init__(self, variable=None):
        self.constant = Fraction(0, 1)
        self.terms = [Term(variable)] if variable is not None else []

    def copy(self) -> "Expression":
        copy = Expression()
        copy.constant = self.constant.copy()
        copy.terms = [t.copy() for t in self.terms]
        return copy

    # ── Arithmetic ───────────────────────────────────────────────────

    def add(self, a) -> "Expression":
        kind, operand = _classify(a)
        copy = self.copy()

        if kind is OperandKind.TERM:
            exp = Expression(operand.variable).multiply(operand.coefficient)
            return copy.add(exp)
        elif kind is OperandKind.EXPRESSION:
            copy.constant = copy.constant.add(operand.constant)
            new_terms = operand.copy().terms

            for this_term in copy.terms:
                for j, that_term in enumerate(new_terms):
                    if this_term.has_the_same_variable_as(that_term):
                        this_term.coefficient = this_term.coefficient.add(that_term.coefficient)
                        del new_terms[j]
                        break

            copy.terms.extend(new_terms)
        else:
            copy.constant = copy.constant.add(operand)

        copy._remove_terms_with_coefficient_zero()
        return copy

    def subtract(self, a) -> "Expression":
        kind, operand = _classify(a)

        if kind is OperandKind.TERM:
            inverse = Expression(operand.variable).multiply(operand.coefficient).multiply(-1)
        elif kind is OperandKind.EXPRESSION:
            inverse = operand.copy()
            inverse.constant = inverse.constant.multiply(-1)
            for t in inverse.terms:
                t.coefficient = t.coefficient.multiply(-1)
        else:
            inverse = operand.multiply(-1)

        return self.add(inverse)

    def multiply(self, a) -> "Expression":
        factor = _number(a)
        copy = self.copy()

        copy.constant = copy.constant.multiply(factor)
        for t in copy.terms:
            t.coefficient = t.coefficient.multiply(factor)

        copy._remove_terms_with_coefficient_zero()
        return copy

    def divide(self, a) -> "Expression":
        divisor = _number(a)
        if divisor.reduce().numer == 0:
            logger.debug("rejecting division of %s by zero", self.print())
            raise DivideByZero()

        copy = self.copy()

        copy.constant = copy.constant.divide(divisor)
        for t in copy.terms:
            t.coefficient = t.coefficient.divide(divisor)

        return copy

    # ── Substitution ─────────────────────────────────────────────────

    def evaluate_at(self, values):
        """Substitute numbers for variables.

        ``values`` maps variables to integers or Fractions. Keys that match
        no term are ignored. Returns a ``Fraction`` once every term has been
        substituted away, otherwise a new ``Expression``.
        """
        copy = self.copy()

        for term in self.terms:
            for variable, value in values.items():
                if term.variable == variable:
                    contribution = term.coefficient.multiply(_number(value))
                    copy.constant = copy.constant.add(contribution)
                    copy._remove_terms_with_var(variable)

        unused = [v for v in values if not self._has_variable(v)]
        if unused:
            logger.debug("substitution keys match no term: %r", unused)

        if not copy.terms:
            return copy.constant.reduce()

        return copy

    # ── Canonical form ───────────────────────────────────────────────

    def _remove_terms_with_var(self, variable) -> "Expression":
        self.terms = [t for t in self.terms if t.variable != variable]
        return self

    def _remove_terms_with_coefficient_zero(self) -> "Expression":
        self.terms = [t for t in self.terms if t.coefficient.reduce().numer != 0]
        return self

    def _has_variable(self, variable) -> bool:
        return any(variable == t.variable for t in self.terms)

    # ── Rendering ────────────────────────────────────────────────────

    def _render(self, term_str, number_str) -> str:
        if not self.terms:
            return number_str(self.constant.reduce())

        first = self.terms[0].coefficient.reduce()
        s = ("-" if first.numer < 0 else "") + term_str(self.terms[0])

        for t in self.terms[1:]:
            coefficient = t.coefficient.reduce()
            s += (" - " if coefficient.numer < 0 else " + ") + term_str(t)

        constant = self.constant.reduce()
        if constant.numer:
            s += (" - " if constant.numer < 0 else " + ") + number_str(constant.abs())

        return s

    def print(self) -> str:
        return self._render(Term.print, Fraction.print)

    def tex(self) -> str:
        return self._render(Term.tex, Fraction.tex)

    def __str__(self):
        return self.print()

    def __repr__(self):
        return f"Expression({self.print()!r})"

    # ── Python operators ─────────────────────────────────────────────

    def __eq__(self, other):
        if isinstance(other, Expression):
            if self.constant != other.constant or len(self.terms) != len(other.terms):
                return False
            for t in self.terms:
                match = [u for u in other.terms if t.has_the_same_variable_as(u)]
                if len(match) != 1 or match[0].coefficient != t.coefficient:
                    return False
            return True
        if _parts(other) is not None:
            return not self.terms and self.constant == other
        return NotImplemented

    __hash__ = None

    def __add__(self, other):
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        return self.subtract(other)

    def __rsub__(self, other):
        return self.multiply(-1).add(other)

    def __mul__(self, other):
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        return self.divide(other)

    def __neg__(self):
        return self.multiply(-1)
