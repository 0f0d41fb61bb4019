"""Conversion between linexpr values and SymPy expressions.

The solving layer manipulates equations with SymPy; these helpers move a
linear expression across that boundary without losing exactness.
"""

import logging

import sympy

from linexpr.exceptions import InvalidArgument
from linexpr.expressions import Expression, OperandKind, _classify
from linexpr.rational import Fraction
from linexpr.terms import Term

logger = logging.getLogger(__name__)


def to_sympy(value) -> sympy.Expr:
    """Return the SymPy equivalent of a Fraction, Term, Expression or int."""
    kind, operand = _classify(value)

    if kind is OperandKind.NUMBER:
        return sympy.Rational(operand.numer, operand.denom)
    if kind is OperandKind.TERM:
        if not isinstance(operand.variable, str):
            logger.debug("refusing non-string variable %r", operand.variable)
            raise InvalidArgument(
                f"SymPy symbols need string variables, got {operand.variable!r}"
            )
        return to_sympy(operand.coefficient) * sympy.Symbol(operand.variable)
    return sympy.Add(
        *[to_sympy(t) for t in operand.terms],
        to_sympy(operand.constant),
    )


def _to_fraction(number) -> Fraction:
    if not number.is_Rational:
        logger.debug("refusing non-rational coefficient %s", number)
        raise InvalidArgument(f"Coefficient {number} is not an exact rational.")
    return Fraction(int(number.p), int(number.q))


def from_sympy(expr) -> Expression:
    """Build an Expression from a linear SymPy expression.

    The expression is expanded first, so ``2*(x + 1)`` is accepted. Terms
    are ordered by SymPy's canonical symbol order and variables are the
    symbol names. Strings are refused: text parsing belongs to the caller.
    """
    if isinstance(expr, str):
        logger.debug("refusing to parse string %r", expr)
        raise InvalidArgument("Strings are not parsed; pass a SymPy expression.")
    if isinstance(expr, (Expression, Term, Fraction)):
        return Expression().add(expr)

    try:
        expr = sympy.sympify(expr, strict=True)
    except sympy.SympifyError as e:
        logger.debug("cannot sympify %r", expr)
        raise InvalidArgument(f"Cannot convert {expr!r} to a SymPy expression.") from e

    expr = sympy.expand(expr)
    gens = sorted(expr.free_symbols, key=sympy.default_sort_key)

    if not gens:
        return Expression().add(_to_fraction(expr))

    try:
        poly = sympy.Poly(expr, *gens)
    except sympy.PolynomialError as e:
        logger.debug("refusing non-polynomial expression %s", expr)
        raise InvalidArgument(f"{expr} is not a linear expression.") from e

    if poly.total_degree() > 1:
        logger.debug("refusing expression of degree %d: %s", poly.total_degree(), expr)
        raise InvalidArgument(f"{expr} is not a linear expression.")

    result = Expression().add(_to_fraction(poly.coeff_monomial(1)))
    for sym in gens:
        result = result.add(Term(sym.name, _to_fraction(poly.coeff_monomial(sym))))

    return result
