"""Decimal (NumPy) view of linear expressions.

Feeds the toolkit's numerical solving mode: coefficient rows and
``A x = b`` systems as float64 arrays, float substitution and decimal
rendering.
"""

import logging

import numpy as np

from linexpr.exceptions import InvalidArgument
from linexpr.expressions import Expression

logger = logging.getLogger(__name__)

DEFAULT_MAX_DECIMALS = 10


# ── Numeric formatting helpers ──────────────────────────────────────────

def _fmt_num(value: float, max_decimals: int = DEFAULT_MAX_DECIMALS) -> str:
    """Format a float into a clean decimal string.

    - Removes trailing zeros after the decimal point.
    - Uses up to *max_decimals* digits of precision.
    - Returns integers without a decimal point (e.g. ``7`` not ``7.0``).
    """
    if abs(value - round(value)) < 1e-12:
        return str(int(round(value)))
    formatted = f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")
    return formatted


def format_decimal(expression: Expression, max_decimals: int = DEFAULT_MAX_DECIMALS) -> str:
    """Render like ``Expression.print`` but with decimal coefficients.

    A non-zero value too small for *max_decimals* keeps its exact
    ``n/d`` form instead of rounding to ``0``.
    """
    def _number(f):
        s = _fmt_num(float(f), max_decimals)
        if s in ("0", "-0") and f.numer != 0:
            return f.reduce().print()
        return s

    def _term(t):
        magnitude = t.coefficient.reduce().abs()
        if magnitude == 1:
            return str(t.variable)
        return _number(magnitude) + str(t.variable)

    return expression._render(_term, _number)


# ── Coefficient extraction ──────────────────────────────────────────────

def _check_variables(expression: Expression, variables: list) -> None:
    extra = [t.variable for t in expression.terms if t.variable not in variables]
    if extra:
        logger.debug("expression %s has variables outside %r", expression, variables)
        raise InvalidArgument(
            f"Expression {expression} uses variable(s) not listed: "
            f"{', '.join(str(v) for v in extra)}"
        )


def coefficient_row(expression: Expression, variables: list) -> np.ndarray:
    """Coefficients of *variables* in order; 0.0 for absent variables."""
    row = np.zeros(len(variables), dtype=np.float64)
    for j, var in enumerate(variables):
        for t in expression.terms:
            if t.variable == var:
                row[j] = float(t.coefficient)
    return row


def linear_system(expressions: list, variables: list) -> tuple[np.ndarray, np.ndarray]:
    """Build ``A`` and ``b`` for the system ``expression_i = 0``.

    Each expression ``Σ a_ij·x_j + c_i`` contributes the row ``a_i`` to the
    coefficient matrix and ``-c_i`` to the constant vector.
    """
    n_eq = len(expressions)
    n_var = len(variables)
    A = np.zeros((n_eq, n_var), dtype=np.float64)
    b = np.zeros(n_eq, dtype=np.float64)

    for i, expr in enumerate(expressions):
        _check_variables(expr, variables)
        A[i, :] = coefficient_row(expr, variables)
        b[i] = -float(expr.constant)

    return A, b


def evaluate_numeric(expression: Expression, values: dict) -> float:
    """Substitute float values for every variable of *expression*."""
    missing = [t.variable for t in expression.terms if t.variable not in values]
    if missing:
        logger.debug("no value supplied for %r", missing)
        raise InvalidArgument(
            f"Missing value(s) for variable(s): {', '.join(str(v) for v in missing)}."
        )

    total = np.float64(float(expression.constant))
    for t in expression.terms:
        total += np.float64(float(t.coefficient)) * np.float64(values[t.variable])
    return float(total)
