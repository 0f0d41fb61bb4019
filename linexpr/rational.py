"""Exact rational numbers for the expression engine.

A ``Fraction`` is an integer numerator over a non-zero integer denominator.
Arithmetic never mutates the receiver: every operation returns a new value,
reduced to lowest terms unless ``simplify=False`` is passed.
"""

import fractions
import logging
import numbers
from functools import total_ordering

from linexpr.exceptions import DivideByZero, InvalidArgument
from linexpr.helper import gcd, is_int, lcm

logger = logging.getLogger(__name__)

# TeX template for a non-integer magnitude.
TEX_FRACTION = "\\frac{{{numer}}}{{{denom}}}"


def _parts(value):
    """Return ``(numer, denom)`` for an exact number, or ``None``."""
    if isinstance(value, Fraction):
        return value.numer, value.denom
    if is_int(value):
        return int(value), 1
    if isinstance(value, numbers.Rational) and not isinstance(value, bool):
        return int(value.numerator), int(value.denominator)
    return None


@total_ordering
class Fraction:
    """Exact ``numer/denom`` value.

    ``numer`` and ``denom`` are read-only; arithmetic returns new values, so
    a Fraction can be hashed and shared between expressions.
    """

    __slots__ = ("_numer", "_denom")

    def __init__(self, numer=0, denom=1):
        if not is_int(numer) or not is_int(denom):
            logger.debug(
                "rejecting fraction parts of type %s and %s",
                type(numer).__name__, type(denom).__name__,
            )
            raise InvalidArgument(
                f"Fraction parts must be integers, got "
                f"{type(numer).__name__} and {type(denom).__name__}"
            )
        if denom == 0:
            logger.debug("rejecting zero denominator for numerator %s", numer)
            raise DivideByZero()
        self._numer = int(numer)
        self._denom = int(denom)

    @property
    def numer(self) -> int:
        return self._numer

    @property
    def denom(self) -> int:
        return self._denom

    @classmethod
    def coerce(cls, value) -> "Fraction":
        """Convert an integer or exact rational into a ``Fraction``."""
        parts = _parts(value)
        if parts is None:
            logger.debug("cannot use %r as a rational number", value)
            raise InvalidArgument(
                f"Expected an integer or Fraction, got {type(value).__name__}"
            )
        return cls(*parts)

    def copy(self) -> "Fraction":
        return Fraction(self.numer, self.denom)

    def _signed(self):
        """``(numer, denom)`` with the sign moved onto the numerator."""
        if self.denom < 0:
            return -self.numer, -self.denom
        return self.numer, self.denom

    def reduce(self) -> "Fraction":
        """Lowest terms with a positive denominator."""
        numer, denom = self._signed()
        g = gcd(numer, denom)
        return Fraction(numer // g, denom // g)

    def equal_to(self, other) -> bool:
        if not isinstance(other, Fraction):
            return False
        a = self.reduce()
        b = other.reduce()
        return a.numer == b.numer and a.denom == b.denom

    # ── Arithmetic ───────────────────────────────────────────────────

    def add(self, f, simplify: bool = True) -> "Fraction":
        other = Fraction.coerce(f)
        a, b = other.numer, other.denom

        if self.denom == b:
            result = Fraction(self.numer + a, b)
        else:
            m = lcm(self.denom, b)
            result = Fraction(self.numer * (m // self.denom) + a * (m // b), m)

        return result.reduce() if simplify else result

    def subtract(self, f, simplify: bool = True) -> "Fraction":
        return self.add(Fraction.coerce(f).multiply(-1, simplify=False), simplify)

    def multiply(self, f, simplify: bool = True) -> "Fraction":
        other = Fraction.coerce(f)
        result = Fraction(self.numer * other.numer, self.denom * other.denom)
        return result.reduce() if simplify else result

    def divide(self, f, simplify: bool = True) -> "Fraction":
        other = Fraction.coerce(f)
        if other.numer == 0:
            logger.debug("rejecting division of %s by zero", self.print())
            raise DivideByZero()
        return self.multiply(Fraction(other.denom, other.numer), simplify)

    def abs(self) -> "Fraction":
        return Fraction(abs(self.numer), abs(self.denom))

    # ── Rendering ────────────────────────────────────────────────────

    def print(self) -> str:
        numer, denom = self._signed()
        if denom == 1:
            return str(numer)
        return f"{numer}/{denom}"

    def tex(self) -> str:
        numer, denom = self._signed()
        if denom == 1:
            return str(numer)
        sign = "-" if numer < 0 else ""
        return sign + TEX_FRACTION.format(numer=abs(numer), denom=denom)

    def __str__(self):
        return self.print()

    def __repr__(self):
        return f"Fraction({self.numer}, {self.denom})"

    # ── Python number protocol ───────────────────────────────────────

    def __eq__(self, other):
        parts = _parts(other)
        if parts is None:
            return NotImplemented
        a, b = parts
        return self.numer * b == a * self.denom

    def __lt__(self, other):
        parts = _parts(other)
        if parts is None:
            return NotImplemented
        this = self.reduce()
        that = Fraction(*parts).reduce()
        return this.numer * that.denom < that.numer * this.denom

    def __hash__(self):
        reduced = self.reduce()
        return hash(fractions.Fraction(reduced.numer, reduced.denom))

    def __bool__(self):
        return self.numer != 0

    def __float__(self):
        return self.numer / self.denom

    def __abs__(self):
        return self.abs().reduce()

    def __neg__(self):
        return self.multiply(-1)

    def __add__(self, other):
        if _parts(other) is None:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if _parts(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if _parts(other) is None:
            return NotImplemented
        return Fraction.coerce(other).subtract(self)

    def __mul__(self, other):
        if _parts(other) is None:
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if _parts(other) is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if _parts(other) is None:
            return NotImplemented
        return Fraction.coerce(other).divide(self)
