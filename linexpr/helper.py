"""Small integer helpers shared by the number types."""

import math
import numbers


def is_int(value) -> bool:
    """True for integers of any integral type, but not for ``bool``."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def gcd(a: int, b: int) -> int:
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // math.gcd(a, b)
