"""Tests for the exact rational number type."""

import fractions

import pytest

from linexpr import DivideByZero, ErrorKind, Fraction, InvalidArgument


# ── Construction and reduction ───────────────────────────────────────────

class TestConstruction:
    def test_default_is_zero(self):
        f = Fraction()
        assert (f.numer, f.denom) == (0, 1)

    def test_zero_denominator_rejected(self):
        with pytest.raises(DivideByZero):
            Fraction(1, 0)

    @pytest.mark.parametrize("numer,denom", [(1.5, 2), (1, "2"), (True, 1), (None, 1)])
    def test_non_integer_parts_rejected(self, numer, denom):
        with pytest.raises(InvalidArgument):
            Fraction(numer, denom)

    @pytest.mark.parametrize(
        "numer,denom,expected",
        [
            (2, 4, (1, 2)),
            (1, -2, (-1, 2)),
            (-3, -6, (1, 2)),
            (0, -5, (0, 1)),
            (12, 4, (3, 1)),
        ],
    )
    def test_reduce(self, numer, denom, expected):
        r = Fraction(numer, denom).reduce()
        assert (r.numer, r.denom) == expected

    def test_reduce_returns_new_value(self):
        f = Fraction(2, 4)
        f.reduce()
        assert (f.numer, f.denom) == (2, 4)

    def test_copy_is_equal_but_distinct(self):
        f = Fraction(1, 2)
        g = f.copy()
        assert g == f
        assert g is not f

    def test_parts_are_read_only(self):
        f = Fraction(1, 2)
        with pytest.raises(AttributeError):
            f.numer = 5
        with pytest.raises(AttributeError):
            f.denom = 3
        assert (f.numer, f.denom) == (1, 2)


# ── Arithmetic ───────────────────────────────────────────────────────────

class TestArithmetic:
    def test_add_fractions(self):
        assert Fraction(1, 2).add(Fraction(1, 3)).print() == "5/6"

    def test_add_integer(self):
        assert Fraction(1, 2).add(1).print() == "3/2"

    def test_add_without_simplify(self):
        assert Fraction(1, 4).add(Fraction(1, 4), simplify=False).print() == "2/4"

    def test_add_does_not_mutate(self):
        f = Fraction(1, 2)
        f.add(1)
        assert f.print() == "1/2"

    def test_subtract(self):
        assert Fraction(1, 2).subtract(Fraction(3, 4)).print() == "-1/4"

    def test_multiply_reduces(self):
        assert Fraction(2, 3).multiply(Fraction(3, 4)).print() == "1/2"

    def test_divide(self):
        assert Fraction(1, 2).divide(Fraction(1, 4)).print() == "2"

    @pytest.mark.parametrize("zero", [0, Fraction(0, 3)])
    def test_divide_by_zero(self, zero):
        with pytest.raises(DivideByZero) as exc_info:
            Fraction(1, 2).divide(zero)
        assert exc_info.value.kind is ErrorKind.DIVIDE_BY_ZERO

    def test_divide_by_float_rejected(self):
        with pytest.raises(InvalidArgument):
            Fraction(1, 2).divide(0.5)

    def test_accepts_stdlib_fraction(self):
        assert Fraction(1, 2).add(fractions.Fraction(1, 6)).print() == "2/3"

    def test_abs(self):
        assert Fraction(-3, 4).abs().print() == "3/4"
        assert Fraction(3, -4).abs().print() == "3/4"


# ── Rendering ────────────────────────────────────────────────────────────

class TestRendering:
    @pytest.mark.parametrize(
        "value,plain,tex",
        [
            (Fraction(5, 1), "5", "5"),
            (Fraction(-7, 1), "-7", "-7"),
            (Fraction(1, 2), "1/2", "\\frac{1}{2}"),
            (Fraction(-1, 2), "-1/2", "-\\frac{1}{2}"),
            (Fraction(1, -2), "-1/2", "-\\frac{1}{2}"),
            (Fraction(-3, -1), "3", "3"),
            (Fraction(2, -4), "-2/4", "-\\frac{2}{4}"),
        ],
    )
    def test_print_and_tex(self, value, plain, tex):
        assert value.print() == plain
        assert str(value) == plain
        assert value.tex() == tex


# ── Comparison and Python operators ──────────────────────────────────────

class TestProtocol:
    def test_equality_by_reduced_value(self):
        assert Fraction(2, 4) == Fraction(1, 2)
        assert Fraction(2, 4).equal_to(Fraction(-1, -2))
        assert Fraction(4, 2) == 2
        assert Fraction(1, 2) == fractions.Fraction(1, 2)
        assert Fraction(1, 2) != Fraction(1, 3)

    def test_equal_to_rejects_other_types(self):
        assert Fraction(2, 1).equal_to(2) is False

    def test_hash_matches_equal_values(self):
        assert hash(Fraction(4, 2)) == hash(2)
        assert hash(Fraction(2, 4)) == hash(Fraction(1, 2))
        assert len({Fraction(1, 2), Fraction(2, 4), Fraction(3, 6)}) == 1

    def test_ordering(self):
        assert Fraction(-1, 2) < 0
        assert Fraction(1, -3) < Fraction(1, 4)
        assert Fraction(3, 2) > 1
        assert Fraction(2, 4) <= Fraction(1, 2)

    def test_operators(self):
        assert Fraction(1, 2) + 1 == Fraction(3, 2)
        assert 1 - Fraction(1, 4) == Fraction(3, 4)
        assert Fraction(2, 3) * 3 == 2
        assert 2 / Fraction(1, 3) == 6
        assert -Fraction(1, 2) == Fraction(-1, 2)
        assert abs(Fraction(-2, 4)) == Fraction(1, 2)

    def test_float_and_bool(self):
        assert float(Fraction(1, 4)) == 0.25
        assert not Fraction(0, 3)
        assert Fraction(1, 3)

    def test_float_operand_not_supported(self):
        with pytest.raises(TypeError):
            Fraction(1, 2) + 0.5
