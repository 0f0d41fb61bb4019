"""Pydantic models for sending expressions over the API or into storage.

Only string variables are serialisable: other tokens would not survive the
round trip as distinct variables.
"""

import logging

from pydantic import BaseModel, ValidationError, field_validator

from linexpr.exceptions import InvalidArgument
from linexpr.expressions import Expression
from linexpr.rational import Fraction
from linexpr.terms import Term

logger = logging.getLogger(__name__)


class FractionModel(BaseModel):
    numer: int
    denom: int = 1

    @field_validator("denom")
    @classmethod
    def denom_non_zero(cls, v: int) -> int:
        if v == 0:
            raise ValueError("denominator must be non-zero")
        return v

    @classmethod
    def from_fraction(cls, f: Fraction) -> "FractionModel":
        reduced = f.reduce()
        return cls(numer=reduced.numer, denom=reduced.denom)

    def to_fraction(self) -> Fraction:
        return Fraction(self.numer, self.denom)


class TermModel(BaseModel):
    variable: str
    coefficient: FractionModel = FractionModel(numer=1)


class ExpressionModel(BaseModel):
    constant: FractionModel = FractionModel(numer=0)
    terms: list[TermModel] = []

    @classmethod
    def from_expression(cls, expr: Expression) -> "ExpressionModel":
        for t in expr.terms:
            if not isinstance(t.variable, str):
                logger.debug("refusing to serialise variable %r", t.variable)
                raise InvalidArgument(
                    f"Only string variables can be serialised, got {t.variable!r}"
                )
        return cls(
            constant=FractionModel.from_fraction(expr.constant),
            terms=[
                TermModel(
                    variable=t.variable,
                    coefficient=FractionModel.from_fraction(t.coefficient),
                )
                for t in expr.terms
            ],
        )

    def to_expression(self) -> Expression:
        """Rebuild through ``add`` so repeated or zero terms are merged away."""
        result = Expression().add(self.constant.to_fraction())
        for t in self.terms:
            result = result.add(Term(t.variable, t.coefficient.to_fraction()))
        return result


def dump_expression(expr: Expression) -> dict:
    return ExpressionModel.from_expression(expr).model_dump()


def load_expression(data: dict) -> Expression:
    try:
        model = ExpressionModel.model_validate(data)
    except ValidationError as e:
        logger.debug("invalid expression payload %r", data)
        raise InvalidArgument(f"Invalid expression payload: {e}") from e
    return model.to_expression()
