from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, assert_never


@dataclass(frozen=True, slots=True)
class Constant:
    value: int


@dataclass(frozen=True, slots=True)
class Negate:
    operand: Expression


@dataclass(frozen=True, slots=True)
class Exponent:
    base: Expression
    exponent: int


@dataclass(frozen=True, slots=True)
class Addition:
    left: Expression
    right: Expression


@dataclass(frozen=True, slots=True)
class Multiplication:
    left: Expression
    right: Expression


# Closed set of variants. Every consumer matches on all five and ends with
# `assert_never`, so a type checker flags any consumer missing a new member.
Expression: TypeAlias = Constant | Negate | Exponent | Addition | Multiplication


def child_expressions(expr: Expression) -> tuple[Expression, ...]:
    """Direct sub-expressions of `expr`, left to right."""
    match expr:
        case Constant():
            return ()
        case Negate(operand):
            return (operand,)
        case Exponent(base, _):
            return (base,)
        case Addition(left, right) | Multiplication(left, right):
            return (left, right)
        case _:
            assert_never(expr)
