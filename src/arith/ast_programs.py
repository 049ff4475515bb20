from typing import Iterable

from .ast_expressions import (
    Addition,
    Constant,
    Exponent,
    Expression,
    Multiplication,
    Negate,
)


def build_sample_expression() -> Expression:
    # Pseudo-code:
    # ((2 + 4) * -1) ^ 2 + 1
    two = Constant(2)
    four = Constant(4)
    negative_one = Negate(Constant(1))
    sum_two_four = Addition(two, four)
    product = Multiplication(sum_two_four, negative_one)
    squared = Exponent(product, 2)
    return Addition(squared, Constant(1))


def build_negation_chain(depth: int, leaf: int = 1) -> Expression:
    # Pseudo-code (depth = 3):
    # -(-(-(leaf)))
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    expr: Expression = Constant(leaf)
    for _ in range(depth):
        expr = Negate(expr)
    return expr


def build_sum_chain(values: Iterable[int]) -> Expression:
    # Pseudo-code ([1, 2, 3]):
    # (1 + 2) + 3
    constants = [Constant(value) for value in values]
    if not constants:
        raise ValueError("at least one value is required")

    expr: Expression = constants[0]
    for constant in constants[1:]:
        expr = Addition(expr, constant)
    return expr
