from dataclasses import FrozenInstanceError

import pytest

from arith.ast_expressions import (
    Addition,
    Constant,
    Exponent,
    Multiplication,
    Negate,
    child_expressions,
)
from arith.ast_programs import (
    build_negation_chain,
    build_sample_expression,
    build_sum_chain,
)


# ===== Structural Equality =====
def test_independently_built_trees_are_equal() -> None:
    first = build_sample_expression()
    second = Addition(
        Exponent(
            Multiplication(
                Addition(Constant(2), Constant(4)),
                Negate(Constant(1)),
            ),
            2,
        ),
        Constant(1),
    )

    assert first is not second
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_variant_and_field_order_matter_for_equality() -> None:
    assert Addition(Constant(1), Constant(2)) != Multiplication(Constant(1), Constant(2))
    assert Addition(Constant(1), Constant(2)) != Addition(Constant(2), Constant(1))
    assert Exponent(Constant(2), 3) != Exponent(Constant(3), 2)
    assert Negate(Constant(1)) != Constant(-1)


# ===== Immutability =====
def test_variants_cannot_be_mutated() -> None:
    constant = Constant(1)
    addition = Addition(constant, constant)

    with pytest.raises(FrozenInstanceError):
        constant.value = 2  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        addition.left = Constant(3)  # type: ignore[misc]


# ===== Debug Representation =====
def test_repr_shows_variant_and_fields() -> None:
    assert repr(Negate(Constant(1))) == "Negate(operand=Constant(value=1))"
    assert repr(Exponent(Constant(2), 10)) == "Exponent(base=Constant(value=2), exponent=10)"


# ===== Children =====
def test_child_expressions_follow_field_order() -> None:
    left, right = Constant(1), Constant(2)

    assert child_expressions(Constant(7)) == ()
    assert child_expressions(Negate(left)) == (left,)
    assert child_expressions(Exponent(left, 4)) == (left,)
    assert child_expressions(Addition(left, right)) == (left, right)
    assert child_expressions(Multiplication(right, left)) == (right, left)


# ===== Sample Programs =====
def test_negation_chain_nests_operand() -> None:
    assert build_negation_chain(0) == Constant(1)
    assert build_negation_chain(2, leaf=5) == Negate(Negate(Constant(5)))


def test_negation_chain_rejects_negative_depth() -> None:
    with pytest.raises(ValueError):
        build_negation_chain(-1)


def test_sum_chain_leans_left() -> None:
    assert build_sum_chain([1, 2, 3]) == Addition(
        Addition(Constant(1), Constant(2)), Constant(3)
    )


def test_sum_chain_requires_values() -> None:
    with pytest.raises(ValueError):
        build_sum_chain([])
