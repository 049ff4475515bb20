from __future__ import annotations

from typing import Sequence, assert_never

from .ast_expressions import (
    Addition,
    Constant,
    Exponent,
    Expression,
    Multiplication,
    Negate,
    child_expressions,
)
from .core import RuntimeContext, Value, power
from .writer import indented_output


def evaluate(expr: Expression, context: RuntimeContext | None = None) -> Value:
    """Evaluate `expr` by structural recursion.

    Arithmetic wraps to `context.integer_bits`; exponentiation goes through a
    double and is narrowed back with truncation and saturation. Recursion
    depth equals tree depth, see `evaluate_iterative` for very deep trees.
    """
    context = context or RuntimeContext()
    return _evaluate(expr, context)


def _evaluate(expr: Expression, context: RuntimeContext) -> Value:
    match expr:
        case Constant(value):
            return context.wrap(value)
        case Negate(operand):
            with indented_output(context.writer):
                operand_value = _evaluate(operand, context)
            return _apply(expr, (operand_value,), context)
        case Exponent(base, _):
            with indented_output(context.writer):
                base_value = _evaluate(base, context)
            return _apply(expr, (base_value,), context)
        case Addition(left, right) | Multiplication(left, right):
            with indented_output(context.writer):
                left_value = _evaluate(left, context)
                right_value = _evaluate(right, context)
            return _apply(expr, (left_value, right_value), context)
        case _:
            assert_never(expr)


def evaluate_iterative(
    expr: Expression, context: RuntimeContext | None = None
) -> Value:
    """Same result and debug trace as `evaluate`, using an explicit stack."""
    context = context or RuntimeContext()

    # (node, depth, children_evaluated); operands accumulate on `values`.
    pending: list[tuple[Expression, int, bool]] = [(expr, 0, False)]
    values: list[Value] = []

    while pending:
        node, depth, children_evaluated = pending.pop()
        children = child_expressions(node)

        if not children or children_evaluated:
            arity = len(children)
            operands = values[len(values) - arity :]
            del values[len(values) - arity :]
            with indented_output(context.writer, depth):
                values.append(_apply(node, operands, context))
            continue

        pending.append((node, depth, True))
        for child in reversed(children):
            pending.append((child, depth + 1, False))

    [result] = values
    return result


def _apply(
    expr: Expression, operands: Sequence[Value], context: RuntimeContext
) -> Value:
    match expr:
        case Constant(value):
            return context.wrap(value)
        case Negate():
            [operand] = operands
            result = context.wrap(-operand)
            context.writer.debugln(f"[-({operand}) => {result}]")
            return result
        case Exponent(_, exponent):
            [base] = operands
            exponent = context.wrap(exponent)
            result = context.narrow(power(base, exponent))
            context.writer.debugln(f"[({base}) ^ {exponent} => {result}]")
            return result
        case Addition():
            left, right = operands
            result = context.wrap(left + right)
            context.writer.debugln(f"[({left}) + ({right}) => {result}]")
            return result
        case Multiplication():
            left, right = operands
            result = context.wrap(left * right)
            context.writer.debugln(f"[({left}) * ({right}) => {result}]")
            return result
        case _:
            assert_never(expr)
