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


def render(expr: Expression) -> str:
    """Render `expr` fully parenthesized, e.g. `" ( 2 + 4 ) "`.

    Every addition and multiplication gets its own pair of parentheses, so
    no precedence rules are involved. The result is framed by exactly one
    space on each side; the framing replaces whatever spaces the outermost
    node would put at its ends, so a top-level exponent gains a trailing
    space (`" 2 ^ 10 "`) and nested negations lose theirs (`" - -1 "`).
    """
    return _frame(_render(expr))


def _render(expr: Expression) -> str:
    match expr:
        case Constant(value):
            return str(value)
        case Negate(operand):
            return f" -{_render(operand)} "
        case Exponent(base, exponent):
            return f"{_render(base)} ^ {exponent}"
        case Addition(left, right):
            return f" ( {_render(left)} + {_render(right)} ) "
        case Multiplication(left, right):
            return f" ( {_render(left)} * {_render(right)} ) "
        case _:
            assert_never(expr)


def render_iterative(expr: Expression) -> str:
    """Same output as `render`, built with an explicit stack."""
    pending: list[tuple[Expression, bool]] = [(expr, False)]
    fragments: list[str] = []

    while pending:
        node, children_rendered = pending.pop()
        children = child_expressions(node)

        if not children or children_rendered:
            arity = len(children)
            parts = fragments[len(fragments) - arity :]
            del fragments[len(fragments) - arity :]
            fragments.append(_join(node, parts))
            continue

        pending.append((node, True))
        for child in reversed(children):
            pending.append((child, False))

    [fragment] = fragments
    return _frame(fragment)


def _join(expr: Expression, parts: Sequence[str]) -> str:
    match expr:
        case Constant(value):
            return str(value)
        case Negate():
            [operand] = parts
            return f" -{operand} "
        case Exponent(_, exponent):
            [base] = parts
            return f"{base} ^ {exponent}"
        case Addition():
            left, right = parts
            return f" ( {left} + {right} ) "
        case Multiplication():
            left, right = parts
            return f" ( {left} * {right} ) "
        case _:
            assert_never(expr)


def _frame(fragment: str) -> str:
    return f" {fragment.strip(' ')} "
