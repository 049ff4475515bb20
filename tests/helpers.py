from typing import TextIO

from arith.ast_expressions import (
    Addition,
    Constant,
    Exponent,
    Expression,
    Multiplication,
    Negate,
    child_expressions,
)


def assert_keywords_in_output(keywords: tuple[str, ...], stream: TextIO) -> None:
    getvalue = getattr(stream, "getvalue", None)
    assert callable(getvalue)
    output = str(getvalue()).lower()
    for keyword in keywords:
        assert keyword.lower() in output


def count_binary_nodes(expr: Expression) -> int:
    count = 0
    pending = [expr]
    while pending:
        node = pending.pop()
        if isinstance(node, (Addition, Multiplication)):
            count += 1
        pending.extend(child_expressions(node))
    return count


SAMPLE_TREES: tuple[Expression, ...] = (
    Constant(0),
    Constant(-12),
    Negate(Negate(Constant(3))),
    Exponent(Constant(5), 3),
    Addition(Constant(1), Multiplication(Constant(2), Constant(3))),
    Multiplication(Addition(Constant(1), Constant(2)), Negate(Constant(4))),
    Exponent(Addition(Multiplication(Constant(3), Constant(3)), Constant(1)), 2),
    Addition(Exponent(Negate(Constant(2)), 3), Negate(Exponent(Constant(10), 2))),
)
