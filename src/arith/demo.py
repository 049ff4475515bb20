import sys
from typing import TextIO

from .ast_expressions import Expression
from .ast_programs import build_sample_expression
from .core import RuntimeContext, Value
from .expression_evaluator import evaluate
from .expression_renderer import render
from .writer import surrounding_box_title


def evaluate_for_cli(
    expr: Expression,
    context: RuntimeContext | None = None,
    stderr: TextIO | None = None,
) -> Value | None:
    stream = stderr if stderr is not None else sys.stderr
    context = context or RuntimeContext()

    try:
        text = render(expr)
        value = evaluate(expr, context)
    except RecursionError as error:
        print(f"Runtime error: expression nested too deeply ({error})", file=stream)
        return None

    context.writer.println(f"{text} = {value}")
    return value


def run_demo(context: RuntimeContext | None = None) -> Value | None:
    context = context or RuntimeContext()
    writer = context.writer

    with surrounding_box_title(writer, omit_lower_line=True):
        writer.println("SAMPLE EXPRESSION")

    with surrounding_box_title(writer):
        writer.newline(on_debug_only=True)
        return evaluate_for_cli(build_sample_expression(), context)


if __name__ == "__main__":
    run_demo()
