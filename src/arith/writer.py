from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

# DEBUG = True
DEBUG = False


class IndentingWriter:
    def __init__(
        self,
        indent_size: int = 3,
        debug: bool | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._indent_size = indent_size
        self._indents = 0
        self._debug = debug
        self._stream = stream

    @property
    def debug_enabled(self) -> bool:
        return DEBUG if self._debug is None else self._debug

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def debug(self, message: str) -> None:
        if self.debug_enabled:
            self._print_indentation()
            print(message, end="", file=self.stream)

    def debugln(self, message: str) -> None:
        if self.debug_enabled:
            self.debug(message)
            print(file=self.stream)

    def print(self, message: str) -> None:
        self._print_indentation()
        print(message, end="", file=self.stream)

    def println(self, message: str) -> None:
        self.print(message + "\n")

    def indent(self, levels: int = 1) -> None:
        if self.debug_enabled:
            self._indents += levels

    def dedent(self, levels: int = 1) -> None:
        if self.debug_enabled:
            self._indents -= levels

    def newline(self, on_debug_only: bool = False) -> None:
        if on_debug_only:
            if self.debug_enabled:
                print(file=self.stream)
        else:
            print(file=self.stream)

    def print_division_line(self, size: int = 80) -> None:
        print("-" * size, file=self.stream)

    def _print_indentation(self) -> None:
        if self.debug_enabled:
            print(" " * self._indent_size * self._indents, end="", file=self.stream)


@contextmanager
def indented_output(output_writer: IndentingWriter, levels: int = 1) -> Iterator[None]:
    output_writer.indent(levels)
    try:
        yield
    finally:
        output_writer.dedent(levels)


@contextmanager
def surrounding_box_title(
    output_writer: IndentingWriter, omit_lower_line: bool = False
) -> Iterator[None]:
    output_writer.print_division_line()
    try:
        yield
    finally:
        if not omit_lower_line:
            output_writer.print_division_line()
