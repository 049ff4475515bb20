from __future__ import annotations

import math
from dataclasses import dataclass, field

from .writer import IndentingWriter

Value = int

SUPPORTED_INTEGER_BITS = (32, 64)


@dataclass
class RuntimeContext:
    writer: IndentingWriter = field(default_factory=IndentingWriter)
    integer_bits: int = 32

    def __post_init__(self) -> None:
        if self.integer_bits not in SUPPORTED_INTEGER_BITS:
            raise ValueError(
                f"unsupported integer width: {self.integer_bits} "
                f"(expected one of {list(SUPPORTED_INTEGER_BITS)})"
            )

    @property
    def min_value(self) -> Value:
        return -(1 << (self.integer_bits - 1))

    @property
    def max_value(self) -> Value:
        return (1 << (self.integer_bits - 1)) - 1

    def wrap(self, value: int) -> Value:
        """Reduce `value` to the configured width with two's-complement wraparound."""
        modulus = 1 << self.integer_bits
        value &= modulus - 1
        if value > self.max_value:
            value -= modulus
        return value

    def narrow(self, value: float) -> Value:
        """Convert a double to an integer the way a C-family cast does.

        NaN becomes 0, infinities and out-of-range values saturate to the
        width's bounds, everything else truncates toward zero.
        """
        if math.isnan(value):
            return 0
        if value >= self.max_value:
            return self.max_value
        if value <= self.min_value:
            return self.min_value
        return int(value)


def power(base: Value, exponent: int) -> float:
    """Raise `base` to `exponent` in double precision.

    Overflow and division by zero produce signed infinities instead of
    raising, matching IEEE-754 `pow`.
    """
    try:
        return float(base) ** exponent
    except ZeroDivisionError:
        # 0.0 raised to a negative power
        return math.inf
    except OverflowError:
        negative = base < 0 and exponent % 2 == 1
        return -math.inf if negative else math.inf
