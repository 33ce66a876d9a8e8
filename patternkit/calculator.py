"""A four-function calculator built around a simple factory."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass


@dataclass
class Operation:
    """A binary arithmetic operation on two operands."""

    number_a: float = 0.0
    number_b: float = 0.0

    def result(self) -> float:
        """Return the outcome of the operation; the plain operation yields zero."""
        return 0.0


class Add(Operation):
    """Addition of the two operands."""

    def result(self) -> float:
        return self.number_a + self.number_b


class Sub(Operation):
    """Subtraction of the second operand from the first."""

    def result(self) -> float:
        return self.number_a - self.number_b


class Mul(Operation):
    """Multiplication of the two operands."""

    def result(self) -> float:
        return self.number_a * self.number_b


class Div(Operation):
    """Floating-point division; a zero divisor gives an infinity or NaN."""

    def result(self) -> float:
        try:
            return self.number_a / self.number_b
        except ZeroDivisionError:
            if self.number_a == 0 or math.isnan(self.number_a):
                return math.nan
            sign = math.copysign(1.0, self.number_a) * math.copysign(1.0, self.number_b)
            return math.copysign(math.inf, sign)


_OPERATIONS: dict[str, type[Operation]] = {
    "+": Add,
    "-": Sub,
    "*": Mul,
    "/": Div,
}


def create_operation(operator: str) -> Operation:
    """Return a fresh operation for one of the symbols ``+ - * /``."""
    try:
        cls = _OPERATIONS[operator]
    except KeyError:
        raise ValueError(f"unknown operator: {operator!r}") from None
    return cls()


def main(argv: list[str] | None = None) -> int:
    """Compute ``a op b`` and print it; defaults to ``2 + 3``."""
    parser = argparse.ArgumentParser(description="Evaluate a single arithmetic operation.")
    parser.add_argument("number_a", nargs="?", type=float, default=2.0)
    parser.add_argument("operator", nargs="?", default="+", choices=sorted(_OPERATIONS))
    parser.add_argument("number_b", nargs="?", type=float, default=3.0)
    args = parser.parse_args(argv)

    operation = create_operation(args.operator)
    operation.number_a = args.number_a
    operation.number_b = args.number_b
    print(f"{operation.result():g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())