"""Arithmetic operations produced through one factory class per operation."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
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
    """Division that refuses a zero divisor."""

    def result(self) -> float:
        if self.number_b == 0:
            raise ZeroDivisionError("divisor cannot be zero")
        return self.number_a / self.number_b


class OperationFactory(ABC):
    """Creates one kind of operation."""

    @abstractmethod
    def create_operation(self) -> Operation:
        """Return a new operation."""


class AddFactory(OperationFactory):
    def create_operation(self) -> Operation:
        return Add()


class SubFactory(OperationFactory):
    def create_operation(self) -> Operation:
        return Sub()


class MulFactory(OperationFactory):
    def create_operation(self) -> Operation:
        return Mul()


class DivFactory(OperationFactory):
    def create_operation(self) -> Operation:
        return Div()


_FACTORIES: dict[str, type[OperationFactory]] = {
    "+": AddFactory,
    "-": SubFactory,
    "*": MulFactory,
    "/": DivFactory,
}


def main(argv: list[str] | None = None) -> int:
    """Compute an operation through its factory; defaults to ``1 + 2``."""
    parser = argparse.ArgumentParser(description="Evaluate an operation through its factory.")
    parser.add_argument("number_a", nargs="?", type=float, default=1.0)
    parser.add_argument("number_b", nargs="?", type=float, default=2.0)
    parser.add_argument("--operator", default="+", choices=sorted(_FACTORIES))
    args = parser.parse_args(argv)

    operation = _FACTORIES[args.operator]().create_operation()
    operation.number_a = args.number_a
    operation.number_b = args.number_b
    try:
        value = operation.result()
    except ZeroDivisionError as exc:
        parser.exit(1, f"error: {exc}\n")
    print(f"{value:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())