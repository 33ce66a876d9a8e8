"""Checkout pricing strategies selected by a context object."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from dataclasses import dataclass


class CashStrategy(ABC):
    """A rule that turns a list price into the amount charged."""

    @abstractmethod
    def accept_cash(self, money: float) -> float:
        """Return the amount to charge for ``money``."""


class CashNormal(CashStrategy):
    """Charge the full price."""

    def accept_cash(self, money: float) -> float:
        return money


@dataclass
class CashRebate(CashStrategy):
    """Charge a fixed fraction of the price."""

    rebate: float = 1.0

    def accept_cash(self, money: float) -> float:
        return money * self.rebate


@dataclass
class CashReturn(CashStrategy):
    """Take ``return_amount`` off for every full ``condition`` spent."""

    condition: float = 0.0
    return_amount: float = 0.0

    def accept_cash(self, money: float) -> float:
        if money >= self.condition:
            return money - int(money / self.condition) * self.return_amount
        return money


_MODES = ("normal", "rebate", "return")


def create_cash_strategy(mode: str) -> CashStrategy:
    """Return the strategy named by ``mode``: normal, rebate or return."""
    if mode == "normal":
        return CashNormal()
    if mode == "rebate":
        return CashRebate(0.8)
    if mode == "return":
        return CashReturn(30, 5)
    raise ValueError(f"unknown cash mode: {mode!r}")


class CashContext:
    """Holds the strategy chosen by name and applies it to prices."""

    def __init__(self, mode: str) -> None:
        self.strategy = create_cash_strategy(mode)

    def accept(self, money: float) -> float:
        """Return the amount charged for ``money`` under the current strategy."""
        return self.strategy.accept_cash(money)


def main(argv: list[str] | None = None) -> int:
    """Print the charge for an amount; defaults to 100 at the normal price."""
    parser = argparse.ArgumentParser(description="Compute a checkout total.")
    parser.add_argument("mode", nargs="?", default="normal", choices=_MODES)
    parser.add_argument("money", nargs="?", type=float, default=100.0)
    args = parser.parse_args(argv)

    context = CashContext(args.mode)
    print(f"{context.accept(args.money):g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())