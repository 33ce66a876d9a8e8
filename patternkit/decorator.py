"""Decorator pattern: components wrapped at run time by extra behaviour."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod


class Component(ABC):
    """Something that can carry out an operation."""

    @abstractmethod
    def operation(self) -> None:
        """Carry out the operation."""


class ConcreteComponent(Component):
    """The plain component that decorators wrap."""

    def operation(self) -> None:
        print("ConcreteComponent Operation()")


class Decorator(Component):
    """A component that forwards its operation to a wrapped component."""

    def __init__(self) -> None:
        self.component: Component | None = None

    def set_component(self, component: Component) -> None:
        """Wrap ``component``."""
        self.component = component

    def operation(self) -> None:
        if self.component is not None:
            self.component.operation()


class ConcreteDecoratorA(Decorator):
    """Adds a piece of state after the wrapped operation."""

    def __init__(self) -> None:
        super().__init__()
        self.added_state = ""

    def _added_behavior(self) -> None:
        self.added_state = "ConcreteDecorator_1::New State"
        print(self.added_state)

    def operation(self) -> None:
        super().operation()
        self._added_behavior()
        print("ConcreteDecorator_1::Operation()")


class ConcreteDecoratorB(Decorator):
    """Adds a message after the wrapped operation."""

    def operation(self) -> None:
        super().operation()
        print("ConcreteDecorator_2::Operation()")


class Person:
    """A named person who can be shown."""

    def __init__(self, name: str = "unknown") -> None:
        self.name = name

    def show(self) -> None:
        print(f"Person: {self.name}")


class Finery(Person):
    """An item of clothing that decorates a person or another item."""

    def __init__(self) -> None:
        super().__init__()
        self.component: Person | None = None

    def decorate(self, component: Person) -> None:
        """Put this item on ``component``."""
        self.component = component

    def show(self) -> None:
        if self.component is not None:
            self.component.show()


class TShirt(Finery):
    def show(self) -> None:
        print("Wear T-Shirt ")
        super().show()


class BigTrouser(Finery):
    def show(self) -> None:
        print("Wear Big Trouser ")
        super().show()


class Sneakers(Finery):
    def show(self) -> None:
        print("Wear Sneakers ")
        super().show()


class Suit(Finery):
    def show(self) -> None:
        print("Wear Suit ")
        super().show()


def main(argv: list[str] | None = None) -> int:
    """Dress a person in layers and show the result; defaults to Tom."""
    parser = argparse.ArgumentParser(description="Dress a person using decorators.")
    parser.add_argument("name", nargs="?", default="Tom")
    args = parser.parse_args(argv)

    person = Person(args.name)
    t_shirt = TShirt()
    big_trouser = BigTrouser()
    sneakers = Sneakers()
    suit = Suit()

    t_shirt.decorate(person)
    big_trouser.decorate(t_shirt)
    sneakers.decorate(big_trouser)
    suit.decorate(sneakers)

    suit.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())