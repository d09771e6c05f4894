"""Coffee priced by feature flags, and coffee wrapped in add-on decorators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def _format_number(value: float) -> str:
    """Render a float without a trailing '.0' when it is whole."""
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


@dataclass
class BadCoffee:
    """A coffee whose every add-on is a flag checked in each method."""

    has_milk: bool = False
    has_sugar: bool = False

    def cost(self) -> float:
        cost = 5.0
        if self.has_milk:
            cost += 1.5
        if self.has_sugar:
            cost += 0.5
        return cost

    def description(self) -> str:
        desc = "Simple Coffee"
        if self.has_milk:
            desc += ", Milk"
        if self.has_sugar:
            desc += ", Sugar"
        return desc


def bad_decorator() -> None:
    """Show a coffee priced through its flags."""
    coffee = BadCoffee(has_milk=True, has_sugar=True)
    print(coffee.description(), "=", _format_number(coffee.cost()))


class Coffee(ABC):
    """Anything with a price and a description."""

    @abstractmethod
    def cost(self) -> float:
        """Return the price."""

    @abstractmethod
    def description(self) -> str:
        """Return what is in the cup."""


class SimpleCoffee(Coffee):
    def cost(self) -> float:
        return 5.0

    def description(self) -> str:
        return "Simple Coffee"


@dataclass
class CoffeeDecorator(Coffee):
    """Wraps a coffee and passes everything through unchanged."""

    coffee: Coffee

    def cost(self) -> float:
        return self.coffee.cost()

    def description(self) -> str:
        return self.coffee.description()


class MilkDecorator(CoffeeDecorator):
    def cost(self) -> float:
        return self.coffee.cost() + 1.5

    def description(self) -> str:
        return self.coffee.description() + ", Milk"


class SugarDecorator(CoffeeDecorator):
    def cost(self) -> float:
        return self.coffee.cost() + 0.5

    def description(self) -> str:
        return self.coffee.description() + ", Sugar"


def good_decorator() -> None:
    """Show a plain coffee, then the same coffee wrapped with milk and sugar."""
    coffee: Coffee = SimpleCoffee()
    print(coffee.description(), "=", _format_number(coffee.cost()))

    coffee = MilkDecorator(coffee=coffee)
    coffee = SugarDecorator(coffee=coffee)

    print(coffee.description(), "=", _format_number(coffee.cost()))