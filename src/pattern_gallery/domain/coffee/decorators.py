"""
Coffee decorators.

A decorator wraps another Coffee and extends its result: the wrapped drink is
evaluated first, then the decorator adds its own price and label. Chains can be
nested to any depth and are not modified after construction.
"""
from typing import Iterable, Type

from .beverages import Coffee


class CoffeeDecorator(Coffee):
    """Base decorator - delegates both operations unchanged."""

    def __init__(self, coffee: Coffee):
        self._coffee = coffee

    @property
    def coffee(self) -> Coffee:
        """The wrapped drink."""
        return self._coffee

    def cost(self) -> int:
        return self._coffee.cost()

    def description(self) -> str:
        return self._coffee.description()


class MilkDecorator(CoffeeDecorator):
    def cost(self) -> int:
        return self._coffee.cost() + 10

    def description(self) -> str:
        return self._coffee.description() + ", Milk"


class SugarDecorator(CoffeeDecorator):
    def cost(self) -> int:
        return self._coffee.cost() + 5

    def description(self) -> str:
        return self._coffee.description() + ", Sugar"


def with_extras(coffee: Coffee, extras: Iterable[Type[CoffeeDecorator]]) -> Coffee:
    """Wrap ``coffee`` with each decorator in turn; the first extra ends up innermost."""
    for extra in extras:
        coffee = extra(coffee)
    return coffee
