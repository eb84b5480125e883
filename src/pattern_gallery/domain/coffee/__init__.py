"""Coffee domain - Decorator pattern demonstration."""

from .beverages import Coffee, Espresso
from .decorators import CoffeeDecorator, MilkDecorator, SugarDecorator, with_extras

__all__ = [
    "Coffee",
    "CoffeeDecorator",
    "Espresso",
    "MilkDecorator",
    "SugarDecorator",
    "with_extras",
]
