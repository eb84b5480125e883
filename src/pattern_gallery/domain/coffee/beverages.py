"""Coffee component contract and the base beverage."""
from abc import ABC, abstractmethod


class Coffee(ABC):
    """Component contract shared by beverages and their decorators."""

    @abstractmethod
    def cost(self) -> int:
        """Price of the drink."""

    @abstractmethod
    def description(self) -> str:
        """Human readable name of the drink, including extras."""

    def summary(self) -> str:
        """One-line receipt, e.g. 'Espresso, Milk costs $60'."""
        return f"{self.description()} costs ${self.cost()}"


class Espresso(Coffee):
    """Concrete component."""

    def cost(self) -> int:
        return 50

    def description(self) -> str:
        return "Espresso"
