"""Concrete stock observer."""
from typing import List

from pattern_gallery.domain.base.value_objects import format_amount

from .stock import Price


class Investor:
    """Observer that records every price it is told about."""

    def __init__(self, name: str):
        self._name = name
        self._notifications: List[Price] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def notifications(self) -> List[Price]:
        """Prices received so far, oldest first."""
        return list(self._notifications)

    def on_update(self, value: Price) -> str:
        self._notifications.append(value)
        return f"{self._name} notified: New stock price is ${format_amount(value)}"

    # Name used by the original stock-tracker contract
    update = on_update

    def __repr__(self) -> str:
        return f"Investor({self._name!r})"
