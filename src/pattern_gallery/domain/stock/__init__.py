"""Stock domain - Observer pattern demonstration."""

from .investor import Investor
from .stock import DEFAULT_INITIAL_PRICE, Stock, StockObserver

__all__ = ["DEFAULT_INITIAL_PRICE", "Investor", "Stock", "StockObserver"]
