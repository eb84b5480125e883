"""Stock subject - tracks a price and notifies investors when it changes."""
from typing import List

from pattern_gallery.domain.base.observable import Observer, ValueSubject
from pattern_gallery.domain.base.value_objects import Amount

Price = Amount
StockObserver = Observer[Price]

DEFAULT_INITIAL_PRICE: Price = 100


class Stock(ValueSubject[Price]):
    """
    Subject whose observers are told every new price.

    ``add_observer``/``remove_observer``/``set_price`` are the stock-market
    names for the generic subscribe/unsubscribe/set_value operations.
    """

    def __init__(self, price: Price = DEFAULT_INITIAL_PRICE):
        super().__init__(price)

    @property
    def price(self) -> Price:
        return self.value

    def add_observer(self, observer: StockObserver) -> None:
        self.subscribe(observer)

    def remove_observer(self, observer: StockObserver) -> None:
        self.unsubscribe(observer)

    def set_price(self, new_price: Price) -> List[object]:
        return self.set_value(new_price)
