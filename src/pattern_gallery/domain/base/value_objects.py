"""Value objects shared across patterns."""
from typing import Union

Amount = Union[int, float]


def format_amount(amount: Amount) -> str:
    """Render an amount without a trailing '.0' for whole numbers."""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)
