"""Payment value objects."""
from enum import Enum

from pattern_gallery.domain.base.value_objects import Amount, format_amount


class PaymentProvider(str, Enum):
    """Payment services that have an adapter."""

    PAYPAL = "paypal"
    STRIPE = "stripe"


__all__ = ["Amount", "PaymentProvider", "format_amount"]
