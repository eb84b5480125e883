"""Payment domain - Adapter pattern demonstration."""

from .ports import PaymentGateway
from .value_objects import Amount, PaymentProvider, format_amount

__all__ = ["Amount", "PaymentGateway", "PaymentProvider", "format_amount"]
