"""
Payment service clients.

These stand in for vendor SDKs. Each exposes its own method name for taking
a payment, which is why the application reaches them through adapters.
"""
from pattern_gallery.domain.base.value_objects import Amount, format_amount
from pattern_gallery.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class PayPal:
    """PayPal client - pays with ``send_payment``."""

    def send_payment(self, amount: Amount) -> str:
        logger.debug("PayPal payment sent", amount=amount)
        return f"Payment of ${format_amount(amount)} made through PayPal."


class Stripe:
    """Stripe client - pays with ``charge_payment``."""

    def charge_payment(self, amount: Amount) -> str:
        logger.debug("Stripe payment charged", amount=amount)
        return f"Payment of ${format_amount(amount)} made through Stripe."
