"""Payment adapters - make vendor clients satisfy the PaymentGateway port."""
from typing import Optional, Union

from pattern_gallery.domain.base.exceptions import UnsupportedVariantError
from pattern_gallery.domain.payment.ports import PaymentGateway
from pattern_gallery.domain.payment.value_objects import Amount, PaymentProvider
from pattern_gallery.infrastructure.logging.logger import get_logger
from pattern_gallery.infrastructure.payment.services import PayPal, Stripe

logger = get_logger(__name__)


class PayPalAdapter:
    """Adapter for PayPal."""

    def __init__(self, paypal: PayPal):
        self._paypal = paypal

    @property
    def service(self) -> PayPal:
        """The wrapped PayPal client."""
        return self._paypal

    def make_payment(self, amount: Amount) -> str:
        logger.debug("Delegating payment", adapter="paypal", amount=amount)
        return self._paypal.send_payment(amount)


class StripeAdapter:
    """Adapter for Stripe."""

    def __init__(self, stripe: Stripe):
        self._stripe = stripe

    @property
    def service(self) -> Stripe:
        """The wrapped Stripe client."""
        return self._stripe

    def make_payment(self, amount: Amount) -> str:
        logger.debug("Delegating payment", adapter="stripe", amount=amount)
        return self._stripe.charge_payment(amount)


# provider -> (client class, adapter class)
_GATEWAYS = {
    PaymentProvider.PAYPAL: (PayPal, PayPalAdapter),
    PaymentProvider.STRIPE: (Stripe, StripeAdapter),
}


def create_payment_gateway(
    provider: Union[str, PaymentProvider],
    service: Optional[Union[PayPal, Stripe]] = None,
) -> PaymentGateway:
    """
    Wrap a payment client in the adapter for its provider.

    Args:
        provider: Provider name ("paypal" or "stripe")
        service: Existing client to wrap; a new one is created if omitted

    Returns:
        A PaymentGateway backed by the chosen provider

    Raises:
        UnsupportedVariantError: If the provider has no adapter, or ``service``
            is not a client of that provider
    """
    try:
        provider = PaymentProvider(provider)
    except ValueError as e:
        raise UnsupportedVariantError("Payment provider", str(provider)) from e

    client_class, adapter_class = _GATEWAYS[provider]
    if service is None:
        service = client_class()
    elif not isinstance(service, client_class):
        raise UnsupportedVariantError(
            "Payment provider",
            provider.value,
            message=f"{type(service).__name__} client cannot back the {provider.value} gateway",
        )
    return adapter_class(service)
