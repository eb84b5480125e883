"""Infrastructure adapters implementing domain ports."""

from .payment_adapters import PayPalAdapter, StripeAdapter, create_payment_gateway

__all__ = ["PayPalAdapter", "StripeAdapter", "create_payment_gateway"]
