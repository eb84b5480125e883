"""Payment service clients with their own, incompatible APIs."""

from .services import PayPal, Stripe

__all__ = ["PayPal", "Stripe"]
