"""Payment gateway port - the unified contract payment adapters implement."""
from typing import Protocol, runtime_checkable

from .value_objects import Amount


@runtime_checkable
class PaymentGateway(Protocol):
    """Target interface the application talks to, whatever service sits behind it."""

    def make_payment(self, amount: Amount) -> str:
        """Pay the given amount and return the service's confirmation."""
        ...
