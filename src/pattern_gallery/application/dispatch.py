"""
Capability dispatch.

Calls an operation on a variant through its capability contract. The caller
names the operation; which concrete behaviour runs is decided by the target
object it was handed, never by a lookup at call time.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Tuple

from pattern_gallery.domain.base.exceptions import CapabilityNotSupportedError
from pattern_gallery.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CapabilityCall:
    """An operation bound to a target and its arguments, ready to run."""

    target: Any
    operation: str
    args: Tuple[Any, ...] = ()
    _method: Callable[..., Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        method = getattr(self.target, self.operation, None)
        if not callable(method):
            raise CapabilityNotSupportedError(type(self.target).__name__, self.operation)
        object.__setattr__(self, "_method", method)

    def invoke(self) -> Any:
        """Run the bound operation and return its result."""
        logger.debug(
            "Dispatching capability call",
            target=type(self.target).__name__,
            operation=self.operation,
        )
        return self._method(*self.args)


def bind(target: Any, operation: str, *args: Any) -> CapabilityCall:
    """
    Bind ``operation`` on ``target`` with ``args``.

    Raises:
        CapabilityNotSupportedError: If the target has no such operation
    """
    return CapabilityCall(target, operation, args)


def invoke(target: Any, operation: str, *args: Any) -> Any:
    """Bind and run ``operation`` on ``target`` in one step."""
    return bind(target, operation, *args).invoke()
