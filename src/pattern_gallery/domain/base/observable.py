"""Observer broadcast - a subject that notifies subscribers when its value changes."""
import logging
from typing import Generic, List, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Observer(Protocol[T_contra]):
    """Contract for anything that wants to hear about value changes."""

    def on_update(self, value: T_contra) -> object:
        """Receive the new value."""
        ...


class ValueSubject(Generic[T]):
    """
    Holds a value and broadcasts every change to its subscribers.

    Subscribers are kept in an ordered list. Duplicates are allowed and each
    occurrence is notified. Removal is by identity and drops every occurrence,
    which makes it O(n).
    """

    def __init__(self, initial_value: T):
        self._value = initial_value
        self._observers: List[Observer[T]] = []
        self._logger = logging.getLogger(__name__)

    @property
    def value(self) -> T:
        """Current value."""
        return self._value

    @property
    def observers(self) -> List[Observer[T]]:
        """Snapshot of the current subscribers in subscription order."""
        return list(self._observers)

    def subscribe(self, observer: Observer[T]) -> None:
        """Append an observer to the subscriber list."""
        self._observers.append(observer)
        self._logger.debug(
            f"Subscribed {type(observer).__name__} ({len(self._observers)} subscribers)"
        )

    def unsubscribe(self, observer: Observer[T]) -> None:
        """Remove all occurrences of the given observer."""
        before = len(self._observers)
        self._observers = [o for o in self._observers if o is not observer]
        self._logger.debug(
            f"Unsubscribed {type(observer).__name__} ({before - len(self._observers)} removed)"
        )

    def set_value(self, value: T) -> List[object]:
        """
        Update the value, then notify every current subscriber in order.

        Returns:
            The values returned by each observer's ``on_update`` call
        """
        self._value = value
        return self._notify()

    def _notify(self) -> List[object]:
        observers = list(self._observers)
        self._logger.debug(f"Notifying {len(observers)} observers")
        return [observer.on_update(self._value) for observer in observers]
