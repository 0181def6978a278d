"""Synchronous observable value store."""

from typing import Any, Generic, TypeVar

from .value_observer import ValueChangeCallback, ValueObserver

T = TypeVar("T")


class _Unset:
    """Marker type for an ObservableValue that has not been set yet."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class ObservableValue(Generic[T]):
    """
    Holds a value and notifies subscribed callbacks when a new one is set.

    Callbacks run synchronously, in subscription order. Publishing iterates a
    snapshot of the observers, so unsubscribing during a publish only affects
    later publishes. A callback exception propagates to the publisher and
    stops delivery to the remaining observers.
    """

    def __init__(self, initial_value: T = UNSET):
        # dict keeps insertion order and gives O(1) removal by handle
        self._observers: dict[ValueObserver[T], None] = {}
        self._current_value = initial_value

    def subscribe(self, callback: ValueChangeCallback, get_last: bool = False) -> ValueObserver[T]:
        """
        Subscribe a callback for value changes.

        Args:
            callback: Called with every new value
            get_last: Call the callback immediately with the current value

        Returns:
            A ValueObserver whose dispose() removes this subscription
        """
        observer = ValueObserver(self, callback)
        self._observers[observer] = None
        if get_last:
            callback(self._current_value)
        return observer

    def unsubscribe(self, observer: ValueObserver[T]) -> bool:
        """Remove a subscription. Returns True if it was active."""
        return self._observers.pop(observer, UNSET) is not UNSET

    def get_value(self) -> T:
        """Get the last published value, or UNSET."""
        return self._current_value

    def set_value(self, new_value: T) -> None:
        """Store the value and notify every observer."""
        self._current_value = new_value
        for observer in list(self._observers):
            observer.callback(new_value)

    publish = set_value

    def get_observers(self) -> list[ValueObserver[T]]:
        """Get the active subscriptions in subscription order."""
        return list(self._observers)

    def dispose(self) -> None:
        """Remove every subscription."""
        self._observers.clear()
