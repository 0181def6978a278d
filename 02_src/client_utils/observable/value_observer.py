"""Subscription handle for ObservableValue."""

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from .observable_value import ObservableValue

T = TypeVar("T")

ValueChangeCallback = Callable[[T], None]


class ValueObserver(Generic[T]):
    """One subscription of a callback to an ObservableValue."""

    def __init__(self, observable: "ObservableValue[T]", callback: ValueChangeCallback):
        self.observable = observable
        self.callback = callback

    def dispose(self) -> None:
        """Unsubscribe from the observable. Calling it again does nothing."""
        self.observable.unsubscribe(self)
