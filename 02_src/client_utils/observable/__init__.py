"""Observable value store."""

from .observable_value import UNSET, ObservableValue
from .value_observer import ValueChangeCallback, ValueObserver

__all__ = ["ObservableValue", "ValueObserver", "ValueChangeCallback", "UNSET"]
