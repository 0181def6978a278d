"""General purpose helpers."""

from .debounce import Debounced, debounce
from .filter_async import filter_async
from .path_helper import PathHelper
from .retrier import Retrier, RetrierOptions
from .sleep import sleep_async

__all__ = [
    "debounce",
    "Debounced",
    "filter_async",
    "PathHelper",
    "Retrier",
    "RetrierOptions",
    "sleep_async",
]
