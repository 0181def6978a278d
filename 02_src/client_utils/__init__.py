"""General client-side utilities: disposables, observables, method tracing and helpers."""

from .config import Settings, get_settings, load_settings
from .disposable import IDisposable, using, using_async
from .exceptions import ClientUtilsError, RetrierAlreadyStartedError
from .logging_config import get_logger, setup_logging
from .models import TraceMethodCall, TraceMethodError, TraceMethodFinished
from .observable import UNSET, ObservableValue, ValueObserver
from .tracing import Trace, TraceObserver
from .utils import (
    Debounced,
    PathHelper,
    Retrier,
    RetrierOptions,
    debounce,
    filter_async,
    sleep_async,
)

__all__ = [
    # Disposables
    "IDisposable",
    "using",
    "using_async",
    # Observables
    "ObservableValue",
    "ValueObserver",
    "UNSET",
    # Tracing
    "Trace",
    "TraceObserver",
    "TraceMethodCall",
    "TraceMethodFinished",
    "TraceMethodError",
    # Helpers
    "debounce",
    "Debounced",
    "Retrier",
    "RetrierOptions",
    "PathHelper",
    "sleep_async",
    "filter_async",
    # Configuration and logging
    "Settings",
    "get_settings",
    "load_settings",
    "setup_logging",
    "get_logger",
    # Errors
    "ClientUtilsError",
    "RetrierAlreadyStartedError",
]
