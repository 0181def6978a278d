"""Debounce helper for the running asyncio loop."""

import asyncio
import functools
from typing import Any, Callable

from ..config import get_settings


class Debounced:
    """Callable that delays `method` until calls stop arriving for `debounce_ms`."""

    def __init__(self, method: Callable[..., Any], debounce_ms: float):
        self._method = method
        self._debounce_ms = debounce_ms
        self._handle: asyncio.TimerHandle | None = None
        functools.update_wrapper(self, method)

    @property
    def is_pending(self) -> bool:
        return self._handle is not None

    def __call__(self, *args, **kwargs) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._debounce_ms / 1000, self._fire, args, kwargs)

    def _fire(self, args: tuple, kwargs: dict) -> None:
        self._handle = None
        self._method(*args, **kwargs)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


def debounce(method: Callable[..., Any], debounce_ms: float | None = None) -> Debounced:
    """
    Debounce a method.

    Only the last call of a burst runs, `debounce_ms` milliseconds after it
    was made. Must be called from within a running event loop.

    Args:
        method: The method to debounce
        debounce_ms: Delay in milliseconds. Defaults to CLIENT_UTILS_DEBOUNCE_MS (250).

    Returns:
        Debounced callable
    """
    if debounce_ms is None:
        debounce_ms = get_settings().debounce_ms
    return Debounced(method, debounce_ms)
