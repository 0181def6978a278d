"""Retry an async check until it succeeds, runs out of attempts or times out."""

import asyncio
from dataclasses import dataclass, field, fields
from typing import Awaitable, Callable

from ..config import get_settings
from ..exceptions import RetrierAlreadyStartedError
from ..logging_config import get_logger

logger = get_logger(__name__)


def _default_retries() -> int:
    return get_settings().retries


def _default_retry_interval_ms() -> float:
    return get_settings().retry_interval_ms


def _default_timeout_ms() -> float:
    return get_settings().retry_timeout_ms


@dataclass
class RetrierOptions:
    """Options for Retrier."""

    retries: int = field(default_factory=_default_retries)
    retry_interval_ms: float = field(default_factory=_default_retry_interval_ms)
    timeout_ms: float = field(default_factory=_default_timeout_ms)
    backoff_factor: float = 1.0  # interval multiplier after each failed try
    max_interval_ms: float | None = None
    on_try: Callable[[], None] | None = None
    on_success: Callable[[], None] | None = None
    on_fail: Callable[[], None] | None = None


class Retrier:
    """
    Calls an async callback until it returns a truthy value.

    Usage example::

        succeeded = await Retrier.create(check_ready).setup(
            retries=5,
            retry_interval_ms=100,
            backoff_factor=2,
            on_fail=lambda: print("gave up"),
        ).run()
    """

    def __init__(self, callback: Callable[[], Awaitable[bool]], options: RetrierOptions):
        self._callback = callback
        self.options = options
        self._is_running = False

    @classmethod
    def create(cls, callback: Callable[[], Awaitable[bool]]) -> "Retrier":
        """Create a Retrier with default options."""
        return cls(callback, RetrierOptions())

    @property
    def is_running(self) -> bool:
        return self._is_running

    def setup(self, **options) -> "Retrier":
        """
        Override options. Unknown option names raise TypeError.

        Raises:
            RetrierAlreadyStartedError: if the retrier is running
        """
        if self._is_running:
            raise RetrierAlreadyStartedError("Retrier already started, cannot change options")
        known = {f.name for f in fields(RetrierOptions)}
        unknown = set(options) - known
        if unknown:
            raise TypeError(f"Unknown Retrier options: {', '.join(sorted(unknown))}")
        for name, value in options.items():
            setattr(self.options, name, value)
        return self

    def _next_interval(self, interval_ms: float) -> float:
        interval_ms *= self.options.backoff_factor
        if self.options.max_interval_ms is not None:
            interval_ms = min(interval_ms, self.options.max_interval_ms)
        return interval_ms

    async def run(self) -> bool:
        """
        Run the callback until it succeeds.

        Returns:
            True if the callback succeeded before retries ran out and before the timeout

        Raises:
            RetrierAlreadyStartedError: if the retrier is already running
        """
        if self._is_running:
            raise RetrierAlreadyStartedError()

        self._is_running = True
        try:
            return await self._run()
        finally:
            self._is_running = False

    async def _run(self) -> bool:
        options = self.options
        loop = asyncio.get_running_loop()
        deadline = loop.time() + options.timeout_ms / 1000
        interval_ms = options.retry_interval_ms
        succeeded = False
        timed_out = False
        tries = 0

        while not succeeded and not timed_out and tries < options.retries:
            tries += 1
            if options.on_try:
                options.on_try()
            succeeded = bool(await self._callback())
            timed_out = loop.time() >= deadline
            if not succeeded and not timed_out:
                logger.debug(
                    "Retry attempt failed",
                    extra={"context": {"attempt": tries, "retries": options.retries, "delay_ms": interval_ms}},
                )
                await asyncio.sleep(interval_ms / 1000)
                interval_ms = self._next_interval(interval_ms)
                timed_out = loop.time() >= deadline

        if succeeded:
            # late success still counts, but on_success is reserved for in-time runs
            if not timed_out and options.on_success:
                options.on_success()
            return True

        logger.warning(
            "Retrier gave up",
            extra={"context": {"tries": tries, "timed_out": timed_out}},
        )
        if options.on_fail:
            options.on_fail()
        return False
