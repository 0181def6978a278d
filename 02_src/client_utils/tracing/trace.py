"""Method call tracing built on ObservableValue."""

import functools
import inspect
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable

from ..logging_config import get_logger
from ..models import TraceMethodCall, TraceMethodError, TraceMethodFinished
from ..observable import ObservableValue, ValueObserver

logger = get_logger(__name__)

TRACED_MARKER = "is_traced"

CallCallback = Callable[[TraceMethodCall], None]
FinishedCallback = Callable[[TraceMethodFinished], None]
ErrorCallback = Callable[[TraceMethodError], None]


@dataclass
class MethodMapping:
    """The original method of a traced attribute and its event observables."""

    original_method: Callable[..., Any]
    call_observable: ObservableValue[TraceMethodCall] = field(default_factory=ObservableValue)
    finished_observable: ObservableValue[TraceMethodFinished] = field(default_factory=ObservableValue)
    error_observable: ObservableValue[TraceMethodError] = field(default_factory=ObservableValue)


@dataclass
class ObjectTrace:
    """Traced methods of one object, keyed by method name."""

    target: Any  # keeps the object alive so its id() stays unique
    method_mappings: dict[str, MethodMapping] = field(default_factory=dict)


class TraceObserver:
    """Handle returned by Trace.method(); dispose() stops event delivery."""

    def __init__(self, observers: list[ValueObserver]):
        self._observers = observers
        self._disposed = False

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Unsubscribe all callbacks. Calling it again does nothing."""
        if self._disposed:
            return
        self._disposed = True
        for observer in self._observers:
            observer.dispose()

    def __enter__(self) -> "TraceObserver":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()


class Trace:
    """
    Traces method calls programmatically.

    The traced method is replaced on the object with an interceptor that
    publishes call, finished and error records to every registered observer.
    A method is wrapped only once; later Trace.method() calls for the same
    object and method name share the interceptor and its observables.

    Usage example::

        observer = Trace.method(
            instance,               # an instance, or a class for static methods
            instance.fetch,         # the method to trace
            is_async=True,          # the returned awaitable will be awaited
            on_called=lambda trace: print("called", trace.arguments),
            on_finished=lambda trace: print("finished", trace.returned),
            on_error=lambda trace: print("raised", trace.error),
        )
        ...
        observer.dispose()

    Disposing the observer stops event delivery but leaves the interceptor in
    place.
    """

    _object_traces: dict[int, ObjectTrace] = {}

    @classmethod
    def _get_method_trace(cls, obj: Any, name: str) -> MethodMapping:
        return cls._object_traces[id(obj)].method_mappings[name]

    @staticmethod
    def _trace_start(method_trace: MethodMapping, args: tuple, kwargs: dict) -> TraceMethodCall:
        call_trace = TraceMethodCall(
            start_date_time=datetime.now(timezone.utc),
            arguments=list(args),
            keyword_arguments=dict(kwargs),
        )
        method_trace.call_observable.set_value(call_trace)
        return call_trace

    @staticmethod
    def _trace_finished(method_trace: MethodMapping, call_trace: TraceMethodCall, returned: Any) -> None:
        method_trace.finished_observable.set_value(
            TraceMethodFinished(
                start_date_time=call_trace.start_date_time,
                arguments=call_trace.arguments,
                keyword_arguments=call_trace.keyword_arguments,
                returned=returned,
                finished_date_time=datetime.now(timezone.utc),
            )
        )

    @staticmethod
    def _trace_error(method_trace: MethodMapping, call_trace: TraceMethodCall, error: BaseException) -> None:
        method_trace.error_observable.set_value(
            TraceMethodError(
                start_date_time=call_trace.start_date_time,
                arguments=call_trace.arguments,
                keyword_arguments=call_trace.keyword_arguments,
                error=error,
                error_date_time=datetime.now(timezone.utc),
            )
        )

    @classmethod
    def _call_method(cls, obj: Any, name: str, args: tuple, kwargs: dict) -> Any:
        method_trace = cls._get_method_trace(obj, name)
        start = cls._trace_start(method_trace, args, kwargs)
        try:
            returned = method_trace.original_method(*args, **kwargs)
        except Exception as error:
            cls._trace_error(method_trace, start, error)
            raise
        cls._trace_finished(method_trace, start, returned)
        return returned

    @classmethod
    def _call_method_async(cls, obj: Any, name: str, args: tuple, kwargs: dict) -> Awaitable[Any]:
        method_trace = cls._get_method_trace(obj, name)
        start = cls._trace_start(method_trace, args, kwargs)
        try:
            pending = method_trace.original_method(*args, **kwargs)
        except Exception as error:
            cls._trace_error(method_trace, start, error)
            raise
        return cls._settle(method_trace, start, pending)

    @classmethod
    async def _settle(cls, method_trace: MethodMapping, start: TraceMethodCall, pending: Any) -> Any:
        try:
            returned = await pending if inspect.isawaitable(pending) else pending
        except Exception as error:
            cls._trace_error(method_trace, start, error)
            raise
        cls._trace_finished(method_trace, start, returned)
        return returned

    @classmethod
    def _install_interceptor(cls, obj: Any, name: str, is_async: bool) -> None:
        call = cls._call_method_async if is_async else cls._call_method
        live = getattr(obj, name)

        @functools.wraps(live)
        def interceptor(*args, **kwargs):
            return call(obj, name, args, kwargs)

        setattr(interceptor, TRACED_MARKER, True)
        if is_async and sys.version_info >= (3, 12) and inspect.iscoroutinefunction(live):
            # the interceptor returns a coroutine, so it still reads as a coroutine function
            inspect.markcoroutinefunction(interceptor)

        installed: Any = interceptor
        if isinstance(obj, type) and isinstance(
            inspect.getattr_static(obj, name, None), (staticmethod, classmethod)
        ):
            # the captured original is already bound to the class
            installed = staticmethod(interceptor)
        setattr(obj, name, installed)
        logger.debug(
            "Installed trace interceptor",
            extra={"context": {"target": repr(obj), "method": name, "is_async": is_async}},
        )

    @staticmethod
    def is_traced(obj: Any, name: str) -> bool:
        """Check whether the live attribute `name` on `obj` is a trace interceptor."""
        return bool(getattr(getattr(obj, name, None), TRACED_MARKER, False))

    @classmethod
    def method(
        cls,
        obj: Any,
        method: Callable[..., Any],
        on_called: CallCallback | None = None,
        on_finished: FinishedCallback | None = None,
        on_error: ErrorCallback | None = None,
        is_async: bool = False,
    ) -> TraceObserver:
        """
        Observe calls, results and errors of a method.

        Args:
            obj: The instance owning the method, or a class for static and class methods
            method: The method to trace. Its __name__ must be the attribute name on obj.
            on_called: Called right before the method runs
            on_finished: Called right after the method returned
            on_error: Called when the method raised
            is_async: Await the method's result before publishing finished/error

        Returns:
            TraceObserver that unsubscribes all three callbacks on dispose()
        """
        name = method.__name__

        object_trace = cls._object_traces.get(id(obj))
        if object_trace is None:
            object_trace = ObjectTrace(target=obj)
            cls._object_traces[id(obj)] = object_trace

        if not cls.is_traced(obj, name):
            cls._install_interceptor(obj, name, is_async)

        method_trace = object_trace.method_mappings.get(name)
        if method_trace is None:
            method_trace = MethodMapping(original_method=method)
            object_trace.method_mappings[name] = method_trace
            logger.debug(
                "Created method mapping",
                extra={"context": {"target": repr(obj), "method": name}},
            )

        observers: list[ValueObserver] = []
        if on_called is not None:
            observers.append(method_trace.call_observable.subscribe(on_called))
        if on_finished is not None:
            observers.append(method_trace.finished_observable.subscribe(on_finished))
        if on_error is not None:
            observers.append(method_trace.error_observable.subscribe(on_error))

        return TraceObserver(observers)
