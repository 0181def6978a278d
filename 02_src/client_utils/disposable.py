"""Disposable protocol and scoped disposal helpers."""

from typing import Awaitable, Callable, Protocol, TypeVar, runtime_checkable

TDisposable = TypeVar("TDisposable", bound="IDisposable")
TResult = TypeVar("TResult")


@runtime_checkable
class IDisposable(Protocol):
    """Something that holds resources until dispose() is called."""

    def dispose(self) -> None:
        """Release held resources."""
        ...


def using(
    resource: TDisposable,
    callback: Callable[[TDisposable], TResult],
) -> TResult:
    """
    Run callback with resource and dispose the resource afterwards.

    dispose() is called exactly once, whether the callback returns or raises.

    Args:
        resource: The disposable resource
        callback: Called with the resource

    Returns:
        The callback's return value
    """
    try:
        return callback(resource)
    finally:
        resource.dispose()


async def using_async(
    resource: TDisposable,
    callback: Callable[[TDisposable], Awaitable[TResult]],
) -> TResult:
    """Async version of using(): dispose() runs once the awaited callback settles."""
    try:
        return await callback(resource)
    finally:
        resource.dispose()
