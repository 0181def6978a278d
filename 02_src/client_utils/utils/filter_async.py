"""Async filtering helper."""

from typing import Awaitable, Callable, Iterable, TypeVar

T = TypeVar("T")


async def filter_async(values: Iterable[T], predicate: Callable[[T], Awaitable[bool]]) -> list[T]:
    """Keep the values for which the awaited predicate is truthy, in order."""
    returns: list[T] = []
    for value in values:
        if await predicate(value):
            returns.append(value)
    return returns
