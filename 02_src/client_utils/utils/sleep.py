"""Async sleep helper."""

import asyncio


async def sleep_async(ms: float = 0) -> None:
    """Suspend the current task for `ms` milliseconds."""
    await asyncio.sleep(ms / 1000)
