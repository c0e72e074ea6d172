r"""Background task helpers for the callback and stream adapters."""

from __future__ import annotations

__all__ = ["spawn"]

import asyncio
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Coroutine

T = TypeVar("T")

# The event loop only keeps weak references to tasks
_background_tasks: set[asyncio.Task[Any]] = set()


def spawn(coro: Coroutine[Any, Any, T]) -> asyncio.Task[T]:
    """Schedule a coroutine on the running event loop.

    A strong reference to the task is kept until it is done, so a
    fire-and-forget task cannot be garbage collected mid-flight.

    Args:
        coro: The coroutine to run.

    Returns:
        The scheduled task.

    Raises:
        RuntimeError: If there is no running event loop in the current
            thread.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        coro.close()
        raise
    task = loop.create_task(coro)
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task
