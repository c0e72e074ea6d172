r"""Single-value stream adapter.

A ``SingleResultStream`` is cold: nothing is sent until it is
subscribed to or iterated, and every subscription starts a new,
independent execution of the request. Each execution emits exactly one
value then completes, or emits exactly one error.

Example:
    ```pycon
    >>> from endpointer import Endpoint, Environment, NetworkClient
    >>> async def main():  # doctest: +SKIP
    ...     async with NetworkClient() as client:
    ...         stream = client.stream(
    ...             Endpoint(path="/posts/1", environment=Environment("https://api.example.com")),
    ...             dict,
    ...         )
    ...         async for post in stream:
    ...             print(post["title"])
    ...

    ```
"""

from __future__ import annotations

__all__ = ["SingleResultStream", "Subscription"]

import asyncio
from typing import TYPE_CHECKING, Generic, TypeVar

from endpointer.result import Success
from endpointer.tasks import spawn

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable

    from endpointer.exceptions import NetworkError
    from endpointer.result import Result

T = TypeVar("T")


class Subscription:
    """Handle of one execution started by
    ``SingleResultStream.subscribe``.

    Args:
        task: The task running the execution.
    """

    def __init__(self, task: asyncio.Task) -> None:
        self._task = task
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        """``True`` once ``cancel`` was called."""
        return self._cancelled

    @property
    def done(self) -> bool:
        """``True`` once the execution finished or was cancelled."""
        return self._task.done()

    def cancel(self) -> None:
        """Cancel the execution.

        The in-flight transport call is aborted and no callback of this
        subscription is invoked afterwards. Cancelling a finished
        subscription has no effect.
        """
        self._cancelled = True
        self._task.cancel()

    async def wait(self) -> None:
        """Wait until the execution finished or was cancelled."""
        await asyncio.wait([self._task])


class SingleResultStream(Generic[T]):
    r"""Cold producer of exactly one value or one error.

    Args:
        factory: A callable returning a new awaitable of the request
            result. It is called once per subscription or iteration.
    """

    def __init__(self, factory: Callable[[], Awaitable[Result[T]]]) -> None:
        self._factory = factory

    def subscribe(
        self,
        on_value: Callable[[T], None],
        on_error: Callable[[NetworkError], None] | None = None,
        on_complete: Callable[[], None] | None = None,
    ) -> Subscription:
        r"""Start a new execution and deliver its outcome to callbacks.

        On success ``on_value`` is called once with the value, then
        ``on_complete`` if given. On failure only ``on_error`` is called,
        once, if given. After ``Subscription.cancel`` nothing is called.

        Args:
            on_value: Called with the decoded value.
            on_error: Called with the network error.
            on_complete: Called after the value was delivered.

        Returns:
            The subscription handle.

        Raises:
            RuntimeError: If there is no running event loop.
        """
        task = spawn(self.result())
        subscription = Subscription(task)

        def _deliver(done: asyncio.Task[Result[T]]) -> None:
            if done.cancelled() or subscription.cancelled:
                return
            result = done.result()
            if isinstance(result, Success):
                on_value(result.value)
                if on_complete is not None:
                    on_complete()
            elif on_error is not None:
                on_error(result.error)

        task.add_done_callback(_deliver)
        return subscription

    async def result(self) -> Result[T]:
        """Run a new execution and return its result."""
        return await self._factory()

    async def first(self) -> T:
        """Run a new execution and return its value.

        Raises:
            NetworkError: If the request failed.
        """
        return (await self.result()).unwrap()

    async def __aiter__(self) -> AsyncIterator[T]:
        yield await self.first()
