r"""Network client exposing the callback, stream and async adapters.

This module provides ``NetworkClient``, an explicitly constructed,
caller-owned client holding a ``NetworkConfiguration`` and a transport.
All of its adapters run the same ``execute`` coroutine, so a given
endpoint yields the same result whichever adapter is used.
"""

from __future__ import annotations

__all__ = ["NetworkClient"]

import asyncio
from dataclasses import replace
from typing import TYPE_CHECKING, TypeVar

from endpointer.core.config import DEFAULT_CONFIGURATION
from endpointer.endpoint import HTTPMethod
from endpointer.exceptions import RequestCancelledError
from endpointer.execute import execute
from endpointer.result import Failure
from endpointer.stream import SingleResultStream
from endpointer.tasks import spawn
from endpointer.transport import HttpxTransport

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType
    from typing import Self

    from endpointer.core.config import NetworkConfiguration
    from endpointer.endpoint import Endpoint
    from endpointer.result import Result
    from endpointer.transport import Transport

T = TypeVar("T")


class NetworkClient:
    r"""Client executing endpoints and resolving them into results.

    Two usage patterns are supported:

    **Owned transport**: no transport is passed, and an
    ``HttpxTransport`` is created from the configuration. It is closed
    when the ``async with`` block exits or ``aclose`` is called.

    **Injected transport**: any object implementing the ``Transport``
    protocol is passed in. The client never closes it.

    A client may be shared by any number of concurrent requests. It
    holds no per-request state.

    The verb shortcuts ``fetch``, ``create``, ``update`` and ``remove``
    are awaitable. ``perform`` and ``stream`` take the verb through their
    ``method`` argument, which overrides the endpoint method for that
    call in the same way.

    Args:
        configuration: Optional configuration. If ``None``, the default
            configuration is used.
        transport: Optional transport sending the requests.

    Example:
        ```pycon
        >>> from endpointer import Endpoint, Environment, NetworkClient
        >>> environment = Environment(base_url="https://api.example.com", api_key="123456")
        >>> async def main():  # doctest: +SKIP
        ...     async with NetworkClient() as client:
        ...         result = await client.request(Endpoint("/posts/1", environment), dict)
        ...     return result.unwrap()
        ...

        ```
    """

    def __init__(
        self,
        *,
        configuration: NetworkConfiguration | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._configuration: NetworkConfiguration = configuration or DEFAULT_CONFIGURATION
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(self._configuration)

    @property
    def configuration(self) -> NetworkConfiguration:
        return self._configuration

    @property
    def transport(self) -> Transport:
        return self._transport

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the async context manager and close the transport if
        this client created it.

        Args:
            exc_type: Exception type if an exception occurred.
            exc_val: Exception value if an exception occurred.
            exc_tb: Exception traceback if an exception occurred.
        """
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self._transport.aclose()

    def _execute(self, endpoint: Endpoint, type_: type[T], method: HTTPMethod | None):
        if method is not None:
            endpoint = replace(endpoint, method=method)
        return execute(endpoint, self._transport, self._configuration.decoder, type_)

    async def request(
        self, endpoint: Endpoint, type_: type[T], *, method: HTTPMethod | None = None
    ) -> Result[T]:
        r"""Execute an endpoint and return its result.

        This is the suspend/resume adapter: the calling task is
        suspended until the result is available. Cancelling the calling
        task cancels the in-flight transport call and propagates
        ``asyncio.CancelledError``.

        Args:
            endpoint: The endpoint to execute.
            type_: The type the response body is decoded into.
            method: Optional method overriding the endpoint method for
                this call only.

        Returns:
            ``Success`` with the decoded value, or ``Failure`` with the
            network error.

        Example:
            ```pycon
            >>> from endpointer import Endpoint, Environment, NetworkClient
            >>> async def main():  # doctest: +SKIP
            ...     async with NetworkClient() as client:
            ...         return await client.request(
            ...             Endpoint("/posts", Environment("https://api.example.com")), list
            ...         )
            ...

            ```
        """
        return await self._execute(endpoint, type_, method)

    def perform(
        self,
        endpoint: Endpoint,
        type_: type[T],
        completion: Callable[[Result[T]], None],
        *,
        method: HTTPMethod | None = None,
    ) -> None:
        r"""Execute an endpoint in the background and report its result
        to a completion callback.

        This is the callback adapter. It must be called from a running
        event loop. ``completion`` is invoked exactly once, including
        when the endpoint cannot be built. This adapter has no
        cancellation handle; if the background task is cancelled by
        someone else (e.g. on event loop shutdown), ``completion``
        receives a ``RequestCancelledError`` failure.

        Args:
            endpoint: The endpoint to execute.
            type_: The type the response body is decoded into.
            completion: Called with the result.
            method: Optional method overriding the endpoint method for
                this call only.

        Raises:
            RuntimeError: If there is no running event loop.
        """
        task = spawn(self._execute(endpoint, type_, method))

        def _complete(done: asyncio.Task[Result[T]]) -> None:
            if done.cancelled():
                completion(Failure(RequestCancelledError()))
            else:
                completion(done.result())

        task.add_done_callback(_complete)

    def stream(
        self, endpoint: Endpoint, type_: type[T], *, method: HTTPMethod | None = None
    ) -> SingleResultStream[T]:
        r"""Return a cold single-value stream of the endpoint result.

        Nothing is sent until the stream is subscribed to or iterated.
        Each subscription runs a new, independent request.

        Args:
            endpoint: The endpoint to execute.
            type_: The type the response body is decoded into.
            method: Optional method overriding the endpoint method for
                this call only.

        Returns:
            The single-value stream.
        """
        return SingleResultStream(lambda: self._execute(endpoint, type_, method))

    async def fetch(self, endpoint: Endpoint, type_: type[T]) -> Result[T]:
        """Execute an endpoint as a GET request."""
        return await self.request(endpoint, type_, method=HTTPMethod.GET)

    async def create(self, endpoint: Endpoint, type_: type[T]) -> Result[T]:
        """Execute an endpoint as a POST request."""
        return await self.request(endpoint, type_, method=HTTPMethod.POST)

    async def update(self, endpoint: Endpoint, type_: type[T]) -> Result[T]:
        """Execute an endpoint as a PUT request."""
        return await self.request(endpoint, type_, method=HTTPMethod.PUT)

    async def remove(self, endpoint: Endpoint, type_: type[T]) -> Result[T]:
        """Execute an endpoint as a DELETE request."""
        return await self.request(endpoint, type_, method=HTTPMethod.DELETE)
