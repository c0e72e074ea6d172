r"""Transports sending built requests over the wire.

A transport owns connection reuse and timeout enforcement. Failures
are raised as exceptions and classified later by
``endpointer.resolver.classify_transport_error``.
"""

from __future__ import annotations

__all__ = ["HttpxTransport", "Transport", "TransportResponse"]

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import httpx

from endpointer.core.config import DEFAULT_CONFIGURATION

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from endpointer.core.config import NetworkConfiguration
    from endpointer.endpoint import BuiltRequest

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Raw outcome of a completed exchange.

    Args:
        content: The response body. Empty when the server sent none.
        status_code: The HTTP status code, or ``None`` when the
            transport got no usable response envelope.
        headers: The response headers.
    """

    content: bytes = b""
    status_code: int | None = None
    headers: dict[str, str] = field(default_factory=dict)


@runtime_checkable
class Transport(Protocol):
    """Protocol of transports.

    Implementations must be safe to call concurrently from many
    in-flight requests, and must let ``asyncio.CancelledError``
    propagate so cancelling the caller aborts the I/O.
    """

    async def send(self, request: BuiltRequest) -> TransportResponse:
        """Send a request and return the raw response.

        Raises:
            Exception: If the exchange fails (timeout, connection error,
                ...).
        """
        ...  # pragma: no cover


class HttpxTransport:
    r"""Transport backed by an ``httpx.AsyncClient``.

    Two usage patterns are supported:

    **Owned client**: no client is passed, and one is created from the
    configuration. It is closed when the transport is closed or when
    the ``async with`` block exits.

    **Shared client**: an ``httpx.AsyncClient`` is passed in. The
    transport never closes it, leaving full control to the caller.

    Args:
        configuration: The network configuration used to create the
            client. Ignored when ``client`` is given.
        client: Optional client to send requests with.

    Example:
        ```pycon
        >>> import asyncio
        >>> from endpointer.transport import HttpxTransport
        >>> from endpointer.endpoint import BuiltRequest, HTTPMethod
        >>> async def main():  # doctest: +SKIP
        ...     async with HttpxTransport() as transport:
        ...         return await transport.send(
        ...             BuiltRequest(url="https://api.example.com/posts", method=HTTPMethod.GET)
        ...         )
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        configuration: NetworkConfiguration | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._configuration = configuration or DEFAULT_CONFIGURATION
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(**self._configuration.to_client_kwargs())

    @property
    def client(self) -> httpx.AsyncClient:
        """The underlying ``httpx.AsyncClient``."""
        return self._client

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def send(self, request: BuiltRequest) -> TransportResponse:
        """Send a request with the underlying client.

        Args:
            request: The request to send.

        Returns:
            The body, status code and headers of the response.

        Raises:
            httpx.HTTPError: If the exchange fails. Timeouts raise
                ``httpx.TimeoutException``.
        """
        method = str(request.method)
        logger.debug(f"Sending {method} request to {request.url}")
        response = await self._client.request(
            method, request.url, headers=request.headers, content=request.body
        )
        logger.debug(
            f"{method} request to {request.url} completed with status {response.status_code}"
        )
        return TransportResponse(
            content=response.content,
            status_code=response.status_code,
            headers=dict(response.headers),
        )
