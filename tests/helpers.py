r"""Shared test helpers for endpoint and client tests.

This module contains common test infrastructure used across multiple
test files to reduce duplication and improve maintainability.
"""

from __future__ import annotations

__all__ = [
    "API_KEY",
    "BASE_URL",
    "ENVIRONMENT",
    "POST_JSON",
    "POST_PARAMETERS",
    "Post",
    "StubTransport",
    "create_endpoint",
    "create_mock_transport",
    "run_callback_adapter",
    "run_stream_adapter",
]

import asyncio
import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from endpointer import Endpoint, Environment, HTTPMethod, TransportResponse
from endpointer.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from endpointer import BuiltRequest, NetworkClient, Result

BASE_URL = "https://jsonplaceholder.typicode.com"
API_KEY = "123456"
ENVIRONMENT = Environment(base_url=BASE_URL, api_key=API_KEY)

POST_PARAMETERS = {"userId": 1, "id": 1, "title": "Test Post", "body": "Test Body"}
POST_JSON = json.dumps(POST_PARAMETERS).encode()


@dataclass
class Post:
    """Response model used by the tests."""

    userId: int  # noqa: N815
    id: int
    title: str
    body: str


def create_endpoint(
    path: str = "/posts",
    method: HTTPMethod = HTTPMethod.GET,
    parameters: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    environment: Environment = ENVIRONMENT,
) -> Endpoint:
    """Create an endpoint with test defaults."""
    return Endpoint(
        path=path,
        environment=environment,
        method=method,
        headers=headers or {},
        parameters=parameters,
    )


@dataclass
class StubTransport:
    """Transport returning a fixed outcome and recording the requests.

    Attributes:
        response: The response returned by ``send``.
        error: If set, raised by ``send`` instead of returning.
        delay: Optional delay in seconds before completing.
        requests: The requests received, in order.
    """

    response: TransportResponse = field(
        default_factory=lambda: TransportResponse(content=POST_JSON, status_code=200)
    )
    error: BaseException | None = None
    delay: float = 0.0
    requests: list[BuiltRequest] = field(default_factory=list)

    async def send(self, request: BuiltRequest) -> TransportResponse:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.response


def create_mock_transport(
    handler: Callable[[httpx.Request], httpx.Response],
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` answering with ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


async def run_callback_adapter(
    client: NetworkClient, endpoint: Endpoint, type_: type[Any]
) -> Result[Any]:
    """Run the callback adapter and wait for its completion."""
    loop = asyncio.get_running_loop()
    future: asyncio.Future[Result[Any]] = loop.create_future()
    client.perform(endpoint, type_, future.set_result)
    return await future


async def run_stream_adapter(
    client: NetworkClient, endpoint: Endpoint, type_: type[Any]
) -> Result[Any]:
    """Subscribe to the stream adapter and wait for its single
    outcome."""
    loop = asyncio.get_running_loop()
    future: asyncio.Future[Result[Any]] = loop.create_future()
    client.stream(endpoint, type_).subscribe(
        on_value=lambda value: future.set_result(Success(value)),
        on_error=lambda error: future.set_result(Failure(error)),
    )
    return await future
