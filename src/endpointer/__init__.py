r"""endpointer - Declarative HTTP endpoints resolved into typed results.

Callers describe a request as data (path, method, headers, parameters,
target environment). The endpoint is compiled into a concrete request,
sent by a transport built on httpx, and the outcome is resolved into a
single ``Result``: the decoded value or one ``NetworkError``.

Key Features:
    - Immutable ``Endpoint`` descriptions compiled by a pure builder
    - Method-dependent parameter placement (query string or JSON body)
    - Default ``Content-Type`` and bearer ``Authorization`` headers,
      overridable per endpoint
    - A closed error taxonomy covering build, transport, HTTP status and
      decoding failures
    - Response decoding into any type pydantic can validate
    - Three adapters with identical semantics: ``await`` (suspend/resume),
      completion callback, and cold single-value stream

Example:
    ```pycon
    >>> from endpointer import Endpoint, Environment, HTTPMethod, NetworkClient
    >>> environment = Environment(base_url="https://api.example.com", api_key="123456")
    >>> endpoint = Endpoint(
    ...     path="/posts",
    ...     environment=environment,
    ...     method=HTTPMethod.POST,
    ...     parameters={"title": "a", "userId": 1},
    ... )
    >>> async def main():  # doctest: +SKIP
    ...     async with NetworkClient() as client:
    ...         result = await client.request(endpoint, dict)
    ...     return result.unwrap()
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_CONFIGURATION",
    "DEFAULT_TIMEOUT",
    "BuiltRequest",
    "ClientError",
    "DecodingError",
    "Decoder",
    "Endpoint",
    "Environment",
    "EnvironmentProvider",
    "Failure",
    "HTTPMethod",
    "HttpxTransport",
    "InvalidRequestBodyError",
    "InvalidRequestError",
    "InvalidResponseError",
    "InvalidStatusCodeError",
    "JSONDecoder",
    "NetworkClient",
    "NetworkConfiguration",
    "NetworkError",
    "NetworkErrorKind",
    "NetworkFailureError",
    "NoConnectionError",
    "NoDataError",
    "QueryValue",
    "RequestCancelledError",
    "RequestTimeoutError",
    "Result",
    "ServerError",
    "SingleResultStream",
    "Subscription",
    "Success",
    "Transport",
    "TransportResponse",
    "__version__",
    "build_request",
    "execute",
    "resolve_response",
    "to_query_string",
]

from importlib.metadata import PackageNotFoundError, version

from endpointer.builder import build_request
from endpointer.client import NetworkClient
from endpointer.core.config import DEFAULT_CONFIGURATION, DEFAULT_TIMEOUT, NetworkConfiguration
from endpointer.decoder import Decoder, JSONDecoder
from endpointer.endpoint import BuiltRequest, Endpoint, Environment, EnvironmentProvider, HTTPMethod
from endpointer.exceptions import (
    ClientError,
    DecodingError,
    InvalidRequestBodyError,
    InvalidRequestError,
    InvalidResponseError,
    InvalidStatusCodeError,
    NetworkError,
    NetworkErrorKind,
    NetworkFailureError,
    NoConnectionError,
    NoDataError,
    RequestCancelledError,
    RequestTimeoutError,
    ServerError,
)
from endpointer.execute import execute
from endpointer.query import QueryValue, to_query_string
from endpointer.resolver import resolve_response
from endpointer.result import Failure, Result, Success
from endpointer.stream import SingleResultStream, Subscription
from endpointer.transport import HttpxTransport, Transport, TransportResponse

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
