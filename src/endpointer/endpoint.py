r"""Data types describing HTTP endpoints and compiled requests.

An ``Endpoint`` is immutable data describing one logical request. It
carries no behavior: compiling it into a ``BuiltRequest`` is done by
``endpointer.builder.build_request``.
"""

from __future__ import annotations

__all__ = ["BuiltRequest", "Endpoint", "Environment", "EnvironmentProvider", "HTTPMethod"]

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from endpointer.query import QueryValue


class HTTPMethod(str, Enum):
    """HTTP methods supported by endpoints."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class EnvironmentProvider(Protocol):
    """Anything exposing a base URL and an API key."""

    @property
    def base_url(self) -> str: ...  # pragma: no cover

    @property
    def api_key(self) -> str: ...  # pragma: no cover


@dataclass(frozen=True)
class Environment:
    """Target environment of an endpoint.

    Args:
        base_url: The root URL of the API service, e.g.
            ``"https://api.example.com"``.
        api_key: The API key sent as a bearer token. An empty string
            means no ``Authorization`` header is emitted.

    Example:
        ```pycon
        >>> from endpointer import Environment
        >>> env = Environment(base_url="https://api.example.com", api_key="123456")
        >>> env.base_url
        'https://api.example.com'

        ```
    """

    base_url: str
    api_key: str = ""


@dataclass(frozen=True)
class BuiltRequest:
    """A fully resolved request, ready to be sent by a transport.

    Args:
        url: The absolute URL, including the query string if any.
        method: The HTTP method.
        headers: The resolved headers, one value per name.
        body: The request body, or ``None`` when the request has none.
    """

    url: str
    method: HTTPMethod
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class Endpoint:
    r"""Immutable description of one logical HTTP request.

    Args:
        path: The path appended to the environment base URL.
        environment: The target environment (base URL and API key).
        method: The HTTP method. Defaults to ``GET``.
        headers: Header overrides. They win over the computed default
            headers on collision.
        parameters: Optional request parameters. They are encoded in the
            query string for ``GET``, as a JSON object body for ``POST``
            and ``PUT``, and ignored for ``DELETE``.
        raw_request: Optional pre-built request. When present, every
            other field is ignored and this request is sent as is.

    Example:
        ```pycon
        >>> from endpointer import Endpoint, Environment, HTTPMethod
        >>> endpoint = Endpoint(
        ...     path="/posts",
        ...     environment=Environment(base_url="https://api.example.com"),
        ...     method=HTTPMethod.POST,
        ...     parameters={"title": "a", "userId": 1},
        ... )
        >>> endpoint.method
        <HTTPMethod.POST: 'POST'>

        ```
    """

    path: str
    environment: EnvironmentProvider
    method: HTTPMethod = HTTPMethod.GET
    headers: Mapping[str, str] = field(default_factory=dict)
    parameters: Mapping[str, QueryValue] | None = None
    raw_request: BuiltRequest | None = None
