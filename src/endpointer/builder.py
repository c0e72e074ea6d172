r"""Compile endpoints into concrete requests.

``build_request`` is pure and synchronous: it performs no I/O and
reports every failure as a ``Failure`` result instead of raising.
"""

from __future__ import annotations

__all__ = ["build_request", "build_url", "default_headers", "encode_body", "merge_headers"]

import json
from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

import httpx

from endpointer.endpoint import BuiltRequest, HTTPMethod
from endpointer.exceptions import InvalidRequestBodyError, InvalidRequestError
from endpointer.query import to_query_string
from endpointer.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Mapping

    from endpointer.endpoint import Endpoint, EnvironmentProvider
    from endpointer.query import QueryValue

WRITE_METHODS = (HTTPMethod.POST, HTTPMethod.PUT)


def build_url(
    base_url: str, path: str, parameters: Mapping[str, QueryValue] | None = None
) -> httpx.URL:
    r"""Build the absolute URL of a request.

    The base URL and the path are concatenated as is. Query items are
    percent-encoded (a space becomes ``%20``). Parameters whose value has
    no query string form are dropped.

    Args:
        base_url: The environment base URL.
        path: The endpoint path.
        parameters: Optional query parameters.

    Returns:
        The absolute URL.

    Raises:
        httpx.InvalidURL: If the URL is malformed or not an absolute
            ``http``/``https`` URL.

    Example:
        ```pycon
        >>> from endpointer.builder import build_url
        >>> str(build_url("https://api.example.com", "/posts", {"page": 1}))
        'https://api.example.com/posts?page=1'

        ```
    """
    url = httpx.URL(base_url + path)
    if url.scheme not in ("http", "https") or not url.host:
        msg = f"Invalid URL {base_url + path!r}: an absolute http or https URL is required"
        raise httpx.InvalidURL(msg)
    if parameters:
        items = [(name, to_query_string(value)) for name, value in parameters.items()]
        query = urlencode([item for item in items if item[1] is not None], quote_via=quote)
        if url.query and query:
            query = f"{url.query.decode('ascii')}&{query}"
        if query:
            url = url.copy_with(query=query.encode("ascii"))
    return url


def default_headers(environment: EnvironmentProvider) -> dict[str, str]:
    r"""Return the headers sent with every request of an environment.

    Example:
        ```pycon
        >>> from endpointer import Environment
        >>> from endpointer.builder import default_headers
        >>> default_headers(Environment(base_url="https://api.example.com", api_key="123456"))
        {'Content-Type': 'application/json', 'Authorization': 'Bearer 123456'}
        >>> default_headers(Environment(base_url="https://api.example.com"))
        {'Content-Type': 'application/json'}

        ```
    """
    headers = {"Content-Type": "application/json"}
    if environment.api_key:
        headers["Authorization"] = f"Bearer {environment.api_key}"
    return headers


def merge_headers(defaults: Mapping[str, str], overrides: Mapping[str, str]) -> dict[str, str]:
    r"""Merge header overrides on top of default headers.

    Header names are case-insensitive, so an override replaces the
    default of the same name whatever its case.

    Example:
        ```pycon
        >>> from endpointer.builder import merge_headers
        >>> merge_headers({"Authorization": "Bearer 1"}, {"authorization": "X"})
        {'authorization': 'X'}

        ```
    """
    overridden = {name.lower() for name in overrides}
    headers = {name: value for name, value in defaults.items() if name.lower() not in overridden}
    headers.update(overrides)
    return headers


def encode_body(parameters: Mapping[str, QueryValue]) -> bytes:
    r"""Serialize parameters as a JSON object.

    Raises:
        TypeError: If a value is not JSON serializable.
        ValueError: If a value is out of the JSON range (e.g. ``nan``).

    Example:
        ```pycon
        >>> from endpointer.builder import encode_body
        >>> encode_body({"title": "a", "userId": 1})
        b'{"title": "a", "userId": 1}'

        ```
    """
    return json.dumps(dict(parameters), allow_nan=False).encode("utf-8")


def build_request(endpoint: Endpoint) -> Result[BuiltRequest]:
    r"""Compile an endpoint into a request ready to be sent.

    The rules are applied in order:

    1. A ``raw_request`` is returned as is.
    2. An unknown method or a malformed URL (``base_url + path``) fails
       with ``InvalidRequestError``.
    3. ``Content-Type: application/json`` and, for a non-empty API key,
       ``Authorization: Bearer <api_key>`` are set, then the endpoint
       headers are merged on top.
    4. ``GET`` parameters go to the query string.
    5. ``POST`` and ``PUT`` parameters are sent as a JSON object body.
       A write request without a body fails with
       ``InvalidRequestBodyError``.
    6. ``DELETE`` requests never have a body.

    Args:
        endpoint: The endpoint to compile.

    Returns:
        ``Success`` with the built request, or ``Failure`` with an
        ``InvalidRequestError`` or ``InvalidRequestBodyError``.

    Example:
        ```pycon
        >>> from endpointer import Endpoint, Environment, build_request
        >>> endpoint = Endpoint(
        ...     path="/posts",
        ...     environment=Environment(base_url="https://api.example.com"),
        ...     parameters={"page": 1},
        ... )
        >>> build_request(endpoint).unwrap().url
        'https://api.example.com/posts?page=1'

        ```
    """
    if endpoint.raw_request is not None:
        return Success(endpoint.raw_request)

    try:
        method = HTTPMethod(endpoint.method)
    except ValueError as exc:
        return Failure(InvalidRequestError(cause=exc))
    query = endpoint.parameters if method is HTTPMethod.GET else None
    try:
        url = build_url(endpoint.environment.base_url, endpoint.path, query)
    except httpx.InvalidURL as exc:
        return Failure(InvalidRequestError(cause=exc))

    headers = merge_headers(default_headers(endpoint.environment), endpoint.headers)

    body = None
    if method in WRITE_METHODS:
        if endpoint.parameters is not None:
            try:
                body = encode_body(endpoint.parameters)
            except (TypeError, ValueError) as exc:
                return Failure(InvalidRequestBodyError(cause=exc))
        if not body:
            return Failure(InvalidRequestBodyError())

    return Success(BuiltRequest(url=str(url), method=method, headers=headers, body=body))
