r"""Resolve raw transport outcomes into typed results.

The functions of this module are pure. They never raise for a failed
request; the first failure found is returned as a ``Failure``.
"""

from __future__ import annotations

__all__ = [
    "classify_status_code",
    "classify_transport_error",
    "decode_content",
    "resolve_response",
]

import asyncio
from typing import TYPE_CHECKING, TypeVar

import httpx

from endpointer.exceptions import (
    ClientError,
    DecodingError,
    InvalidResponseError,
    InvalidStatusCodeError,
    NetworkError,
    NetworkFailureError,
    NoConnectionError,
    NoDataError,
    RequestCancelledError,
    RequestTimeoutError,
    ServerError,
)
from endpointer.result import Failure, Result, Success

if TYPE_CHECKING:
    from endpointer.decoder import Decoder

T = TypeVar("T")


def classify_transport_error(error: BaseException) -> NetworkError:
    r"""Map a transport failure to a network error.

    Args:
        error: The exception raised by the transport.

    Returns:
        ``RequestTimeoutError`` for timeouts, ``NoConnectionError`` when
        no connection could be established, ``RequestCancelledError``
        for cancellations, and ``NetworkFailureError`` otherwise. A
        ``NetworkError`` is returned unchanged.

    Example:
        ```pycon
        >>> import httpx
        >>> from endpointer.resolver import classify_transport_error
        >>> classify_transport_error(httpx.ReadTimeout("timed out"))
        RequestTimeoutError(cause=ReadTimeout('timed out'))

        ```
    """
    if isinstance(error, NetworkError):
        return error
    if isinstance(error, (httpx.TimeoutException, TimeoutError)):
        return RequestTimeoutError(error)
    if isinstance(error, httpx.ConnectError):
        return NoConnectionError(cause=error)
    if isinstance(error, asyncio.CancelledError):
        return RequestCancelledError(cause=error)
    return NetworkFailureError(error)


def classify_status_code(status_code: int) -> NetworkError | None:
    r"""Map an HTTP status code to a network error.

    Args:
        status_code: The HTTP status code.

    Returns:
        ``None`` for 2xx codes, ``ClientError`` for 4xx,
        ``ServerError`` for 5xx and ``InvalidStatusCodeError`` for any
        other code.

    Example:
        ```pycon
        >>> from endpointer.resolver import classify_status_code
        >>> classify_status_code(200) is None
        True
        >>> classify_status_code(404)
        ClientError(status_code=404)

        ```
    """
    if 200 <= status_code <= 299:
        return None
    if 400 <= status_code <= 499:
        return ClientError(status_code)
    if 500 <= status_code <= 599:
        return ServerError(status_code)
    return InvalidStatusCodeError(status_code)


def decode_content(content: bytes, decoder: Decoder, type_: type[T]) -> Result[T]:
    """Decode a response body, reporting failures as
    ``DecodingError``."""
    try:
        return Success(decoder.decode(content, type_))
    except Exception as exc:  # noqa: BLE001
        return Failure(DecodingError(exc))


def resolve_response(
    content: bytes | None,
    status_code: int | None,
    error: BaseException | None,
    decoder: Decoder,
    type_: type[T],
) -> Result[T]:
    r"""Turn a raw transport outcome into a typed result.

    The checks run in this order and the first match wins:

    1. a transport error is classified with
       ``classify_transport_error``; the status code and body are not
       consulted;
    2. a missing status code means there is no usable response
       (``InvalidResponseError``);
    3. a non-2xx status code is classified with
       ``classify_status_code``;
    4. an empty body is reported as ``NoDataError``;
    5. the body is decoded into ``type_``; a decoder failure is reported
       as ``DecodingError``.

    Args:
        content: The response body, if any.
        status_code: The HTTP status code, if a response was received.
        error: The transport error, if the transport failed.
        decoder: The decoder used for the body.
        type_: The type requested by the caller.

    Returns:
        ``Success`` with the decoded value, or ``Failure`` with the
        network error.

    Example:
        ```pycon
        >>> from endpointer.decoder import JSONDecoder
        >>> from endpointer.resolver import resolve_response
        >>> resolve_response(b'{"id": 1}', 200, None, JSONDecoder(), dict)
        Success(value={'id': 1})
        >>> resolve_response(b"", 500, None, JSONDecoder(), dict)
        Failure(error=ServerError(status_code=500))

        ```
    """
    if error is not None:
        return Failure(classify_transport_error(error))
    if status_code is None:
        return Failure(InvalidResponseError())
    status_error = classify_status_code(status_code)
    if status_error is not None:
        return Failure(status_error)
    if not content:
        return Failure(NoDataError())
    return decode_content(content, decoder, type_)
