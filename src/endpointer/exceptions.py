r"""Network error taxonomy.

Every failure of a request is reported as one ``NetworkError`` subclass.
The set of subclasses is closed and mirrored by ``NetworkErrorKind``, so
callers can either catch a specific class or switch on ``error.kind``.
"""

from __future__ import annotations

__all__ = [
    "ClientError",
    "DecodingError",
    "InvalidRequestBodyError",
    "InvalidRequestError",
    "InvalidResponseError",
    "InvalidStatusCodeError",
    "NetworkError",
    "NetworkErrorKind",
    "NetworkFailureError",
    "NoConnectionError",
    "NoDataError",
    "RequestCancelledError",
    "RequestTimeoutError",
    "ServerError",
]

from enum import Enum


class NetworkErrorKind(str, Enum):
    """Discriminant of the network error taxonomy."""

    INVALID_REQUEST = "invalid_request"
    INVALID_REQUEST_BODY = "invalid_request_body"
    NETWORK_FAILURE = "network_failure"
    TIMEOUT = "timeout"
    NO_CONNECTION = "no_connection"
    CANCELLED = "cancelled"
    INVALID_RESPONSE = "invalid_response"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    INVALID_STATUS_CODE = "invalid_status_code"
    NO_DATA = "no_data"
    DECODING_ERROR = "decoding_error"


class NetworkError(Exception):
    r"""Base class of all errors reported for a request.

    Args:
        message: A human-readable description of the failure.
        status_code: The HTTP status code, for status related errors.
        cause: The underlying exception, if any. It is also stored as
            ``__cause__`` so tracebacks show the chain.

    Example:
        ```pycon
        >>> from endpointer.exceptions import ClientError, NetworkErrorKind
        >>> error = ClientError(404)
        >>> error.kind is NetworkErrorKind.CLIENT_ERROR
        True
        >>> str(error)
        'Client error status code: 404.'

        ```
    """

    kind: NetworkErrorKind

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause
        self.__cause__ = cause

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkError):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.status_code == other.status_code
            and _cause_key(self.cause) == _cause_key(other.cause)
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.status_code, _cause_key(self.cause)))

    def __repr__(self) -> str:
        args: list[str] = []
        if self.status_code is not None:
            args.append(f"status_code={self.status_code}")
        if self.cause is not None:
            args.append(f"cause={self.cause!r}")
        return f"{type(self).__name__}({', '.join(args)})"


def _describe(cause: BaseException) -> str:
    return str(cause) or type(cause).__name__


def _cause_key(cause: BaseException | None) -> tuple[type[BaseException], str] | None:
    # Causes compare by type and message, not identity
    if cause is None:
        return None
    return type(cause), str(cause)


class InvalidRequestError(NetworkError):
    """The URL could not be constructed from the base URL and path."""

    kind = NetworkErrorKind.INVALID_REQUEST

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__("Invalid request.", cause=cause)


class InvalidRequestBodyError(NetworkError):
    """The parameters could not be serialized, or a write request has no
    body."""

    kind = NetworkErrorKind.INVALID_REQUEST_BODY

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__("The request body was invalid or could not be serialized.", cause=cause)


class NetworkFailureError(NetworkError):
    """A transport-level failure not covered by a more specific error."""

    kind = NetworkErrorKind.NETWORK_FAILURE

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Network failure: {_describe(cause)}", cause=cause)


class RequestTimeoutError(NetworkError):
    """The transport exceeded the configured timeout."""

    kind = NetworkErrorKind.TIMEOUT

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Request timed out. {_describe(cause)}", cause=cause)


class NoConnectionError(NetworkError):
    """No network connectivity."""

    kind = NetworkErrorKind.NO_CONNECTION

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__("No network connection.", cause=cause)


class RequestCancelledError(NetworkError):
    """The in-flight request was cancelled."""

    kind = NetworkErrorKind.CANCELLED

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__("The request was cancelled.", cause=cause)


class InvalidResponseError(NetworkError):
    """The transport returned no usable response envelope."""

    kind = NetworkErrorKind.INVALID_RESPONSE

    def __init__(self) -> None:
        super().__init__("The server response was invalid.")


class ClientError(NetworkError):
    """The server answered with a 4xx status code."""

    kind = NetworkErrorKind.CLIENT_ERROR

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Client error status code: {status_code}.", status_code=status_code)


class ServerError(NetworkError):
    """The server answered with a 5xx status code."""

    kind = NetworkErrorKind.SERVER_ERROR

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Server error status code: {status_code}.", status_code=status_code)


class InvalidStatusCodeError(NetworkError):
    """The server answered with a status code outside 2xx, 4xx and
    5xx."""

    kind = NetworkErrorKind.INVALID_STATUS_CODE

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Invalid status code: {status_code}.", status_code=status_code)


class NoDataError(NetworkError):
    """A 2xx response arrived with an empty body."""

    kind = NetworkErrorKind.NO_DATA

    def __init__(self) -> None:
        super().__init__("No data was received from the server.")


class DecodingError(NetworkError):
    """The response body did not match the requested type."""

    kind = NetworkErrorKind.DECODING_ERROR

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Decoding error: {_describe(cause)}", cause=cause)
