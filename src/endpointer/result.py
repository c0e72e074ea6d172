r"""Result of a request: a decoded value or a network error."""

from __future__ import annotations

__all__ = ["Failure", "Result", "Success"]

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from endpointer.exceptions import NetworkError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    r"""Successful outcome carrying the decoded value.

    Example:
        ```pycon
        >>> from endpointer.result import Success
        >>> result = Success({"id": 1})
        >>> result.is_success
        True
        >>> result.unwrap()
        {'id': 1}

        ```
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the decoded value."""
        return self.value


@dataclass(frozen=True)
class Failure:
    r"""Failed outcome carrying the network error.

    Example:
        ```pycon
        >>> from endpointer.exceptions import NoDataError
        >>> from endpointer.result import Failure
        >>> result = Failure(NoDataError())
        >>> result.is_failure
        True
        >>> result.unwrap()
        Traceback (most recent call last):
            ...
        endpointer.exceptions.NoDataError: No data was received from the server.

        ```
    """

    error: NetworkError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried network error."""
        raise self.error


Result = Success[T] | Failure
