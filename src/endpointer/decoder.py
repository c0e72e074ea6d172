r"""Response body decoders.

A decoder turns the raw bytes of a response into an instance of the
type requested by the caller, and raises when the bytes do not match
that type. ``JSONDecoder`` is the default and relies on pydantic to
validate JSON into models, dataclasses, typed dicts and builtin types.
"""

from __future__ import annotations

__all__ = ["Decoder", "JSONDecoder"]

from functools import lru_cache
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import TypeAdapter

T = TypeVar("T")


@runtime_checkable
class Decoder(Protocol):
    """Protocol of response body decoders."""

    def decode(self, content: bytes, type_: type[T]) -> T:
        """Decode ``content`` into an instance of ``type_``.

        Raises:
            Exception: If the content does not match ``type_``.
        """
        ...  # pragma: no cover


@lru_cache(maxsize=256)
def _get_adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


class JSONDecoder:
    r"""Decode JSON response bodies with pydantic.

    Args:
        strict: If ``True``, values are validated in pydantic strict mode,
            i.e. without type coercion (``"1"`` is not accepted for an
            ``int`` field).

    Example:
        ```pycon
        >>> from endpointer.decoder import JSONDecoder
        >>> decoder = JSONDecoder()
        >>> decoder.decode(b'{"id": 1}', dict[str, int])
        {'id': 1}
        >>> decoder.decode(b"[1, 2, 3]", list[int])
        [1, 2, 3]

        ```
    """

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict

    def __repr__(self) -> str:
        return f"{type(self).__name__}(strict={self._strict})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONDecoder):
            return NotImplemented
        return self._strict == other._strict

    def __hash__(self) -> int:
        return hash((type(self), self._strict))

    def decode(self, content: bytes, type_: type[T]) -> T:
        """Decode JSON bytes into an instance of ``type_``.

        ``bytes`` is returned unchanged, so callers can opt out of
        decoding.

        Args:
            content: The response body.
            type_: The requested type.

        Returns:
            The decoded value.

        Raises:
            pydantic.ValidationError: If the content is not valid JSON or
                does not match ``type_``.
        """
        if type_ is bytes:
            return content  # type: ignore[return-value]
        return _get_adapter(type_).validate_json(content, strict=self._strict)
