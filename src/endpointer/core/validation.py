r"""Parameter validation utilities for network configurations.

This module provides validation functions for configuration parameters
to ensure they meet the required constraints before a transport is
created.
"""

from __future__ import annotations

__all__ = ["validate_decoder", "validate_timeout"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from endpointer.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(30)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_decoder(decoder: Any) -> None:
    """Validate that an object can be used as a response decoder.

    Args:
        decoder: The candidate decoder. It must expose a callable
            ``decode`` attribute.

    Raises:
        TypeError: If the object has no callable ``decode`` attribute.

    Example:
        ```pycon
        >>> from endpointer.core.validation import validate_decoder
        >>> from endpointer.decoder import JSONDecoder
        >>> validate_decoder(JSONDecoder())

        ```
    """
    if not callable(getattr(decoder, "decode", None)):
        msg = f"decoder must have a callable decode method, got {type(decoder).__name__}"
        raise TypeError(msg)
