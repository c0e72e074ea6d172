from __future__ import annotations

import httpx
import pytest

from endpointer import JSONDecoder
from endpointer.core.validation import validate_decoder, validate_timeout

######################################
#     Tests for validate_timeout     #
######################################


@pytest.mark.parametrize("timeout", [0.1, 1, 10.0, 30])
def test_validate_timeout_valid(timeout: float) -> None:
    """Test that positive timeouts are accepted."""
    validate_timeout(timeout)


def test_validate_timeout_httpx_timeout() -> None:
    """Test that httpx.Timeout objects are accepted."""
    validate_timeout(httpx.Timeout(5.0, connect=1.0))


@pytest.mark.parametrize("timeout", [0, 0.0, -1, -0.5])
def test_validate_timeout_invalid(timeout: float) -> None:
    """Test that non-positive timeouts are rejected."""
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        validate_timeout(timeout)


######################################
#     Tests for validate_decoder     #
######################################


def test_validate_decoder_valid() -> None:
    """Test that JSONDecoder is accepted."""
    validate_decoder(JSONDecoder())


def test_validate_decoder_duck_typed() -> None:
    """Test that any object with a decode method is accepted."""

    class RawDecoder:
        def decode(self, content: bytes, type_: type) -> bytes:
            return content

    validate_decoder(RawDecoder())


@pytest.mark.parametrize("decoder", [None, "json", object()])
def test_validate_decoder_invalid(decoder: object) -> None:
    """Test that objects without a decode method are rejected."""
    with pytest.raises(TypeError, match=r"decoder must have a callable decode method"):
        validate_decoder(decoder)
