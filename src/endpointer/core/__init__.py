r"""Configuration and validation shared by the client and transports."""

from __future__ import annotations

__all__ = [
    "DEFAULT_CONFIGURATION",
    "DEFAULT_TIMEOUT",
    "NetworkConfiguration",
    "validate_decoder",
    "validate_timeout",
]

from endpointer.core.config import DEFAULT_CONFIGURATION, DEFAULT_TIMEOUT, NetworkConfiguration
from endpointer.core.validation import validate_decoder, validate_timeout
