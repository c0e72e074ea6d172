r"""Configuration dataclass and defaults for network clients.

This module provides configuration constants and an immutable
configuration object shared by ``NetworkClient`` and ``HttpxTransport``.
"""

from __future__ import annotations

__all__ = ["DEFAULT_CONFIGURATION", "DEFAULT_TIMEOUT", "NetworkConfiguration"]

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from endpointer.core.validation import validate_decoder, validate_timeout
from endpointer.decoder import JSONDecoder

if TYPE_CHECKING:
    import httpx

    from endpointer.decoder import Decoder


# Default timeout in seconds for HTTP requests
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class NetworkConfiguration:
    """Configuration of a network client.

    Instances are immutable and may be shared by any number of clients
    and in-flight requests.

    Args:
        timeout: Maximum seconds to wait for the server. Must be > 0.
            Enforced by the transport; expiry is reported as a timeout
            error.
        client_options: Extra keyword arguments used to create the
            underlying ``httpx.AsyncClient`` (e.g. ``http2``, ``proxy``,
            ``verify``, ``limits``).
        decoder: The decoder used to turn response bodies into values.

    Example:
        ```pycon
        >>> from endpointer.core.config import NetworkConfiguration
        >>> config = NetworkConfiguration()  # Use defaults
        >>> config.timeout
        30.0
        >>> merged = config.merge(timeout=5.0)  # Override specific parameters
        >>> merged.timeout
        5.0
        >>> config.timeout  # Original unchanged
        30.0

        ```
    """

    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT
    client_options: Mapping[str, Any] = field(default_factory=dict)
    decoder: Decoder = field(default_factory=JSONDecoder)

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If the timeout is invalid.
            TypeError: If the decoder has no ``decode`` method.
        """
        validate_timeout(self.timeout)
        validate_decoder(self.decoder)
        # Freeze a private copy so later changes to the caller's dict are not seen
        object.__setattr__(self, "client_options", MappingProxyType(dict(self.client_options)))

    def merge(self, **overrides: Any) -> NetworkConfiguration:
        """Create a new configuration with specified parameters
        overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new NetworkConfiguration instance with overrides applied.

        Example:
            ```pycon
            >>> from endpointer.core.config import NetworkConfiguration
            >>> config = NetworkConfiguration(timeout=10.0)
            >>> config.merge(timeout=None).timeout
            10.0

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_client_kwargs(self) -> dict[str, Any]:
        """Return the keyword arguments used to create an
        ``httpx.AsyncClient``.

        Example:
            ```pycon
            >>> from endpointer.core.config import NetworkConfiguration
            >>> NetworkConfiguration(timeout=5.0, client_options={"http2": False}).to_client_kwargs()
            {'http2': False, 'timeout': 5.0}

            ```
        """
        return {**self.client_options, "timeout": self.timeout}


DEFAULT_CONFIGURATION = NetworkConfiguration()
