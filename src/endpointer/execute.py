r"""Canonical build, send and resolve sequence.

Every adapter of ``NetworkClient`` runs ``execute`` exactly once per
logical request, so they all report the same outcome for the same
endpoint and transport behavior.
"""

from __future__ import annotations

__all__ = ["execute"]

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

from endpointer.builder import build_request
from endpointer.resolver import resolve_response
from endpointer.result import Failure

if TYPE_CHECKING:
    from endpointer.decoder import Decoder
    from endpointer.endpoint import Endpoint
    from endpointer.result import Result
    from endpointer.transport import Transport

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


async def execute(
    endpoint: Endpoint,
    transport: Transport,
    decoder: Decoder,
    type_: type[T],
) -> Result[T]:
    r"""Build, send and resolve one request.

    A build failure is returned directly and the transport is never
    called. Transport failures and response checks are resolved by
    ``endpointer.resolver.resolve_response``.

    Args:
        endpoint: The endpoint to execute.
        transport: The transport sending the request.
        decoder: The decoder used for the response body.
        type_: The type requested by the caller.

    Returns:
        The result of the request.

    Raises:
        asyncio.CancelledError: If the calling task is cancelled while
            the request is in flight. Cancellation is never turned into
            a result here.
    """
    built = build_request(endpoint)
    if isinstance(built, Failure):
        logger.debug(f"Request to {endpoint.path} could not be built: {built.error}")
        return built
    request = built.value
    try:
        response = await transport.send(request)
    except asyncio.CancelledError:
        raise
    except Exception as exc:  # noqa: BLE001
        return resolve_response(None, None, exc, decoder, type_)
    return resolve_response(response.content, response.status_code, None, decoder, type_)
