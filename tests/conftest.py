from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from endpointer import JSONDecoder, NetworkClient, TransportResponse
from tests.helpers import POST_JSON, StubTransport

if TYPE_CHECKING:
    from endpointer import Decoder


@pytest.fixture
def decoder() -> Decoder:
    """Create the default JSON decoder."""
    return JSONDecoder()


@pytest.fixture
def stub_transport() -> StubTransport:
    """Create a transport answering 200 with a JSON post."""
    return StubTransport(response=TransportResponse(content=POST_JSON, status_code=200))


@pytest.fixture
def client(stub_transport: StubTransport) -> NetworkClient:
    """Create a client sending requests with the stub transport."""
    return NetworkClient(transport=stub_transport)
