from __future__ import annotations

from dataclasses import dataclass

import pytest
from coola.equality import objects_are_equal
from pydantic import BaseModel, ValidationError

from endpointer import Decoder, JSONDecoder
from tests.helpers import POST_JSON, POST_PARAMETERS, Post


class User(BaseModel):
    id: int
    name: str


@dataclass
class Comment:
    id: int
    text: str


#################################
#     Tests for JSONDecoder     #
#################################


def test_json_decoder_is_decoder() -> None:
    """Test that JSONDecoder implements the Decoder protocol."""
    assert isinstance(JSONDecoder(), Decoder)


def test_json_decoder_repr() -> None:
    """Test the representation of JSONDecoder."""
    assert repr(JSONDecoder()) == "JSONDecoder(strict=False)"


def test_json_decoder_equality() -> None:
    """Test that decoders compare on their options."""
    assert JSONDecoder() == JSONDecoder()
    assert JSONDecoder(strict=True) != JSONDecoder()
    assert hash(JSONDecoder()) == hash(JSONDecoder())


def test_json_decoder_decode_dict() -> None:
    """Test decoding into a dict."""
    assert objects_are_equal(JSONDecoder().decode(POST_JSON, dict), POST_PARAMETERS)


def test_json_decoder_decode_list() -> None:
    """Test decoding into a typed list."""
    assert JSONDecoder().decode(b"[1, 2, 3]", list[int]) == [1, 2, 3]


def test_json_decoder_decode_dataclass() -> None:
    """Test decoding into a dataclass."""
    assert JSONDecoder().decode(POST_JSON, Post) == Post(
        userId=1, id=1, title="Test Post", body="Test Body"
    )


def test_json_decoder_decode_list_of_dataclasses() -> None:
    """Test decoding into a list of dataclasses."""
    content = b'[{"id": 1, "text": "a"}, {"id": 2, "text": "b"}]'
    assert JSONDecoder().decode(content, list[Comment]) == [
        Comment(id=1, text="a"),
        Comment(id=2, text="b"),
    ]


def test_json_decoder_decode_pydantic_model() -> None:
    """Test decoding into a pydantic model."""
    assert JSONDecoder().decode(b'{"id": 7, "name": "Ann"}', User) == User(id=7, name="Ann")


def test_json_decoder_decode_bytes_unchanged() -> None:
    """Test that bytes are returned without decoding."""
    assert JSONDecoder().decode(b"not json", bytes) == b"not json"


def test_json_decoder_lax_mode_coerces() -> None:
    """Test that numeric strings are accepted in lax mode."""
    assert JSONDecoder().decode(b'{"id": "7", "name": "Ann"}', User) == User(id=7, name="Ann")


def test_json_decoder_strict_mode_rejects_coercion() -> None:
    """Test that numeric strings are rejected in strict mode."""
    with pytest.raises(ValidationError):
        JSONDecoder(strict=True).decode(b'{"id": "7", "name": "Ann"}', User)


def test_json_decoder_invalid_json() -> None:
    """Test that invalid JSON raises a validation error."""
    with pytest.raises(ValidationError):
        JSONDecoder().decode(b"{not json", dict)


def test_json_decoder_shape_mismatch() -> None:
    """Test that a payload of the wrong shape raises."""
    with pytest.raises(ValidationError):
        JSONDecoder().decode(b'{"id": 1}', list[int])


def test_json_decoder_missing_field() -> None:
    """Test that a missing field raises."""
    with pytest.raises(ValidationError):
        JSONDecoder().decode(b'{"id": 1}', Post)
