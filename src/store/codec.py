"""JSON document codec.

This module encodes values and ordered value sequences to canonical JSON
bytes and decodes them back. Decoding is all-or-nothing.
"""

from __future__ import annotations

from collections.abc import Iterable
import json
from typing import Any

from core.constants import JSON_INDENT
from core.errors import DecodeError, EncodeError
from store.value_payload import from_payload, to_payload


def encode(value: object) -> bytes:
    """Encode one value as a canonical JSON document.

    Raises:
        EncodeError: If value is not representable as JSON.
    """
    return _dump(to_payload_checked(value))


def encode_many(values: Iterable[object]) -> bytes:
    """Encode an ordered sequence of values as one JSON array document.

    Raises:
        EncodeError: If any value is not representable as JSON.
    """
    return _dump([to_payload_checked(value) for value in values])


def decode(data: bytes, object_type: Any = None) -> Any:
    """Decode one value from JSON document bytes.

    Args:
        data: Raw document bytes.
        object_type: Optional target type for the document root.

    Returns:
        Decoded value.

    Raises:
        DecodeError: If bytes are not valid JSON or do not match object_type.
    """
    return from_payload(_load(data), object_type)


def decode_many(data: bytes, object_type: Any = None) -> list[Any]:
    """Decode an ordered sequence of values from a JSON array document.

    Raises:
        DecodeError: If the root is not an array or any element mismatches.
    """
    payload = _load(data)
    if not isinstance(payload, list):
        raise DecodeError(
            f"Expected JSON array at document root, got {type(payload).__name__}."
        )
    return [
        _decode_element(item, object_type, index)
        for index, item in enumerate(payload)
    ]


def to_payload_checked(value: object) -> Any:
    """Convert value to a payload, mapping deep recursion to EncodeError."""
    try:
        return to_payload(value)
    except RecursionError as error:
        raise EncodeError("Value nesting is too deep to encode as JSON.") from error


def _decode_element(item: Any, object_type: Any, index: int) -> Any:
    try:
        return from_payload(item, object_type)
    except DecodeError as error:
        raise DecodeError(f"Element {index}: {error}") from error


def _dump(payload: Any) -> bytes:
    try:
        text = json.dumps(
            payload,
            indent=JSON_INDENT,
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as error:
        raise EncodeError(f"Failed to encode JSON document: {error}.") from error
    return (text + "\n").encode("utf-8")


def _load(data: bytes) -> Any:
    try:
        return json.loads(data.decode("utf-8"))
    except UnicodeDecodeError as error:
        raise DecodeError(f"Document is not valid UTF-8: {error.reason}.") from error
    except json.JSONDecodeError as error:
        raise DecodeError(
            f"Document is not valid JSON: {error.msg} (line {error.lineno}, "
            f"column {error.colno})."
        ) from error
