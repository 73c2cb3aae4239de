"""Value and JSON payload conversion helpers.

This module converts caller value types (dataclasses, mappings, sequences,
scalars, or classes with ``to_dict``/``from_dict``) to plain JSON payloads
and back, guided by type hints on the decode side.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import MISSING, fields, is_dataclass
from enum import Enum
import types
from typing import Any, Union, get_args, get_origin, get_type_hints

from core.errors import DecodeError, EncodeError

_SCALAR_TYPES = (str, int, float, bool, type(None))


def to_payload(value: object) -> Any:
    """Convert a value into a JSON-compatible payload.

    Args:
        value: Value to convert.

    Returns:
        Payload made of dicts, lists and JSON scalars.

    Raises:
        EncodeError: If value contains a cycle or an unsupported type.
    """
    return _to_payload(value, set(), "$")


def _to_payload(value: object, active: set[int], location: str) -> Any:
    if isinstance(value, Enum):
        return _to_payload(value.value, active, location)
    if isinstance(value, _SCALAR_TYPES):
        return value
    if id(value) in active:
        raise EncodeError(f"Cannot encode cyclic reference at {location}.")
    active.add(id(value))
    try:
        return _container_payload(value, active, location)
    finally:
        active.discard(id(value))


def _container_payload(value: object, active: set[int], location: str) -> Any:
    if isinstance(value, type):
        raise EncodeError(f"Cannot encode class object {value.__name__} at {location}.")
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return _to_payload(to_dict(), active, location)
    if is_dataclass(value):
        return {
            item.name: _to_payload(getattr(value, item.name), active, f"{location}.{item.name}")
            for item in fields(value)
        }
    if isinstance(value, Mapping):
        payload: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodeError(
                    f"Cannot encode mapping key {key!r} at {location}: JSON keys must be strings."
                )
            payload[key] = _to_payload(item, active, f"{location}.{key}")
        return payload
    if isinstance(value, (list, tuple)):
        return [
            _to_payload(item, active, f"{location}[{index}]")
            for index, item in enumerate(value)
        ]
    raise EncodeError(
        f"Cannot encode value of type {type(value).__name__} at {location}. "
        "Use dataclasses, mappings, lists, or JSON scalars."
    )


def from_payload(payload: Any, object_type: Any = None) -> Any:
    """Convert a JSON payload into an instance of object_type.

    Args:
        payload: Parsed JSON payload.
        object_type: Target type; the payload is returned as-is when None.

    Returns:
        Converted value.

    Raises:
        DecodeError: If payload does not match the target shape.
    """
    if object_type is None:
        return payload
    return _from_payload(payload, object_type, "$")


def _from_payload(payload: Any, target: Any, location: str) -> Any:
    if target is Any or target is object:
        return payload
    origin = get_origin(target)
    if origin is Union or origin is types.UnionType:
        return _union_from_payload(payload, get_args(target), location)
    if origin is not None:
        return _generic_from_payload(payload, origin, get_args(target), location)
    from_dict = getattr(target, "from_dict", None)
    if callable(from_dict):
        try:
            return from_dict(payload)
        except (KeyError, TypeError, ValueError) as error:
            raise DecodeError(
                f"{target.__name__}.from_dict rejected payload at {location}: {error}."
            ) from error
    if is_dataclass(target) and isinstance(target, type):
        return _dataclass_from_payload(payload, target, location)
    if isinstance(target, type) and issubclass(target, Enum):
        try:
            return target(payload)
        except ValueError as error:
            raise DecodeError(
                f"Invalid {target.__name__} value {payload!r} at {location}."
            ) from error
    return _scalar_from_payload(payload, target, location)


def _union_from_payload(payload: Any, options: tuple[Any, ...], location: str) -> Any:
    if payload is None and type(None) in options:
        return None
    failures: list[str] = []
    for option in options:
        if option is type(None):
            continue
        try:
            return _from_payload(payload, option, location)
        except DecodeError as error:
            failures.append(str(error))
    raise DecodeError(f"No union member matched at {location}: {'; '.join(failures)}")


def _generic_from_payload(
    payload: Any,
    origin: Any,
    args: tuple[Any, ...],
    location: str,
) -> Any:
    if origin in (list, Sequence) or origin is tuple:
        if not isinstance(payload, list):
            raise _mismatch("array", payload, location)
        if origin is tuple and args and args[-1] is not Ellipsis:
            if len(args) != len(payload):
                raise DecodeError(
                    f"Expected array of {len(args)} items at {location}, got {len(payload)}."
                )
            return tuple(
                _from_payload(item, item_type, f"{location}[{index}]")
                for index, (item, item_type) in enumerate(zip(payload, args))
            )
        item_type = args[0] if args else Any
        items = [
            _from_payload(item, item_type, f"{location}[{index}]")
            for index, item in enumerate(payload)
        ]
        return tuple(items) if origin is tuple else items
    if origin in (dict, Mapping):
        if not isinstance(payload, dict):
            raise _mismatch("object", payload, location)
        if args and args[0] not in (str, Any):
            raise DecodeError(
                f"Unsupported mapping key type {args[0]!r} at {location}: JSON keys are strings."
            )
        value_type = args[1] if len(args) == 2 else Any
        return {
            key: _from_payload(item, value_type, f"{location}.{key}")
            for key, item in payload.items()
        }
    raise DecodeError(f"Unsupported target type {origin!r} at {location}.")


def _dataclass_from_payload(payload: Any, target: type, location: str) -> Any:
    if not isinstance(payload, dict):
        raise _mismatch("object", payload, location)
    hints = get_type_hints(target)
    arguments: dict[str, Any] = {}
    for item in fields(target):
        if not item.init:
            continue
        if item.name in payload:
            arguments[item.name] = _from_payload(
                payload[item.name],
                hints.get(item.name, Any),
                f"{location}.{item.name}",
            )
        elif item.default is MISSING and item.default_factory is MISSING:
            raise DecodeError(
                f"Missing required field '{item.name}' for {target.__name__} at {location}."
            )
    return target(**arguments)


def _scalar_from_payload(payload: Any, target: Any, location: str) -> Any:
    if target is bool:
        if isinstance(payload, bool):
            return payload
        raise _mismatch("boolean", payload, location)
    if target is int:
        if isinstance(payload, int) and not isinstance(payload, bool):
            return payload
        raise _mismatch("integer", payload, location)
    if target is float:
        if isinstance(payload, (int, float)) and not isinstance(payload, bool):
            return float(payload)
        raise _mismatch("number", payload, location)
    if target in (str, dict, list):
        if isinstance(payload, target):
            return payload
        raise _mismatch(target.__name__, payload, location)
    if target is type(None):
        if payload is None:
            return None
        raise _mismatch("null", payload, location)
    raise DecodeError(f"Unsupported target type {target!r} at {location}.")


def _mismatch(expected: str, payload: Any, location: str) -> DecodeError:
    return DecodeError(
        f"Expected {expected} at {location}, got {type(payload).__name__}."
    )
