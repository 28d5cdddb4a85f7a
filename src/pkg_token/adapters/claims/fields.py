"""
Small combinators for decoding JSON token bodies field by field.

A `FieldDecoder` reads one value out of the parsed JSON object. Decoders
compose: `optional_field("exp", timestamp_field)` reads an optional epoch
timestamp, `field("exp", integer)` a required integer.

JSON `null` counts as absent for `optional_field`: `{"sub": null}` and `{}`
both decode to None. `field` still rejects `null` as a wrong type.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Tuple, TypeVar, Union

from ...domain.exceptions import ClaimDecodeError
from ...domain.value_objects import timestamp_from_millis

T = TypeVar("T")

ValueDecoder = Callable[[Any], T]
FieldDecoder = Callable[[Mapping[str, Any]], T]


# --- Value decoders --------------------------------------------------------


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def string(value: Any) -> str:
    if not isinstance(value, str):
        raise ClaimDecodeError(f"Expecting a string but got {_type_name(value)}: {value!r}")
    return value


def integer(value: Any) -> int:
    # JSON has no int/float split; accept 1.0 but not 1.5 or true
    if isinstance(value, bool):
        raise ClaimDecodeError(f"Expecting an integer but got boolean: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ClaimDecodeError(f"Expecting an integer but got {_type_name(value)}: {value!r}")


def timestamp_field(value: Any) -> datetime:
    """Epoch seconds -> milliseconds -> aware UTC datetime."""
    seconds = integer(value)
    try:
        return timestamp_from_millis(seconds * 1000)
    except (OverflowError, ValueError) as exc:
        raise ClaimDecodeError(f"Timestamp out of range: {seconds}") from exc


def audience(value: Any) -> Union[str, Tuple[str, ...]]:
    """`aud` may be a single string or an array of strings."""
    if isinstance(value, list):
        return tuple(string(item) for item in value)
    return string(value)


# --- Field decoders ----------------------------------------------------------


def field(name: str, decoder: ValueDecoder[T]) -> FieldDecoder[T]:
    """Required field: missing key is an error."""

    def _decode(obj: Mapping[str, Any]) -> T:
        if name not in obj:
            raise ClaimDecodeError(f"Expecting an object with a field named `{name}`")
        try:
            return decoder(obj[name])
        except ClaimDecodeError as exc:
            raise ClaimDecodeError(f"Problem with the value at `{name}`: {exc}") from exc

    return _decode


def optional_field(name: str, decoder: ValueDecoder[T]) -> FieldDecoder[Optional[T]]:
    """Optional field: missing key or null gives None, a wrong type is still an error."""
    required = field(name, decoder)

    def _decode(obj: Mapping[str, Any]) -> Optional[T]:
        if obj.get(name) is None:
            return None
        return required(obj)

    return _decode


def json_object_decoder(build: Callable[[Mapping[str, Any]], T]) -> Callable[[str], T]:
    """
    Lift a decoder over a parsed JSON object into a `ClaimDecoder`
    taking the raw body text.
    """

    def _decode(body: str) -> T:
        obj = json.loads(body)
        if not isinstance(obj, dict):
            raise ClaimDecodeError(f"Expecting an object but got {_type_name(obj)}")
        return build(obj)

    return _decode
