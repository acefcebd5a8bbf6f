"""JSON encoding and typed decoding backed by pydantic TypeAdapters."""

from __future__ import annotations

import functools
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from nautobot_cli.client.errors import DecodeError

T = TypeVar("T")

_ANY = TypeAdapter(Any)


@functools.lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def to_json(value: Any) -> bytes:
    """Encode *value* (plain data or pydantic models) as JSON bytes."""
    return _ANY.dump_json(value, by_alias=True)


def parse_json(body: bytes | str, type_: type[T]) -> T:
    """Decode a JSON document into *type_*."""
    try:
        result: T = _adapter(type_).validate_json(body)
    except ValidationError as exc:
        raise DecodeError(f"Cannot decode response as {_type_name(type_)}: {exc}") from exc
    return result


def parse_data(data: Any, type_: type[T]) -> T:
    """Validate already-parsed JSON data (e.g. an envelope's results) into *type_*."""
    try:
        result: T = _adapter(type_).validate_python(data)
    except ValidationError as exc:
        raise DecodeError(f"Cannot decode results as {_type_name(type_)}: {exc}") from exc
    return result


def _type_name(type_: Any) -> str:
    return type_.__name__ if isinstance(type_, type) else str(type_)
