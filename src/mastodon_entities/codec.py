"""Byte-level entry points used by the transport layer.

``decode`` accepts any type pydantic can adapt, so callers can decode a single
entity as well as containers such as ``list[Status]`` for timeline responses.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar, get_args, get_origin

from pydantic import TypeAdapter, ValidationError

from mastodon_entities.errors import DecodeError
from mastodon_entities.ids import TypedId

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ANY: TypeAdapter[Any] = TypeAdapter(Any)


@lru_cache(maxsize=64)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def _type_name(tp: Any) -> str:
    origin = get_origin(tp)
    if origin is not None:
        return f"{_type_name(origin)}[{', '.join(_type_name(arg) for arg in get_args(tp))}]"
    return getattr(tp, "__name__", None) or repr(tp)


def decode(tp: type[T], data: str | bytes) -> T:
    """Decode JSON text into ``tp``, raising ``DecodeError`` on any mismatch."""
    try:
        value: T = _adapter(tp).validate_json(data)
    except ValidationError as exc:
        logger.debug("Failed to decode %s from %d bytes", _type_name(tp), len(data))
        raise DecodeError.from_validation_error(_type_name(tp), exc) from exc
    return value


def decode_value(tp: type[T], value: object) -> T:
    """Decode an already parsed JSON value into ``tp``."""
    try:
        result: T = _adapter(tp).validate_python(value)
    except ValidationError as exc:
        logger.debug("Failed to decode %s", _type_name(tp))
        raise DecodeError.from_validation_error(_type_name(tp), exc) from exc
    return result


def _encode_unknown(value: object) -> str:
    if isinstance(value, TypedId):
        return str(value)
    raise TypeError(f"Cannot encode {type(value).__name__} as JSON")


def encode(value: object) -> bytes:
    """Encode an entity, a payload, an identifier, or a container of them as compact JSON."""
    return _ANY.dump_json(value, fallback=_encode_unknown)
