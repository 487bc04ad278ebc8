"""Field-level adapters for converting values while decoding and encoding.

Each adapter is a pure function wrapped into an ``Annotated`` type so entity
declarations can opt into it per field.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, TypeVar

from pydantic import Field, PlainSerializer, PlainValidator

T = TypeVar("T")

_TIMESTAMP_RE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_tolerant_int(value: object) -> int:
    """Accept an integer sent either as a JSON number or as a JSON string."""
    if isinstance(value, bool):
        raise ValueError("expected an integer or a numeric string, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INT_RE.fullmatch(text):
            return int(text)
        raise ValueError(f"expected a numeric string, got {value!r}")
    raise ValueError(f"expected an integer or a numeric string, got {type(value).__name__}")


def parse_tolerant_str(value: object) -> str:
    """Accept a string sent either as a JSON string or as a JSON integer."""
    if isinstance(value, bool):
        raise ValueError("expected a string or an integer, got a boolean")
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    raise ValueError(f"expected a string or an integer, got {type(value).__name__}")


def _parse_offset(text: str) -> timezone:
    if text == "Z":
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    hours, minutes = int(text[1:3]), int(text[4:6])
    if hours > 23 or minutes > 59:
        raise ValueError(f"invalid UTC offset {text!r}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_timestamp(value: object) -> datetime:
    """Decode an RFC 3339 timestamp with a mandatory UTC offset.

    Aware ``datetime`` objects pass through unchanged so models can also be
    constructed directly from Python values.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("timestamp must carry a UTC offset")
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected an RFC 3339 timestamp string, got {type(value).__name__}")
    match = _TIMESTAMP_RE.fullmatch(value)
    if match is None:
        raise ValueError(f"expected an RFC 3339 timestamp like 2019-12-08T03:48:33.901Z, got {value!r}")
    fraction = match["fraction"] or ""
    return datetime(
        int(match["year"]),
        int(match["month"]),
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"]),
        int(fraction[:6].ljust(6, "0")),
        tzinfo=_parse_offset(match["offset"]),
    )


def format_timestamp(value: datetime) -> str:
    """Encode a timestamp as UTC with a ``Z`` suffix."""
    utc = value.astimezone(timezone.utc)
    text = utc.replace(tzinfo=None, microsecond=0).isoformat()
    if utc.microsecond % 1000 == 0:
        return f"{text}.{utc.microsecond // 1000:03d}Z"
    return f"{text}.{utc.microsecond:06d}Z"


TolerantInt = Annotated[
    int,
    PlainValidator(parse_tolerant_int, json_schema_input_type=int | str),
]

TolerantStr = Annotated[
    str,
    PlainValidator(parse_tolerant_str, json_schema_input_type=str | int),
]

Timestamp = Annotated[
    datetime,
    PlainValidator(parse_timestamp, json_schema_input_type=str),
    PlainSerializer(format_timestamp, return_type=str),
]

# A missing key decodes to an empty tuple; an explicit null is still rejected.
DefaultList = Annotated[tuple[T, ...], Field(default_factory=tuple)]
