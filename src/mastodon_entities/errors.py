"""Error kinds raised by decoding and request building."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError


def _format_location(loc: Sequence[int | str]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


class DecodeError(ValueError):
    """Raised when a wire value cannot be decoded into the requested type."""

    def __init__(self, target: str, errors: Sequence[dict[str, Any]] = ()) -> None:
        self.target = target
        self.errors = list(errors)
        details = "; ".join(f"{_format_location(e.get('loc', ()))}: {e.get('msg', '')}" for e in self.errors)
        message = f"Cannot decode {target}"
        super().__init__(f"{message}: {details}" if details else message)

    @classmethod
    def from_validation_error(cls, target: str, exc: ValidationError) -> DecodeError:
        return cls(target, exc.errors(include_url=False))


class BuildError(ValueError):
    """Raised when a request builder cannot be finalized into a payload."""

    def __init__(
        self,
        payload: str,
        missing: Sequence[str] = (),
        errors: Sequence[dict[str, Any]] = (),
    ) -> None:
        self.payload = payload
        self.missing = tuple(missing)
        self.errors = list(errors)
        if self.missing:
            reason = f"missing required field(s): {', '.join(self.missing)}"
        else:
            reason = "; ".join(f"{_format_location(e.get('loc', ()))}: {e.get('msg', '')}" for e in self.errors)
        super().__init__(f"Cannot build {payload}: {reason}")
