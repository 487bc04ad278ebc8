"""Incremental construction of request payloads.

A builder collects values until ``build()`` validates them and returns an
immutable payload. Every payload exposes exactly one way to obtain a builder,
``Payload.builder(...)``, whose arguments are the values the payload cannot do
without.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, Self, TypeVar

from pydantic import ValidationError

from mastodon_entities.errors import BuildError
from mastodon_entities.models import Payload

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Payload)


class RequestBuilder(Generic[P]):
    payload_type: ClassVar[type[Payload]]
    # Names that must be set before build(); defaults to the payload's required fields.
    required: ClassVar[tuple[str, ...] | None] = None

    # Subclasses take the values the payload cannot do without as constructor arguments.
    def __init__(self, **seed: Any) -> None:
        self._values: dict[str, Any] = dict(seed)

    def _set(self, name: str, value: Any) -> Self:
        self._values[name] = value
        return self

    def _required_names(self) -> tuple[str, ...]:
        if self.required is not None:
            return self.required
        return tuple(name for name, info in self.payload_type.model_fields.items() if info.is_required())

    def missing(self) -> list[str]:
        """Required names that have not been set yet."""
        return [name for name in self._required_names() if name not in self._values]

    def _payload_data(self) -> dict[str, Any]:
        return dict(self._values)

    def build(self) -> P:
        name = self.payload_type.__name__
        missing = self.missing()
        if missing:
            logger.debug("Cannot build %s, missing %s", name, missing)
            raise BuildError(name, missing=missing)
        try:
            payload = self.payload_type.model_validate(self._payload_data())
        except ValidationError as exc:
            logger.debug("Cannot build %s: %d error(s)", name, exc.error_count())
            raise BuildError(name, errors=exc.errors(include_url=False)) from exc
        return payload  # type: ignore[return-value]

    def __repr__(self) -> str:
        values = ", ".join(f"{key}={value!r}" for key, value in self._values.items())
        return f"{type(self).__name__}({values})"
