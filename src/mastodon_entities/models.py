"""Base classes for everything that crosses the wire."""

from __future__ import annotations

import logging
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, ValidationError, model_serializer

from mastodon_entities.errors import DecodeError

logger = logging.getLogger(__name__)


class WireModel(BaseModel):
    """Immutable JSON object whose absent optional fields are left out when encoded.

    A missing key and an explicit ``null`` both decode to ``None``; a field
    holding ``None`` is omitted from the encoded object rather than written as
    ``null``.
    """

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}

    @classmethod
    def from_wire(cls, obj: object) -> Self:
        """Decode an already parsed JSON value."""
        try:
            return cls.model_validate(obj)
        except ValidationError as exc:
            logger.debug("Failed to decode %s: %d error(s)", cls.__name__, exc.error_count())
            raise DecodeError.from_validation_error(cls.__name__, exc) from exc

    @classmethod
    def from_json(cls, data: str | bytes) -> Self:
        """Decode JSON text."""
        try:
            return cls.model_validate_json(data)
        except ValidationError as exc:
            logger.debug("Failed to decode %s: %d error(s)", cls.__name__, exc.error_count())
            raise DecodeError.from_validation_error(cls.__name__, exc) from exc

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        return self.model_dump_json()


class Entity(WireModel):
    """A resource returned by the API. Keys the model does not know are ignored."""

    model_config = ConfigDict(extra="ignore")


class Payload(WireModel):
    """The body of a mutating request. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")


class Empty(Entity):
    """An empty JSON object, returned by endpoints with nothing to report."""
