"""Type-safe identifiers.

Every resource kind exposed by the API gets its own identifier class. All of
them hold an opaque string, but an ``AccountId`` never compares equal to a
``StatusId`` and a type checker refuses to pass one where the other is
expected.

The API is not consistent about the JSON type of ids: most endpoints send
strings, some older ones send numbers. Decoding accepts both and always keeps
the string form; encoding always emits a string.
"""

from __future__ import annotations

from typing import Any, ClassVar, NoReturn, Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class TypedId:
    """Base class for identifiers of one resource kind."""

    __slots__ = ("_value",)

    kind: ClassVar[str] = ""

    _value: str

    def __init_subclass__(cls, kind: str = "", **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.kind = kind or cls.__name__

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"{type(self).__name__} expects a str, got {type(value).__name__}")
        if not value:
            raise ValueError(f"{type(self).__name__} must not be empty")
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> str:
        return self._value

    @classmethod
    def from_wire(cls, value: object) -> Self:
        """Decode a JSON string or JSON integer into this identifier kind."""
        if isinstance(value, cls):
            return value
        if isinstance(value, TypedId):
            raise ValueError(f"expected {cls.__name__}, got {type(value).__name__}")
        if isinstance(value, bool):
            raise ValueError(f"{cls.__name__} cannot be a boolean")
        if isinstance(value, int):
            return cls(str(value))
        if isinstance(value, str):
            return cls(value)
        raise ValueError(f"{cls.__name__} must be a string or an integer, got {type(value).__name__}")

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Self], tuple[str]]:
        return type(self), (self._value,)

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._value == other._value  # type: ignore[attr-defined, no-any-return]
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.kind, self._value))

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_wire,
            json_schema_input_schema=core_schema.union_schema(
                [core_schema.str_schema(min_length=1), core_schema.int_schema()]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )


class AccountId(TypedId, kind="account"):
    __slots__ = ()


class AnnouncementId(TypedId, kind="announcement"):
    __slots__ = ()


class AttachmentId(TypedId, kind="attachment"):
    __slots__ = ()


class ConversationId(TypedId, kind="conversation"):
    __slots__ = ()


class CustomEmojiId(TypedId, kind="custom_emoji"):
    __slots__ = ()


class DomainBlockId(TypedId, kind="domain_block"):
    __slots__ = ()


class FilterId(TypedId, kind="filter"):
    __slots__ = ()


class ListId(TypedId, kind="list"):
    __slots__ = ()


class MarkerTimelineId(TypedId, kind="marker_timeline"):
    """Position inside a timeline recorded by a marker (a status or notification id)."""

    __slots__ = ()


class NotificationId(TypedId, kind="notification"):
    __slots__ = ()


class PushSubscriptionId(TypedId, kind="push_subscription"):
    __slots__ = ()


class ReportId(TypedId, kind="report"):
    __slots__ = ()


class RoleId(TypedId, kind="role"):
    __slots__ = ()


class RuleId(TypedId, kind="rule"):
    __slots__ = ()


class StatusId(TypedId, kind="status"):
    __slots__ = ()


class WarningPresetId(TypedId, kind="warning_preset"):
    __slots__ = ()


ID_TYPES: tuple[type[TypedId], ...] = (
    AccountId,
    AnnouncementId,
    AttachmentId,
    ConversationId,
    CustomEmojiId,
    DomainBlockId,
    FilterId,
    ListId,
    MarkerTimelineId,
    NotificationId,
    PushSubscriptionId,
    ReportId,
    RoleId,
    RuleId,
    StatusId,
    WarningPresetId,
)
