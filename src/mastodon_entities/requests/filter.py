from __future__ import annotations

from collections.abc import Iterable

from pydantic import Field

from mastodon_entities.enums import FilterContext
from mastodon_entities.models import Payload
from mastodon_entities.requests.builder import RequestBuilder


class AddFilterRequest(Payload):
    """Form used to create a keyword filter."""

    phrase: str = Field(min_length=1)
    context: tuple[FilterContext, ...] = Field(min_length=1)
    irreversible: bool | None = None
    whole_word: bool | None = None
    expires_in: int | None = Field(default=None, gt=0, description="Seconds until the filter expires.")

    @classmethod
    def builder(cls, phrase: str, context: Iterable[FilterContext]) -> AddFilterRequestBuilder:
        return AddFilterRequestBuilder(phrase, context)


class AddFilterRequestBuilder(RequestBuilder[AddFilterRequest]):
    payload_type = AddFilterRequest

    def __init__(self, phrase: str, context: Iterable[FilterContext]) -> None:
        super().__init__(phrase=phrase, context=tuple(context))

    def irreversible(self, value: bool) -> AddFilterRequestBuilder:
        return self._set("irreversible", value)

    def whole_word(self, value: bool) -> AddFilterRequestBuilder:
        return self._set("whole_word", value)

    def expires_in(self, seconds: int) -> AddFilterRequestBuilder:
        return self._set("expires_in", seconds)
