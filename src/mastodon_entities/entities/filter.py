from pydantic import Field

from mastodon_entities.conversion import Timestamp
from mastodon_entities.enums import FilterContext
from mastodon_entities.ids import FilterId
from mastodon_entities.models import Entity


class Filter(Entity):
    """A keyword filter (v1 API)."""

    id: FilterId
    phrase: str
    context: tuple[FilterContext, ...]
    expires_at: Timestamp | None = None
    irreversible: bool = Field(description="Drop matching statuses on the server instead of hiding them.")
    whole_word: bool
