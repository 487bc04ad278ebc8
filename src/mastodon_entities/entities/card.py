from pydantic import Field

from mastodon_entities.enums import CardType
from mastodon_entities.models import Entity


class Card(Entity):
    """Rich preview generated for the first link in a status."""

    url: str
    title: str
    description: str
    card_type: CardType = Field(alias="type")
    image: str | None = None
    author_name: str | None = None
    author_url: str | None = None
    provider_name: str | None = None
    provider_url: str | None = None
    html: str | None = None
    width: int | None = None
    height: int | None = None
    embed_url: str | None = None
    blurhash: str | None = None
