from datetime import date

from pydantic import Field

from mastodon_entities.conversion import DefaultList, Timestamp, TolerantInt
from mastodon_entities.entities.custom_emoji import CustomEmoji
from mastodon_entities.enums import Visibility
from mastodon_entities.ids import AccountId
from mastodon_entities.models import Entity


class MetadataField(Entity):
    """A name/value pair shown on a profile."""

    name: str
    value: str
    verified_at: Timestamp | None = Field(
        default=None,
        description="When the link in ``value`` was verified, if it was.",
    )


class Source(Entity):
    """Profile data in plain text, only returned for the authenticated account."""

    note: str | None = None
    fields: DefaultList[MetadataField]
    privacy: Visibility | None = None
    sensitive: bool | None = None
    language: str | None = None
    follow_requests_count: TolerantInt | None = None


class Account(Entity):
    id: AccountId
    username: str
    acct: str = Field(description="Equals ``username`` for local users, includes ``@domain`` for remote ones.")
    display_name: str
    locked: bool
    bot: bool | None = None
    group: bool | None = None
    discoverable: bool | None = None
    created_at: Timestamp
    note: str
    url: str
    avatar: str
    avatar_static: str
    header: str
    header_static: str
    followers_count: TolerantInt
    following_count: TolerantInt
    statuses_count: TolerantInt
    last_status_at: date | None = None
    emojis: DefaultList[CustomEmoji]
    fields: DefaultList[MetadataField]
    moved: "Account | None" = Field(default=None, description="The account this one has migrated to.")
    source: Source | None = None


Account.model_rebuild()  # necessary for recursive types
