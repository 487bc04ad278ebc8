"""Statuses and the small objects embedded in them."""

from pydantic import Field

from mastodon_entities.conversion import DefaultList, Timestamp, TolerantInt
from mastodon_entities.entities.account import Account
from mastodon_entities.entities.attachment import Attachment
from mastodon_entities.entities.card import Card
from mastodon_entities.entities.custom_emoji import CustomEmoji
from mastodon_entities.enums import Visibility
from mastodon_entities.ids import AccountId, StatusId
from mastodon_entities.models import Entity


class Mention(Entity):
    """A mention of another user."""

    id: AccountId
    username: str
    url: str = Field(description="URL of the user's profile (can be remote).")
    acct: str = Field(description="Equals ``username`` for local users, includes ``@domain`` for remote ones.")


class TagHistory(Entity):
    """Usage statistics for one day.

    The server sends these numbers as strings, some versions as numbers.
    """

    day: TolerantInt = Field(description="UNIX timestamp of midnight of the given day.")
    uses: TolerantInt
    accounts: TolerantInt


class Tag(Entity):
    """A hashtag used within a status, or a hashtag on its own.

    When embedded in a status ``history`` is usually absent and ``following``
    is unset.
    """

    name: str = Field(description="The hashtag, not including the preceding ``#``.")
    url: str
    history: DefaultList[TagHistory]
    following: bool | None = None


class Application(Entity):
    name: str
    website: str | None = None


class Status(Entity):
    id: StatusId
    uri: str = Field(description="A Fediverse-unique resource ID.")
    url: str | None = None
    account: Account
    in_reply_to_id: StatusId | None = None
    in_reply_to_account_id: AccountId | None = None
    reblog: "Status | None" = None
    content: str = Field(description="HTML body of the status.")
    created_at: Timestamp
    edited_at: Timestamp | None = None
    emojis: DefaultList[CustomEmoji]
    replies_count: TolerantInt | None = None
    reblogs_count: TolerantInt
    favourites_count: TolerantInt
    reblogged: bool | None = None
    favourited: bool | None = None
    muted: bool | None = None
    bookmarked: bool | None = None
    sensitive: bool
    spoiler_text: str
    visibility: Visibility
    media_attachments: DefaultList[Attachment]
    mentions: DefaultList[Mention]
    tags: DefaultList[Tag]
    card: Card | None = None
    application: Application | None = None
    language: str | None = None
    pinned: bool | None = None


Status.model_rebuild()  # necessary for recursive types
