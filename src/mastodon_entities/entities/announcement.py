"""Announcements posted by instance administrators."""

from pydantic import Field

from mastodon_entities.conversion import DefaultList, Timestamp, TolerantInt
from mastodon_entities.entities.custom_emoji import CustomEmoji
from mastodon_entities.entities.status import Tag
from mastodon_entities.ids import AccountId, AnnouncementId, StatusId
from mastodon_entities.models import Entity


class AnnouncementAccount(Entity):
    """An account mentioned in an announcement."""

    id: AccountId
    username: str
    url: str
    acct: str


class AnnouncementStatus(Entity):
    """A status linked from an announcement."""

    id: StatusId
    url: str


class Reaction(Entity):
    """An emoji reaction and how many accounts chose it."""

    name: str = Field(description="The emoji itself, or the shortcode of a custom emoji.")
    count: TolerantInt
    me: bool | None = None
    url: str | None = None
    static_url: str | None = None


class Announcement(Entity):
    id: AnnouncementId
    content: str = Field(description="HTML body of the announcement.")
    starts_at: Timestamp | None = None
    ends_at: Timestamp | None = None
    all_day: bool
    published_at: Timestamp
    updated_at: Timestamp | None = None
    read: bool | None = Field(default=None, description="Only present when the request is authenticated.")
    mentions: DefaultList[AnnouncementAccount]
    statuses: DefaultList[AnnouncementStatus]
    tags: DefaultList[Tag]
    emojis: DefaultList[CustomEmoji]
    reactions: DefaultList[Reaction]
