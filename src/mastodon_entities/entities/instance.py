"""Information about the server."""

from pydantic import Field

from mastodon_entities.conversion import DefaultList, TolerantInt
from mastodon_entities.entities.account import Account
from mastodon_entities.ids import RuleId
from mastodon_entities.models import Entity


class Rule(Entity):
    """A rule users of the instance agree to follow."""

    id: RuleId
    text: str


class StreamingUrls(Entity):
    streaming_api: str | None = None


class Stats(Entity):
    user_count: TolerantInt
    status_count: TolerantInt
    domain_count: TolerantInt


class Instance(Entity):
    """Metadata the server publishes about itself (v1 API)."""

    uri: str = Field(description="The domain name of the instance.")
    title: str
    short_description: str | None = None
    description: str
    email: str
    version: str
    urls: StreamingUrls | None = None
    stats: Stats | None = None
    thumbnail: str | None = None
    languages: DefaultList[str]
    registrations: bool | None = None
    approval_required: bool | None = None
    invites_enabled: bool | None = None
    contact_account: Account | None = None
    rules: DefaultList[Rule]
