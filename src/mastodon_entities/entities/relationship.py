from mastodon_entities.ids import AccountId
from mastodon_entities.models import Entity


class Relationship(Entity):
    """Relationship between the authenticated account and another account."""

    id: AccountId
    following: bool
    followed_by: bool
    blocking: bool
    blocked_by: bool | None = None
    muting: bool
    muting_notifications: bool | None = None
    requested: bool
    domain_blocking: bool
    showing_reblogs: bool | None = None
    endorsed: bool | None = None
    notifying: bool | None = None
    note: str | None = None
