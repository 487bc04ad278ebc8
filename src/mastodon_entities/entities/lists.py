from mastodon_entities.enums import RepliesPolicy
from mastodon_entities.ids import ListId
from mastodon_entities.models import Entity


class List(Entity):
    """A user-defined list of accounts."""

    id: ListId
    title: str
    replies_policy: RepliesPolicy | None = None
