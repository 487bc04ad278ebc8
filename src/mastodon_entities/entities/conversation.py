from mastodon_entities.conversion import DefaultList
from mastodon_entities.entities.account import Account
from mastodon_entities.entities.status import Status
from mastodon_entities.ids import ConversationId
from mastodon_entities.models import Entity


class Conversation(Entity):
    """A direct message thread."""

    id: ConversationId
    accounts: DefaultList[Account]
    unread: bool
    last_status: Status | None = None
