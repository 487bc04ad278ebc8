from mastodon_entities.conversion import DefaultList
from mastodon_entities.entities.status import Status
from mastodon_entities.models import Entity


class Context(Entity):
    """The statuses above and below a status in its thread."""

    ancestors: DefaultList[Status]
    descendants: DefaultList[Status]
