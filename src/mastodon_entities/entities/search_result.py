from mastodon_entities.conversion import DefaultList
from mastodon_entities.entities.account import Account
from mastodon_entities.entities.status import Status, Tag
from mastodon_entities.models import Entity


class SearchResult(Entity):
    """Results of a search. Result types that were not requested are absent on the wire."""

    accounts: DefaultList[Account]
    statuses: DefaultList[Status]
    hashtags: DefaultList[Tag]
