"""Lookup of entity types by their kind name."""

from collections.abc import Mapping
from types import MappingProxyType

from mastodon_entities import entities
from mastodon_entities.models import Empty, Entity

ENTITY_KINDS: Mapping[str, type[Entity]] = MappingProxyType(
    {
        "account": entities.Account,
        "admin_account": entities.AdminAccount,
        "admin_report": entities.AdminReport,
        "announcement": entities.Announcement,
        "attachment": entities.Attachment,
        "card": entities.Card,
        "context": entities.Context,
        "conversation": entities.Conversation,
        "custom_emoji": entities.CustomEmoji,
        "domain_block": entities.DomainBlock,
        "empty": Empty,
        "filter": entities.Filter,
        "instance": entities.Instance,
        "list": entities.List,
        "marker": entities.Marker,
        "markers": entities.Markers,
        "notification": entities.Notification,
        "preferences": entities.Preferences,
        "relationship": entities.Relationship,
        "report": entities.Report,
        "search_result": entities.SearchResult,
        "status": entities.Status,
        "subscription": entities.Subscription,
        "tag": entities.Tag,
    }
)

_KIND_ALIASES = {
    "emoji": "custom_emoji",
    "preference": "preferences",
    "push_subscription": "subscription",
    "search": "search_result",
    "toot": "status",
}


def resolve_kind(name: str) -> type[Entity]:
    key = name.strip().lower().replace("-", "_")
    key = _KIND_ALIASES.get(key, key)
    try:
        return ENTITY_KINDS[key]
    except KeyError:
        raise ValueError(f"Unsupported entity kind '{name}'. Supported: {sorted(ENTITY_KINDS)}") from None
