"""Entities returned by the API."""

from mastodon_entities.entities.account import Account, MetadataField, Source
from mastodon_entities.entities.admin import AdminAccount, AdminReport, DomainBlock, Ip, Role
from mastodon_entities.entities.announcement import Announcement, AnnouncementAccount, AnnouncementStatus, Reaction
from mastodon_entities.entities.attachment import Attachment, AttachmentMeta, ImageDetails
from mastodon_entities.entities.card import Card
from mastodon_entities.entities.context import Context
from mastodon_entities.entities.conversation import Conversation
from mastodon_entities.entities.custom_emoji import CustomEmoji
from mastodon_entities.entities.filter import Filter
from mastodon_entities.entities.instance import Instance, Rule, Stats, StreamingUrls
from mastodon_entities.entities.lists import List
from mastodon_entities.entities.marker import Marker, Markers
from mastodon_entities.entities.notification import Notification
from mastodon_entities.entities.preferences import Preferences
from mastodon_entities.entities.push import Alerts, Subscription
from mastodon_entities.entities.relationship import Relationship
from mastodon_entities.entities.report import Report
from mastodon_entities.entities.search_result import SearchResult
from mastodon_entities.entities.status import Application, Mention, Status, Tag, TagHistory

__all__ = [
    "Account",
    "AdminAccount",
    "AdminReport",
    "Alerts",
    "Announcement",
    "AnnouncementAccount",
    "AnnouncementStatus",
    "Application",
    "Attachment",
    "AttachmentMeta",
    "Card",
    "Context",
    "Conversation",
    "CustomEmoji",
    "DomainBlock",
    "Filter",
    "ImageDetails",
    "Instance",
    "Ip",
    "List",
    "Marker",
    "Markers",
    "Mention",
    "MetadataField",
    "Notification",
    "Preferences",
    "Reaction",
    "Relationship",
    "Report",
    "Role",
    "Rule",
    "SearchResult",
    "Source",
    "Stats",
    "Status",
    "StreamingUrls",
    "Subscription",
    "Tag",
    "TagHistory",
]
