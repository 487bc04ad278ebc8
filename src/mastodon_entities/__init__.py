"""Typed Mastodon API entities, identifiers and request payload builders."""

from mastodon_entities.codec import decode, decode_value, encode
from mastodon_entities.entities import (
    Account,
    AdminAccount,
    AdminReport,
    Alerts,
    Announcement,
    Application,
    Attachment,
    Card,
    Context,
    Conversation,
    CustomEmoji,
    DomainBlock,
    Filter,
    Instance,
    List,
    Marker,
    Markers,
    Mention,
    Notification,
    Preferences,
    Relationship,
    Report,
    Rule,
    SearchResult,
    Status,
    Subscription,
    Tag,
)
from mastodon_entities.enums import (
    AccountAction,
    CardType,
    DomainBlockSeverity,
    ExpandMedia,
    FilterContext,
    MediaType,
    NotificationType,
    PushPolicy,
    RepliesPolicy,
    ReportCategory,
    Visibility,
)
from mastodon_entities.errors import BuildError, DecodeError
from mastodon_entities.ids import (
    AccountId,
    AnnouncementId,
    AttachmentId,
    ConversationId,
    CustomEmojiId,
    DomainBlockId,
    FilterId,
    ListId,
    MarkerTimelineId,
    NotificationId,
    PushSubscriptionId,
    ReportId,
    RoleId,
    RuleId,
    StatusId,
    TypedId,
    WarningPresetId,
)
from mastodon_entities.models import Empty, Entity, Payload, WireModel
from mastodon_entities.requests import (
    AccountActionRequest,
    AddFilterRequest,
    AddPushRequest,
    AddReportRequest,
    UpdatePushRequest,
)

__all__ = [
    "Account",
    "AccountAction",
    "AccountActionRequest",
    "AccountId",
    "AddFilterRequest",
    "AddPushRequest",
    "AddReportRequest",
    "AdminAccount",
    "AdminReport",
    "Alerts",
    "Announcement",
    "AnnouncementId",
    "Application",
    "Attachment",
    "AttachmentId",
    "BuildError",
    "Card",
    "CardType",
    "Context",
    "Conversation",
    "ConversationId",
    "CustomEmoji",
    "CustomEmojiId",
    "DecodeError",
    "DomainBlock",
    "DomainBlockId",
    "DomainBlockSeverity",
    "Empty",
    "Entity",
    "ExpandMedia",
    "Filter",
    "FilterContext",
    "FilterId",
    "Instance",
    "List",
    "ListId",
    "Marker",
    "MarkerTimelineId",
    "Markers",
    "MediaType",
    "Mention",
    "Notification",
    "NotificationId",
    "NotificationType",
    "Payload",
    "Preferences",
    "PushPolicy",
    "PushSubscriptionId",
    "Relationship",
    "RepliesPolicy",
    "Report",
    "ReportCategory",
    "ReportId",
    "RoleId",
    "Rule",
    "RuleId",
    "SearchResult",
    "Status",
    "StatusId",
    "Subscription",
    "Tag",
    "TypedId",
    "UpdatePushRequest",
    "Visibility",
    "WarningPresetId",
    "WireModel",
    "decode",
    "decode_value",
    "encode",
]
