"""Closed vocabularies used on the wire.

Each member's value is its wire token. Decoding a token outside the set fails;
there is no catch-all member. Compare members by identity
(``action is AccountAction.SUSPEND``) rather than against wire strings.
"""

from __future__ import annotations

from enum import StrEnum, unique


@unique
class Visibility(StrEnum):
    """Who can see a status."""

    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"
    DIRECT = "direct"


@unique
class AccountAction(StrEnum):
    """Moderation action performed on an account.

    https://docs.joinmastodon.org/methods/admin/accounts/#form-data-parameters
    """

    NONE = "none"
    """No action. Resolves any open reports against the account."""
    SENSITIVE = "sensitive"
    """Force the account's statuses to be marked as sensitive."""
    DISABLE = "disable"
    """Prevent the account from logging in."""
    SILENCE = "silence"
    SUSPEND = "suspend"


@unique
class MediaType(StrEnum):
    IMAGE = "image"
    GIFV = "gifv"
    VIDEO = "video"
    AUDIO = "audio"
    # Sent by the server for attachments it could not process.
    UNKNOWN = "unknown"


@unique
class CardType(StrEnum):
    LINK = "link"
    PHOTO = "photo"
    VIDEO = "video"
    RICH = "rich"


@unique
class NotificationType(StrEnum):
    MENTION = "mention"
    STATUS = "status"
    REBLOG = "reblog"
    FOLLOW = "follow"
    FOLLOW_REQUEST = "follow_request"
    FAVOURITE = "favourite"
    POLL = "poll"
    UPDATE = "update"


@unique
class FilterContext(StrEnum):
    """Where a filter applies."""

    HOME = "home"
    NOTIFICATIONS = "notifications"
    PUBLIC = "public"
    THREAD = "thread"
    ACCOUNT = "account"


@unique
class RepliesPolicy(StrEnum):
    """Which replies show up in a list timeline."""

    FOLLOWED = "followed"
    LIST = "list"
    NONE = "none"


@unique
class ReportCategory(StrEnum):
    SPAM = "spam"
    LEGAL = "legal"
    VIOLATION = "violation"
    OTHER = "other"


@unique
class PushPolicy(StrEnum):
    """Whose interactions trigger push notifications."""

    ALL = "all"
    FOLLOWED = "followed"
    FOLLOWER = "follower"
    NONE = "none"


@unique
class ExpandMedia(StrEnum):
    """How media marked as sensitive is shown."""

    DEFAULT = "default"
    SHOW_ALL = "show_all"
    HIDE_ALL = "hide_all"


@unique
class DomainBlockSeverity(StrEnum):
    SILENCE = "silence"
    SUSPEND = "suspend"
    NOOP = "noop"
