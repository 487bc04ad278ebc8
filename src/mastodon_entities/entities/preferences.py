from pydantic import Field

from mastodon_entities.enums import ExpandMedia, Visibility
from mastodon_entities.models import Entity


class Preferences(Entity):
    """Preferences of the authenticated user.

    The wire keys are namespaced with colons, e.g. ``posting:default:visibility``.
    """

    posting_default_visibility: Visibility = Field(alias="posting:default:visibility")
    posting_default_sensitive: bool = Field(alias="posting:default:sensitive")
    posting_default_language: str | None = Field(default=None, alias="posting:default:language")
    reading_expand_media: ExpandMedia = Field(alias="reading:expand:media")
    reading_expand_spoilers: bool = Field(alias="reading:expand:spoilers")
