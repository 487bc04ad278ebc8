from pydantic import Field

from mastodon_entities.enums import MediaType
from mastodon_entities.ids import AttachmentId
from mastodon_entities.models import Entity


class ImageDetails(Entity):
    width: int | None = None
    height: int | None = None
    size: str | None = None
    aspect: float | None = None


class AttachmentMeta(Entity):
    original: ImageDetails | None = None
    small: ImageDetails | None = None


class Attachment(Entity):
    """A file or media attachment added to a status."""

    id: AttachmentId
    media_type: MediaType = Field(alias="type")
    url: str | None = None
    remote_url: str | None = None
    preview_url: str | None = None
    text_url: str | None = None
    meta: AttachmentMeta | None = None
    description: str | None = Field(default=None, description="Alternate text for screen readers.")
    blurhash: str | None = None
