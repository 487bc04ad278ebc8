from pydantic import Field

from mastodon_entities.models import Entity


class CustomEmoji(Entity):
    """A custom emoji defined by an instance."""

    shortcode: str = Field(description="Name used between colons in status text, e.g. ``blobaww``.")
    url: str
    static_url: str = Field(description="Link to a non-animated version of the image.")
    visible_in_picker: bool | None = None
    category: str | None = None
