from mastodon_entities.conversion import Timestamp, TolerantInt
from mastodon_entities.ids import MarkerTimelineId
from mastodon_entities.models import Entity


class Marker(Entity):
    """The last read position within one timeline."""

    last_read_id: MarkerTimelineId
    version: TolerantInt
    updated_at: Timestamp


class Markers(Entity):
    """Markers keyed by timeline; a timeline without a saved position is absent."""

    home: Marker | None = None
    notifications: Marker | None = None
