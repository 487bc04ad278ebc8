from mastodon_entities.enums import PushPolicy
from mastodon_entities.ids import PushSubscriptionId
from mastodon_entities.models import Entity


class Alerts(Entity):
    """Which notification types are delivered through web push."""

    follow: bool | None = None
    favourite: bool | None = None
    reblog: bool | None = None
    mention: bool | None = None
    poll: bool | None = None
    status: bool | None = None


class Subscription(Entity):
    """A web push subscription."""

    id: PushSubscriptionId
    endpoint: str
    server_key: str
    alerts: Alerts | None = None
    policy: PushPolicy | None = None
