from pydantic import Field

from mastodon_entities.conversion import Timestamp
from mastodon_entities.entities.account import Account
from mastodon_entities.entities.status import Status
from mastodon_entities.enums import NotificationType
from mastodon_entities.ids import NotificationId
from mastodon_entities.models import Entity


class Notification(Entity):
    id: NotificationId
    notification_type: NotificationType = Field(alias="type")
    created_at: Timestamp
    account: Account = Field(description="The account that performed the action.")
    status: Status | None = None
