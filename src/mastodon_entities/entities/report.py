from mastodon_entities.conversion import Timestamp
from mastodon_entities.entities.account import Account
from mastodon_entities.enums import ReportCategory
from mastodon_entities.ids import ReportId, RuleId, StatusId
from mastodon_entities.models import Entity


class Report(Entity):
    id: ReportId
    action_taken: bool
    action_taken_at: Timestamp | None = None
    category: ReportCategory | None = None
    comment: str | None = None
    forwarded: bool | None = None
    created_at: Timestamp | None = None
    status_ids: tuple[StatusId, ...] | None = None
    rule_ids: tuple[RuleId, ...] | None = None
    target_account: Account | None = None
