from __future__ import annotations

from collections.abc import Iterable

from pydantic import Field, model_validator

from mastodon_entities.enums import ReportCategory
from mastodon_entities.ids import AccountId, RuleId, StatusId
from mastodon_entities.models import Payload
from mastodon_entities.requests.builder import RequestBuilder


class AddReportRequest(Payload):
    """Form used to report an account to the moderators."""

    account_id: AccountId
    status_ids: tuple[StatusId, ...] | None = None
    comment: str | None = Field(default=None, max_length=1000)
    forward: bool | None = Field(default=None, description="Forward the report to the remote instance.")
    category: ReportCategory | None = None
    rule_ids: tuple[RuleId, ...] | None = None

    @model_validator(mode="after")
    def _violation_needs_rules(self) -> AddReportRequest:
        if self.category is ReportCategory.VIOLATION and not self.rule_ids:
            raise ValueError("a violation report must reference at least one rule")
        return self

    @classmethod
    def builder(cls, account_id: AccountId | str) -> AddReportRequestBuilder:
        return AddReportRequestBuilder(account_id)


class AddReportRequestBuilder(RequestBuilder[AddReportRequest]):
    payload_type = AddReportRequest

    def __init__(self, account_id: AccountId | str) -> None:
        super().__init__(account_id=account_id)

    def status_ids(self, values: Iterable[StatusId | str]) -> AddReportRequestBuilder:
        return self._set("status_ids", tuple(values))

    def comment(self, value: str) -> AddReportRequestBuilder:
        return self._set("comment", value)

    def forward(self, value: bool) -> AddReportRequestBuilder:
        return self._set("forward", value)

    def category(self, value: ReportCategory) -> AddReportRequestBuilder:
        return self._set("category", value)

    def rule_ids(self, values: Iterable[RuleId | str]) -> AddReportRequestBuilder:
        return self._set("rule_ids", tuple(values))
