"""Forms for the admin API."""

from __future__ import annotations

from pydantic import Field

from mastodon_entities.enums import AccountAction
from mastodon_entities.ids import ReportId, WarningPresetId
from mastodon_entities.models import Payload
from mastodon_entities.requests.builder import RequestBuilder


class AccountActionRequest(Payload):
    """Form used to perform an admin action on an account and resolve any open reports.

    Example::

        request = AccountActionRequest.builder(AccountAction.SILENCE).text("Hush now").build()
    """

    action: AccountAction = Field(alias="type", description="The type of action to be taken.")
    report_id: ReportId | None = Field(
        default=None,
        description="The ID of an associated report that caused this action to be taken.",
    )
    warning_preset_id: WarningPresetId | None = Field(default=None, description="The ID of a preset warning.")
    text: str | None = Field(default=None, description="Additional clarification for why this action was taken.")
    send_email_notification: bool | None = Field(
        default=None,
        description="Should an email be sent to the user with the above information?",
    )

    @classmethod
    def builder(cls, action: AccountAction) -> AccountActionRequestBuilder:
        """Start building a form for performing an admin action on an account."""
        return AccountActionRequestBuilder(action)


class AccountActionRequestBuilder(RequestBuilder[AccountActionRequest]):
    payload_type = AccountActionRequest

    def __init__(self, action: AccountAction) -> None:
        super().__init__(action=action)

    def report_id(self, value: ReportId | str) -> AccountActionRequestBuilder:
        return self._set("report_id", value)

    def warning_preset_id(self, value: WarningPresetId | str) -> AccountActionRequestBuilder:
        return self._set("warning_preset_id", value)

    def text(self, value: str) -> AccountActionRequestBuilder:
        return self._set("text", value)

    def send_email_notification(self, value: bool) -> AccountActionRequestBuilder:
        return self._set("send_email_notification", value)
