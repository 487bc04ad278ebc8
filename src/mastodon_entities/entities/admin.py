"""Entities only returned by the admin API.

These expose moderation data (e-mail addresses, IPs, assigned moderators) that
the public ``Account`` and ``Report`` entities leave out.
"""

from pydantic import Field

from mastodon_entities.conversion import DefaultList, Timestamp, TolerantStr
from mastodon_entities.entities.account import Account
from mastodon_entities.entities.instance import Rule
from mastodon_entities.entities.status import Status
from mastodon_entities.enums import DomainBlockSeverity, ReportCategory
from mastodon_entities.ids import AccountId, DomainBlockId, ReportId, RoleId
from mastodon_entities.models import Entity


class Role(Entity):
    id: RoleId
    name: str
    color: str | None = None
    permissions: TolerantStr | None = Field(default=None, description="Bitmask of granted permissions.")
    highlighted: bool | None = None


class Ip(Entity):
    """An IP address an account has signed in from."""

    ip: str
    used_at: Timestamp


class AdminAccount(Entity):
    id: AccountId
    username: str
    domain: str | None = Field(default=None, description="Absent for local accounts.")
    created_at: Timestamp
    email: str | None = None
    ip: str | None = None
    ips: DefaultList[Ip]
    locale: str | None = None
    invite_request: str | None = None
    role: Role | None = None
    confirmed: bool | None = None
    approved: bool | None = None
    disabled: bool | None = None
    silenced: bool
    suspended: bool
    account: Account
    created_by_application_id: TolerantStr | None = None
    invited_by_account_id: AccountId | None = None


class AdminReport(Entity):
    id: ReportId
    action_taken: bool
    action_taken_at: Timestamp | None = None
    category: ReportCategory | None = None
    comment: str | None = None
    forwarded: bool | None = None
    created_at: Timestamp
    updated_at: Timestamp | None = None
    account: AdminAccount = Field(description="The account that filed the report.")
    target_account: AdminAccount
    assigned_account: AdminAccount | None = None
    action_taken_by_account: AdminAccount | None = None
    statuses: DefaultList[Status]
    rules: DefaultList[Rule]


class DomainBlock(Entity):
    """A domain the instance limits or suspends federation with."""

    id: DomainBlockId
    domain: str
    created_at: Timestamp
    severity: DomainBlockSeverity
    reject_media: bool
    reject_reports: bool
    private_comment: str | None = None
    public_comment: str | None = None
    obfuscate: bool | None = None
