"""Validated payloads for mutating API calls.

Each payload is built through its ``builder()`` class method.
"""

from mastodon_entities.requests.admin import AccountActionRequest
from mastodon_entities.requests.builder import RequestBuilder
from mastodon_entities.requests.filter import AddFilterRequest
from mastodon_entities.requests.push import (
    AddPushRequest,
    Keys,
    PushDataForm,
    PushSubscriptionForm,
    UpdatePushRequest,
)
from mastodon_entities.requests.report import AddReportRequest

__all__ = [
    "AccountActionRequest",
    "AddFilterRequest",
    "AddPushRequest",
    "AddReportRequest",
    "Keys",
    "PushDataForm",
    "PushSubscriptionForm",
    "RequestBuilder",
    "UpdatePushRequest",
]
