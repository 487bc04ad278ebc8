"""Forms for web push subscriptions.

The wire form nests the values::

    {"subscription": {"endpoint": ..., "keys": {"p256dh": ..., "auth": ...}},
     "data": {"alerts": {...}, "policy": ...}}

The builders keep them flat and assemble the nesting when they are finalized.
"""

from __future__ import annotations

from typing import Any, Self, TypeVar

from pydantic import model_validator

from mastodon_entities.entities.push import Alerts
from mastodon_entities.enums import PushPolicy
from mastodon_entities.models import Payload
from mastodon_entities.requests.builder import RequestBuilder

_ALERTS = tuple(Alerts.model_fields)

P = TypeVar("P", bound=Payload)


class Keys(Payload):
    p256dh: str
    auth: str


class PushSubscriptionForm(Payload):
    endpoint: str
    keys: Keys


class PushDataForm(Payload):
    alerts: Alerts | None = None
    policy: PushPolicy | None = None


class AddPushRequest(Payload):
    subscription: PushSubscriptionForm
    data: PushDataForm | None = None

    @classmethod
    def builder(cls, endpoint: str) -> AddPushRequestBuilder:
        """Start building a subscription. ``keys()`` must be called before ``build()``."""
        return AddPushRequestBuilder(endpoint)


class UpdatePushRequest(Payload):
    """Form used to change which alerts an existing subscription receives."""

    data: PushDataForm

    @model_validator(mode="after")
    def _something_to_update(self) -> UpdatePushRequest:
        if self.data.alerts is None and self.data.policy is None:
            raise ValueError("an update must change at least one alert or the policy")
        return self

    @classmethod
    def builder(cls) -> UpdatePushRequestBuilder:
        return UpdatePushRequestBuilder()


class _PushDataBuilder(RequestBuilder[P]):
    def follow(self, value: bool) -> Self:
        return self._set("follow", value)

    def favourite(self, value: bool) -> Self:
        return self._set("favourite", value)

    def reblog(self, value: bool) -> Self:
        return self._set("reblog", value)

    def mention(self, value: bool) -> Self:
        return self._set("mention", value)

    def poll(self, value: bool) -> Self:
        return self._set("poll", value)

    def status(self, value: bool) -> Self:
        return self._set("status", value)

    def policy(self, value: PushPolicy) -> Self:
        return self._set("policy", value)

    def _data(self) -> dict[str, Any]:
        values = self._values
        alerts = {name: values[name] for name in _ALERTS if name in values}
        data: dict[str, Any] = {}
        if alerts:
            data["alerts"] = alerts
        if "policy" in values:
            data["policy"] = values["policy"]
        return data


class AddPushRequestBuilder(_PushDataBuilder[AddPushRequest]):
    payload_type = AddPushRequest
    required = ("endpoint", "p256dh", "auth")

    def __init__(self, endpoint: str) -> None:
        super().__init__(endpoint=endpoint)

    def keys(self, p256dh: str, auth: str) -> AddPushRequestBuilder:
        return self._set("p256dh", p256dh)._set("auth", auth)

    def _payload_data(self) -> dict[str, Any]:
        values = self._values
        payload: dict[str, Any] = {
            "subscription": {
                "endpoint": values["endpoint"],
                "keys": {"p256dh": values["p256dh"], "auth": values["auth"]},
            },
        }
        data = self._data()
        if data:
            payload["data"] = data
        return payload


class UpdatePushRequestBuilder(_PushDataBuilder[UpdatePushRequest]):
    payload_type = UpdatePushRequest
    required = ()

    def __init__(self) -> None:
        super().__init__()

    def _payload_data(self) -> dict[str, Any]:
        return {"data": self._data()}
