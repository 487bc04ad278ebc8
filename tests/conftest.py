"""Shared fixtures and helpers for tests."""

import copy
from pathlib import Path
from typing import Any

import pytest

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Wire samples, shaped like real server responses
# ---------------------------------------------------------------------------

ACCOUNT_WIRE: dict[str, Any] = {
    "id": "23634",
    "username": "noiob",
    "acct": "noiob@awoo.space",
    "display_name": "ikea shark fan account",
    "locked": False,
    "bot": False,
    "discoverable": True,
    "group": False,
    "created_at": "2017-02-08T02:00:53.274Z",
    "note": "<p>:ms_rainbow_flag:​ :ms_bisexual_flagweb:​</p>",
    "url": "https://awoo.space/@noiob",
    "avatar": "https://files.mastodon.social/accounts/avatars/000/023/634/original/6ca8804dc46800ad.png",
    "avatar_static": "https://files.mastodon.social/accounts/avatars/000/023/634/original/6ca8804dc46800ad.png",
    "header": "https://files.mastodon.social/accounts/headers/000/023/634/original/256eb8d7ac40f49a.png",
    "header_static": "https://files.mastodon.social/accounts/headers/000/023/634/original/256eb8d7ac40f49a.png",
    "followers_count": 547,
    "following_count": 404,
    "statuses_count": "28468",
    "last_status_at": "2019-11-17",
    "emojis": [
        {
            "shortcode": "ms_rainbow_flag",
            "url": "https://files.mastodon.social/custom_emojis/images/000/028/691/original/6de008d6281f4f59.png",
            "static_url": "https://files.mastodon.social/custom_emojis/images/000/028/691/static/6de008d6281f4f59.png",
            "visible_in_picker": False,
        }
    ],
    "fields": [
        {
            "name": "Pronouns",
            "value": "they/them",
            "verified_at": None,
        },
        {
            "name": "Alt",
            "value": '<a href="https://cybre.space/@noiob">cybre.space/@noiob</a>',
            "verified_at": "2019-11-10T10:31:10.744+00:00",
        },
    ],
    "noindex": False,
}

STATUS_WIRE: dict[str, Any] = {
    "id": "103270115826048975",
    "created_at": "2019-12-08T03:48:33.901Z",
    "in_reply_to_id": None,
    "in_reply_to_account_id": None,
    "sensitive": False,
    "spoiler_text": "",
    "visibility": "public",
    "language": "en",
    "uri": "https://mastodon.social/users/Gargron/statuses/103270115826048975",
    "url": "https://mastodon.social/@Gargron/103270115826048975",
    "replies_count": 5,
    "reblogs_count": "6",
    "favourites_count": 11,
    "favourited": False,
    "reblogged": False,
    "muted": False,
    "bookmarked": False,
    "content": "<p>&quot;I lost my inheritance with one wrong digit on my sort code&quot;</p>",
    "reblog": None,
    "application": {"name": "Web", "website": None},
    "account": ACCOUNT_WIRE,
    "media_attachments": [
        {
            "id": 22345792,
            "type": "image",
            "url": "https://files.mastodon.social/media_attachments/files/022/345/792/original/57859aede991da25.jpeg",
            "preview_url": "https://files.mastodon.social/media_attachments/files/022/345/792/small/57859aede991da25.jpeg",
            "remote_url": None,
            "text_url": "https://mastodon.social/media/2N4uvkuUtPVrkZGysms",
            "meta": {
                "original": {"width": 640, "height": 480, "size": "640x480", "aspect": 1.3333333333333333},
                "small": {"width": 461, "height": 346, "size": "461x346", "aspect": 1.3323699421965318},
            },
            "description": "test media description",
            "blurhash": "UFBWY:8_0Jxv4mx]t8t64.%M-:IUWGWAt6M}",
        }
    ],
    "mentions": [
        {
            "id": "1",
            "username": "Gargron",
            "url": "https://mastodon.social/@Gargron",
            "acct": "Gargron",
        }
    ],
    "tags": [
        {
            "name": "mastodev",
            "url": "https://mastodon.social/tags/mastodev",
            "history": [{"day": "1574553600", "uses": "12", "accounts": 9}],
        }
    ],
    "emojis": [],
    "card": {
        "url": "https://www.theguardian.com/money/2019/dec/07/i-lost-my-193000-inheritance",
        "title": "‘I lost my £193,000 inheritance – with one wrong digit on my sort code’",
        "description": "When Peter Teich’s money went to another Barclays customer, the bank offered £25 as a token gesture",
        "type": "link",
        "author_name": "",
        "author_url": "",
        "provider_name": "",
        "provider_url": "",
        "html": "",
        "width": 0,
        "height": 0,
        "image": None,
        "embed_url": "",
    },
    "poll": None,
}

CUSTOM_EMOJI_WIRE: dict[str, Any] = {
    "shortcode": "blobaww",
    "url": "https://files.mastodon.social/custom_emojis/images/000/011/739/original/blobaww.png",
    "static_url": "https://files.mastodon.social/custom_emojis/images/000/011/739/static/blobaww.png",
    "visible_in_picker": True,
    "category": "Blobs",
}

TAG_WIRE: dict[str, Any] = {
    "name": "nowplaying",
    "url": "https://mastodon.social/tags/nowplaying",
    "history": [
        {"day": "1574553600", "uses": "200", "accounts": "31"},
        {"day": 1574467200, "uses": 272, "accounts": 39},
    ],
    "following": False,
}

ADMIN_ACCOUNT_WIRE: dict[str, Any] = {
    "id": "108965278956942133",
    "username": "admin",
    "domain": None,
    "created_at": "2022-09-08T23:03:26.762Z",
    "email": "admin@mastodon.local",
    "ip": "192.168.42.1",
    "role": {
        "id": 3,
        "name": "Owner",
        "color": "",
        "permissions": "1",
        "highlighted": True,
    },
    "confirmed": True,
    "suspended": False,
    "silenced": False,
    "disabled": False,
    "approved": True,
    "locale": None,
    "invite_request": None,
    "ips": [{"ip": "192.168.42.1", "used_at": "2022-09-15T01:38:58.851Z"}],
    "account": ACCOUNT_WIRE,
}

WIRE_SAMPLES: dict[str, Any] = {
    "account": ACCOUNT_WIRE,
    "admin_account": ADMIN_ACCOUNT_WIRE,
    "admin_report": {
        "id": "1",
        "action_taken": False,
        "action_taken_at": None,
        "category": "spam",
        "comment": "",
        "forwarded": False,
        "created_at": "2022-09-09T21:19:23.085Z",
        "updated_at": "2022-09-09T21:19:23.085Z",
        "account": ADMIN_ACCOUNT_WIRE,
        "target_account": dict(ADMIN_ACCOUNT_WIRE, id="108965430868193066", username="goody", domain="example.com"),
        "assigned_account": None,
        "action_taken_by_account": None,
        "statuses": [STATUS_WIRE],
        "rules": [{"id": "1", "text": "Don't be mean."}],
    },
    "announcement": {
        "id": "8",
        "content": "<p>Looks like there was an issue processing audio attachments without embedded art.</p>",
        "starts_at": None,
        "ends_at": None,
        "all_day": False,
        "published_at": "2020-07-03T01:27:38.726Z",
        "updated_at": "2020-07-03T01:27:38.752Z",
        "read": True,
        "mentions": [
            {"id": "1", "username": "Gargron", "url": "https://mastodon.social/@Gargron", "acct": "Gargron"}
        ],
        "statuses": [{"id": "104446048446163316", "url": "https://mastodon.social/@Gargron/104446048446163316"}],
        "tags": [],
        "emojis": [],
        "reactions": [
            {"name": "bongoCat", "count": 9, "me": False, "url": CUSTOM_EMOJI_WIRE["url"]},
            {"name": "\N{THINKING FACE}", "count": "1", "me": True},
        ],
    },
    "attachment": STATUS_WIRE["media_attachments"][0],
    "card": STATUS_WIRE["card"],
    "context": {"ancestors": [], "descendants": [STATUS_WIRE]},
    "conversation": {"id": "418450", "unread": True, "accounts": [ACCOUNT_WIRE], "last_status": STATUS_WIRE},
    "custom_emoji": CUSTOM_EMOJI_WIRE,
    "domain_block": {
        "id": "1",
        "domain": "example.com",
        "created_at": "2022-11-16T08:15:34.238Z",
        "severity": "noop",
        "reject_media": False,
        "reject_reports": False,
        "private_comment": None,
        "public_comment": None,
        "obfuscate": False,
    },
    "empty": {},
    "filter": {
        "id": "8449",
        "phrase": "test",
        "context": ["home", "notifications", "public", "thread"],
        "whole_word": False,
        "expires_at": "2019-11-26T09:08:06.254Z",
        "irreversible": True,
    },
    "instance": {
        "uri": "mastodon.social",
        "title": "Mastodon",
        "short_description": "The original server operated by the Mastodon gGmbH non-profit",
        "description": "",
        "email": "staff@mastodon.social",
        "version": "3.5.3",
        "urls": {"streaming_api": "wss://mastodon.social"},
        "stats": {"user_count": 812303, "status_count": "38151616", "domain_count": 25255},
        "thumbnail": "https://files.mastodon.social/site_uploads/files/000/000/001/original/thumbnail.png",
        "languages": ["en"],
        "registrations": False,
        "approval_required": False,
        "invites_enabled": True,
        "contact_account": ACCOUNT_WIRE,
        "rules": [{"id": "1", "text": "Sexually explicit or violent media must be marked as sensitive"}],
    },
    "list": {"id": "12249", "title": "Friends"},
    "marker": {"last_read_id": "35098814", "version": "361", "updated_at": "2019-11-24T19:39:39.661+02:00"},
    "markers": {
        "home": {"last_read_id": "103206604258487607", "version": 468, "updated_at": "2019-11-24T19:39:39.661Z"}
    },
    "notification": {
        "id": "34975861",
        "type": "mention",
        "created_at": "2019-11-23T07:49:02.064Z",
        "account": ACCOUNT_WIRE,
        "status": STATUS_WIRE,
    },
    "preferences": {
        "posting:default:visibility": "public",
        "posting:default:sensitive": False,
        "posting:default:language": None,
        "reading:expand:media": "default",
        "reading:expand:spoilers": False,
    },
    "relationship": {
        "id": "1",
        "following": True,
        "showing_reblogs": True,
        "followed_by": True,
        "blocking": False,
        "muting": False,
        "requested": False,
        "domain_blocking": False,
        "endorsed": False,
    },
    "report": {
        "id": "48914",
        "action_taken": False,
        "category": "violation",
        "comment": "",
        "forwarded": False,
        "created_at": "2022-08-25T09:56:16.763Z",
        "status_ids": ["108882889550545820"],
        "rule_ids": [2],
        "target_account": ACCOUNT_WIRE,
    },
    "search_result": {"accounts": [ACCOUNT_WIRE], "hashtags": [TAG_WIRE]},
    "status": STATUS_WIRE,
    "subscription": {
        "id": 328183,
        "endpoint": "https://yourdomain.example/listener",
        "alerts": {"follow": False, "favourite": False, "reblog": False, "mention": True, "poll": False},
        "server_key": "BCk-QqERU0q-CfYZjcuB6lnyyOYfJ2AifKqfeGIm7Z-HiTU5T9eTG5GxVA0_OH5mMlI4UkkDTpaZwozy0TzdZ2M=",
    },
    "tag": TAG_WIRE,
}


@pytest.fixture
def account_wire() -> dict[str, Any]:
    return copy.deepcopy(ACCOUNT_WIRE)


@pytest.fixture
def status_wire() -> dict[str, Any]:
    return copy.deepcopy(STATUS_WIRE)


@pytest.fixture
def notification_wire() -> dict[str, Any]:
    return copy.deepcopy(WIRE_SAMPLES["notification"])


@pytest.fixture
def wire_samples() -> dict[str, Any]:
    """One server-shaped wire object per entity kind."""
    return copy.deepcopy(WIRE_SAMPLES)
