from __future__ import annotations

import pytest

from mastodon_client import ClientConfig, MastodonClient

BASE_URL = "https://mastodon.example"


@pytest.fixture
def sleeps() -> list[float]:
    return []


@pytest.fixture
def client(sleeps):
    async def _sleep(delay: float) -> None:
        sleeps.append(delay)

    return MastodonClient(ClientConfig(base_url=BASE_URL, token="secret-token"), sleep=_sleep)


@pytest.fixture
def account_json():
    def _make(account_id: str = "1", username: str = "alice") -> dict:
        return {
            "id": account_id,
            "username": username,
            "acct": username,
            "display_name": username.title(),
            "url": f"{BASE_URL}/@{username}",
        }

    return _make


@pytest.fixture
def status_json(account_json):
    def _make(status_id: str = "100", content: str = "<p>hello</p>") -> dict:
        return {
            "id": status_id,
            "created_at": "2026-01-30T12:00:00.000Z",
            "uri": f"{BASE_URL}/users/alice/statuses/{status_id}",
            "content": content,
            "visibility": "public",
            "account": account_json(),
        }

    return _make
