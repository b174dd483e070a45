from __future__ import annotations

import dataclasses

import pytest

from mastodon_client import ClientConfig, MastodonClient, UrlError


def test_base_url_trailing_slash_stripped() -> None:
    assert ClientConfig(base_url="https://mastodon.social/").base_url == "https://mastodon.social"


@pytest.mark.parametrize("raw", ["", "mastodon.social", "ftp://mastodon.social", "https://"])
def test_invalid_base_url_rejected(raw: str) -> None:
    with pytest.raises(UrlError):
        ClientConfig(base_url=raw)


def test_with_token_returns_new_config() -> None:
    cfg = ClientConfig(base_url="https://mastodon.social")
    authed = cfg.with_token("abc")

    assert authed is not cfg
    assert authed.token == "abc"
    assert cfg.token is None
    assert authed.base_url == cfg.base_url


def test_config_is_frozen() -> None:
    cfg = ClientConfig(base_url="https://mastodon.social", token="abc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.token = "other"  # type: ignore[misc]


def test_base_url_scheme_and_host_lowercased() -> None:
    cfg = ClientConfig(base_url="HTTPS://Mastodon.Social/")
    assert cfg.base_url == "https://mastodon.social"


def test_uppercase_scheme_still_streams() -> None:
    client = MastodonClient(ClientConfig(base_url="HTTP://localhost:3000"))
    assert client.streaming().stream_url == "ws://localhost:3000/api/v1/streaming"
