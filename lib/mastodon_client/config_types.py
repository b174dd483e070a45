from __future__ import annotations

from dataclasses import dataclass, replace

import httpx

from .errors import UrlError

DEFAULT_USER_AGENT = "mastodon-client/0.1.0"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    token: str | None = None
    timeout_s: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", validate_base_url(self.base_url))

    def with_token(self, token: str | None) -> ClientConfig:
        return replace(self, token=token or None)


def validate_base_url(raw: str) -> str:
    value = (raw or "").strip().rstrip("/")
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as e:
        raise UrlError(f"invalid base url {raw!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise UrlError(f"invalid base url {raw!r}: expected http(s)://host")
    # httpx lowercases scheme and host; the streaming url is derived from this form
    return str(url).rstrip("/")
