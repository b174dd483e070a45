from __future__ import annotations


class MastodonClientError(Exception):
    """Base client error."""


class NetworkError(MastodonClientError):
    """Transport/network layer error."""


class UrlError(MastodonClientError):
    """Base URL or derived streaming URL could not be parsed."""


class DecodeError(MastodonClientError):
    """Response body did not match the expected schema."""


class ApiError(MastodonClientError):
    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"API error (status {status_code}): {body}")
        self.status_code = status_code
        self.body = body


class AuthError(MastodonClientError):
    """Missing or invalid credentials, raised by callers before a request is made."""


class StreamError(MastodonClientError):
    """Streaming connection could not be opened or failed while reading."""


class RequestNotReplayableError(MastodonClientError):
    """A streamed request body was rendered a second time."""
