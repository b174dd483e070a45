from .client import MastodonClient
from .config_types import ClientConfig
from .errors import (
    ApiError,
    AuthError,
    DecodeError,
    MastodonClientError,
    NetworkError,
    RequestNotReplayableError,
    StreamError,
    UrlError,
)
from .paging import PageCursor
from .request_spec import ApiRequest
from .streaming import DeleteEvent, FiltersChangedEvent, NotificationEvent, StreamEvent, UpdateEvent

__all__ = [
    "MastodonClient",
    "ClientConfig",
    "ApiRequest",
    "PageCursor",
    "StreamEvent",
    "UpdateEvent",
    "NotificationEvent",
    "DeleteEvent",
    "FiltersChangedEvent",
    "MastodonClientError",
    "ApiError",
    "AuthError",
    "DecodeError",
    "NetworkError",
    "RequestNotReplayableError",
    "StreamError",
    "UrlError",
]
