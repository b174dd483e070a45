"""Real-time events over the streaming WebSocket API.

Frames arrive as ``{"event": <kind>, "payload": <json string>}``. They are
decoded into typed events at this boundary; a frame that cannot be decoded is
dropped without surfacing anything to the consumer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

import httpx
from pydantic import BaseModel, ValidationError
from websockets.exceptions import ConnectionClosedError, ConnectionClosedOK, WebSocketException

from .config_types import ClientConfig
from .errors import StreamError, UrlError
from .models import Notification, Status
from .transport import Transport

log = logging.getLogger(__name__)

STREAMING_PATH = "/api/v1/streaming"


class WireEnvelope(BaseModel):
    event: str
    payload: Optional[str] = None


@dataclass(frozen=True)
class UpdateEvent:
    status: Status


@dataclass(frozen=True)
class NotificationEvent:
    notification: Notification


@dataclass(frozen=True)
class DeleteEvent:
    status_id: str


@dataclass(frozen=True)
class FiltersChangedEvent:
    pass


StreamEvent = Union[UpdateEvent, NotificationEvent, DeleteEvent, FiltersChangedEvent]


def decode_frame(message: Any) -> StreamEvent | None:
    """Decode one socket message, or return None when it should be dropped."""
    if not isinstance(message, str):
        return None
    try:
        envelope = WireEnvelope.model_validate_json(message)
    except ValidationError:
        log.debug("dropping unparseable frame")
        return None

    kind = envelope.event
    try:
        if kind == "update" and envelope.payload is not None:
            return UpdateEvent(Status.model_validate_json(envelope.payload))
        if kind == "notification" and envelope.payload is not None:
            return NotificationEvent(Notification.model_validate_json(envelope.payload))
    except ValidationError:
        log.debug("dropping %s frame with invalid payload", kind)
        return None
    if kind == "delete" and envelope.payload is not None:
        return DeleteEvent(envelope.payload)
    if kind == "filters_changed":
        return FiltersChangedEvent()

    log.debug("dropping frame of kind %r", kind)
    return None


def streaming_url(base_url: str) -> str:
    if base_url.startswith("https://"):
        return "wss://" + base_url[len("https://"):] + STREAMING_PATH
    if base_url.startswith("http://"):
        return "ws://" + base_url[len("http://"):] + STREAMING_PATH
    raise UrlError(f"cannot derive streaming url from {base_url!r}")


class EventStream:
    """Async iterator of decoded events from one open socket.

    Reads happen only when the consumer asks for the next event. A normal
    close from the server ends iteration; an abnormal close raises
    ``StreamError`` once, after which iteration is over.
    """

    def __init__(self, connection):
        self._conn = connection
        self._done = False

    def __aiter__(self) -> EventStream:
        return self

    async def __anext__(self) -> StreamEvent:
        while not self._done:
            try:
                message = await self._conn.recv()
            except ConnectionClosedOK:
                await self.aclose()
                break
            except (ConnectionClosedError, WebSocketException, OSError) as e:
                await self.aclose()
                raise StreamError(f"streaming connection lost: {e}") from e
            event = decode_frame(message)
            if event is not None:
                return event
        raise StopAsyncIteration

    async def aclose(self) -> None:
        if self._done:
            return
        self._done = True
        await self._conn.close()

    async def __aenter__(self) -> EventStream:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


class StreamingClient:
    def __init__(self, cfg: ClientConfig, transport: Transport):
        self._cfg = cfg
        self._t = transport
        self.stream_url = streaming_url(cfg.base_url)

    def subscription_url(self, stream: str, *, tag: str | None = None, list_id: str | None = None) -> str:
        params: dict[str, str] = {"stream": stream}
        if tag:
            params["tag"] = tag
        if list_id:
            params["list"] = list_id
        if self._cfg.token:
            params["access_token"] = self._cfg.token
        try:
            return str(httpx.URL(self.stream_url, params=params))
        except httpx.InvalidURL as e:
            raise UrlError(str(e)) from e

    async def subscribe(self, stream: str, *, tag: str | None = None, list_id: str | None = None) -> EventStream:
        """Open the socket and subscribe to ``stream`` (``user``, ``public``, ``hashtag``, ``list``...).

        Raises ``StreamError`` when the connection cannot be established.
        Reconnecting after the stream ends is up to the caller.
        """
        url = self.subscription_url(stream, tag=tag, list_id=list_id)
        log.debug("subscribing to %s at %s", stream, self.stream_url)
        connection = await self._t.connect_websocket(url)
        return EventStream(connection)
