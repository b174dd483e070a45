from __future__ import annotations

import weakref

import httpx
from websockets.asyncio.client import ClientConnection, connect as ws_connect
from websockets.exceptions import InvalidURI, WebSocketException

from .config_types import ClientConfig
from .errors import NetworkError, StreamError, UrlError
from .request_spec import ApiRequest


class Transport:
    """HTTP connection pool plus WebSocket connector, owned by one client."""

    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        self._client = httpx.AsyncClient(
            base_url=cfg.base_url,
            timeout=cfg.timeout_s,
            headers={"User-Agent": cfg.user_agent},
            follow_redirects=True,
            transport=http_transport,
        )
        self._sockets: weakref.WeakSet[ClientConnection] = weakref.WeakSet()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        # sockets whose streams were dropped without aclose() are closed here
        for connection in list(self._sockets):
            await connection.close()
        self._sockets.clear()
        await self._client.aclose()

    async def send(self, request: ApiRequest, *, token: str | None = None) -> httpx.Response:
        headers = {}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        try:
            return await self._client.request(
                request.method,
                request.path,
                params=request.params or None,
                headers=headers,
                **request.render_body(),
            )
        except httpx.InvalidURL as e:
            raise UrlError(str(e)) from e
        except httpx.RequestError as e:
            raise NetworkError(f"{request.method} {request.path} failed: {e}") from e

    async def connect_websocket(self, url: str) -> ClientConnection:
        try:
            connection = await ws_connect(url, user_agent_header=self._cfg.user_agent, open_timeout=self._cfg.timeout_s)
        except InvalidURI as e:
            raise UrlError(str(e)) from e
        except (OSError, TimeoutError, WebSocketException) as e:
            raise StreamError(f"streaming connection failed: {e}") from e
        self._sockets.add(connection)
        return connection
