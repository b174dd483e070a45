from __future__ import annotations

import asyncio
from typing import Any, Mapping, TypeVar

from .accounts import AccountsHandler
from .apps import AppsHandler
from .config_types import ClientConfig
from .conversations import ConversationsHandler
from .dispatcher import Dispatcher, Sleep
from .follow_requests import FollowRequestsHandler
from .instance import InstanceHandler
from .lists import ListsHandler
from .media import MediaHandler
from .notifications import NotificationsHandler
from .paging import PageCursor
from .request_spec import ApiRequest
from .search import SearchHandler
from .statuses import StatusesHandler
from .streaming import StreamingClient
from .timelines import TimelinesHandler
from .transport import Transport

T = TypeVar("T")


class MastodonClient:
    """Entry point: owns the transport and hands out resource handlers.

    Example:
        async with MastodonClient.from_url("https://mastodon.social", token="...") as client:
            await client.statuses.create_simple("hello")
    """

    def __init__(self, cfg: ClientConfig, *, transport: Transport | None = None, sleep: Sleep | None = None):
        self._cfg = cfg
        self._t = transport or Transport(cfg)
        self._sleep = sleep or asyncio.sleep
        self._dispatcher = Dispatcher(cfg, self._t, sleep=self._sleep)

    @classmethod
    def from_url(cls, base_url: str, token: str | None = None) -> MastodonClient:
        return cls(ClientConfig(base_url=base_url, token=token))

    def with_token(self, token: str | None) -> MastodonClient:
        """A client with ``token`` that shares this client's connection pool."""
        return MastodonClient(self._cfg.with_token(token), transport=self._t, sleep=self._sleep)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def base_url(self) -> str:
        return self._cfg.base_url

    @property
    def access_token(self) -> str | None:
        return self._cfg.token

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    async def dispatch(self, request: ApiRequest, result_type: type[T] | Any) -> T:
        return await self._dispatcher.dispatch(request, result_type)

    def paged(self, path: str, item_type: type[T], params: Mapping[str, Any] | None = None) -> PageCursor[T]:
        return PageCursor(self._dispatcher, path, item_type, params)

    def streaming(self) -> StreamingClient:
        return StreamingClient(self._cfg, self._t)

    @property
    def accounts(self) -> AccountsHandler:
        return AccountsHandler(self)

    @property
    def apps(self) -> AppsHandler:
        return AppsHandler(self)

    @property
    def conversations(self) -> ConversationsHandler:
        return ConversationsHandler(self)

    @property
    def follow_requests(self) -> FollowRequestsHandler:
        return FollowRequestsHandler(self)

    @property
    def instance(self) -> InstanceHandler:
        return InstanceHandler(self)

    @property
    def lists(self) -> ListsHandler:
        return ListsHandler(self)

    @property
    def media(self) -> MediaHandler:
        return MediaHandler(self)

    @property
    def notifications(self) -> NotificationsHandler:
        return NotificationsHandler(self)

    @property
    def search(self) -> SearchHandler:
        return SearchHandler(self)

    @property
    def statuses(self) -> StatusesHandler:
        return StatusesHandler(self)

    @property
    def timelines(self) -> TimelinesHandler:
        return TimelinesHandler(self)

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> MastodonClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
