from __future__ import annotations

from typing import TYPE_CHECKING

from .models import Notification
from .paging import PageCursor
from .request_spec import ApiRequest

if TYPE_CHECKING:
    from .client import MastodonClient


class NotificationsHandler:
    def __init__(self, client: MastodonClient):
        self._c = client

    async def list(self, *, limit: int | None = None, types: list[str] | None = None) -> list[Notification]:
        request = ApiRequest.get("/api/v1/notifications", {"limit": limit, "types[]": types})
        return await self._c.dispatch(request, list[Notification])

    def paged(self, *, limit: int | None = None) -> PageCursor[Notification]:
        return self._c.paged("/api/v1/notifications", Notification, {"limit": limit})

    async def get(self, notification_id: str) -> Notification:
        return await self._c.dispatch(ApiRequest.get(f"/api/v1/notifications/{notification_id}"), Notification)

    async def clear(self) -> None:
        await self._c.dispatch(ApiRequest.post("/api/v1/notifications/clear"), None)

    async def dismiss(self, notification_id: str) -> None:
        await self._c.dispatch(ApiRequest.post(f"/api/v1/notifications/{notification_id}/dismiss"), None)
