from __future__ import annotations

from typing import TYPE_CHECKING

from .models import Status
from .paging import PageCursor
from .request_spec import ApiRequest

if TYPE_CHECKING:
    from .client import MastodonClient


class TimelinesHandler:
    """Home, public, hashtag and list timelines.

    The plain methods return the newest page; the ``*_paged`` variants return a
    cursor that walks back through history one page at a time.
    """

    def __init__(self, client: MastodonClient):
        self._c = client

    async def public(self, *, local: bool = False, limit: int | None = None) -> list[Status]:
        request = ApiRequest.get("/api/v1/timelines/public", {"local": local or None, "limit": limit})
        return await self._c.dispatch(request, list[Status])

    def public_paged(self, *, local: bool = False, limit: int | None = None) -> PageCursor[Status]:
        return self._c.paged("/api/v1/timelines/public", Status, {"local": local or None, "limit": limit})

    async def home(self, *, limit: int | None = None) -> list[Status]:
        return await self._c.dispatch(ApiRequest.get("/api/v1/timelines/home", {"limit": limit}), list[Status])

    def home_paged(self, *, limit: int | None = None) -> PageCursor[Status]:
        return self._c.paged("/api/v1/timelines/home", Status, {"limit": limit})

    def hashtag(self, tag: str, *, local: bool = False, limit: int | None = None) -> PageCursor[Status]:
        tag = tag.lstrip("#")
        return self._c.paged(f"/api/v1/timelines/tag/{tag}", Status, {"local": local or None, "limit": limit})

    def list(self, list_id: str, *, limit: int | None = None) -> PageCursor[Status]:
        return self._c.paged(f"/api/v1/timelines/list/{list_id}", Status, {"limit": limit})
