from __future__ import annotations

from typing import TYPE_CHECKING

from .models import Account, Relationship
from .paging import PageCursor
from .request_spec import ApiRequest

if TYPE_CHECKING:
    from .client import MastodonClient


class FollowRequestsHandler:
    """Pending follow requests for a locked account."""

    def __init__(self, client: MastodonClient):
        self._c = client

    def paged(self, *, limit: int | None = None) -> PageCursor[Account]:
        return self._c.paged("/api/v1/follow_requests", Account, {"limit": limit})

    async def authorize(self, account_id: str) -> Relationship:
        request = ApiRequest.post(f"/api/v1/follow_requests/{account_id}/authorize")
        return await self._c.dispatch(request, Relationship)

    async def reject(self, account_id: str) -> Relationship:
        request = ApiRequest.post(f"/api/v1/follow_requests/{account_id}/reject")
        return await self._c.dispatch(request, Relationship)
