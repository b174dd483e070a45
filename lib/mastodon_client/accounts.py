from __future__ import annotations

from typing import TYPE_CHECKING

from .models import Account, Relationship, Status
from .paging import PageCursor
from .request_spec import ApiRequest

if TYPE_CHECKING:
    from .client import MastodonClient


class AccountsHandler:
    def __init__(self, client: MastodonClient):
        self._c = client

    async def verify_credentials(self) -> Account:
        """The account that owns the configured token."""
        return await self._c.dispatch(ApiRequest.get("/api/v1/accounts/verify_credentials"), Account)

    async def get(self, account_id: str) -> Account:
        return await self._c.dispatch(ApiRequest.get(f"/api/v1/accounts/{account_id}"), Account)

    async def _relationship_action(self, account_id: str, action: str) -> Relationship:
        return await self._c.dispatch(ApiRequest.post(f"/api/v1/accounts/{account_id}/{action}"), Relationship)

    async def follow(self, account_id: str) -> Relationship:
        return await self._relationship_action(account_id, "follow")

    async def unfollow(self, account_id: str) -> Relationship:
        return await self._relationship_action(account_id, "unfollow")

    async def block(self, account_id: str) -> Relationship:
        return await self._relationship_action(account_id, "block")

    async def unblock(self, account_id: str) -> Relationship:
        return await self._relationship_action(account_id, "unblock")

    async def mute(self, account_id: str) -> Relationship:
        return await self._relationship_action(account_id, "mute")

    async def unmute(self, account_id: str) -> Relationship:
        return await self._relationship_action(account_id, "unmute")

    async def relationships(self, account_ids: list[str]) -> list[Relationship]:
        request = ApiRequest.get("/api/v1/accounts/relationships", {"id[]": list(account_ids)})
        return await self._c.dispatch(request, list[Relationship])

    async def search(self, query: str, *, limit: int | None = None) -> list[Account]:
        request = ApiRequest.get("/api/v1/accounts/search", {"q": query, "limit": limit})
        return await self._c.dispatch(request, list[Account])

    def statuses(self, account_id: str, *, limit: int | None = None) -> PageCursor[Status]:
        return self._c.paged(f"/api/v1/accounts/{account_id}/statuses", Status, {"limit": limit})

    def followers(self, account_id: str, *, limit: int | None = None) -> PageCursor[Account]:
        return self._c.paged(f"/api/v1/accounts/{account_id}/followers", Account, {"limit": limit})

    def following(self, account_id: str, *, limit: int | None = None) -> PageCursor[Account]:
        return self._c.paged(f"/api/v1/accounts/{account_id}/following", Account, {"limit": limit})
