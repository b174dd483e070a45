from __future__ import annotations

from typing import TYPE_CHECKING

from .models import CreateListParams, MastodonList
from .request_spec import ApiRequest

if TYPE_CHECKING:
    from .client import MastodonClient


class ListsHandler:
    def __init__(self, client: MastodonClient):
        self._c = client

    async def all(self) -> list[MastodonList]:
        return await self._c.dispatch(ApiRequest.get("/api/v1/lists"), list[MastodonList])

    async def get(self, list_id: str) -> MastodonList:
        return await self._c.dispatch(ApiRequest.get(f"/api/v1/lists/{list_id}"), MastodonList)

    async def create(self, title: str, *, replies_policy: str | None = None) -> MastodonList:
        params = CreateListParams(title=title, replies_policy=replies_policy)
        return await self._c.dispatch(ApiRequest.post("/api/v1/lists", json=params), MastodonList)

    async def update(self, list_id: str, title: str, *, replies_policy: str | None = None) -> MastodonList:
        params = CreateListParams(title=title, replies_policy=replies_policy)
        return await self._c.dispatch(ApiRequest.put(f"/api/v1/lists/{list_id}", json=params), MastodonList)

    async def delete(self, list_id: str) -> None:
        await self._c.dispatch(ApiRequest.delete(f"/api/v1/lists/{list_id}"), None)

    async def add_accounts(self, list_id: str, account_ids: list[str]) -> None:
        request = ApiRequest.post(f"/api/v1/lists/{list_id}/accounts", json={"account_ids": list(account_ids)})
        await self._c.dispatch(request, None)

    async def remove_accounts(self, list_id: str, account_ids: list[str]) -> None:
        request = ApiRequest.delete(f"/api/v1/lists/{list_id}/accounts", json={"account_ids": list(account_ids)})
        await self._c.dispatch(request, None)
