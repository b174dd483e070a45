from __future__ import annotations

from typing import TYPE_CHECKING

from .models import Context, CreateStatusParams, Status
from .request_spec import ApiRequest

if TYPE_CHECKING:
    from .client import MastodonClient


class StatusBuilder:
    """Fluent construction of a new status.

    Example:
        status = await client.statuses.builder("hello").visibility("unlisted").send()
    """

    def __init__(self, handler: StatusesHandler, text: str):
        self._handler = handler
        self.params = CreateStatusParams(status=text)

    def _set(self, **values) -> StatusBuilder:
        self.params = self.params.model_copy(update=values)
        return self

    def in_reply_to(self, status_id: str) -> StatusBuilder:
        return self._set(in_reply_to_id=status_id)

    def sensitive(self, value: bool = True) -> StatusBuilder:
        return self._set(sensitive=value)

    def spoiler_text(self, text: str) -> StatusBuilder:
        return self._set(spoiler_text=text)

    def visibility(self, value: str) -> StatusBuilder:
        return self._set(visibility=value)

    def language(self, code: str) -> StatusBuilder:
        return self._set(language=code)

    def media(self, *media_ids: str) -> StatusBuilder:
        return self._set(media_ids=[*(self.params.media_ids or []), *media_ids])

    async def send(self) -> Status:
        return await self._handler.create(self.params)


class StatusesHandler:
    def __init__(self, client: MastodonClient):
        self._c = client

    def builder(self, text: str) -> StatusBuilder:
        return StatusBuilder(self, text)

    async def get(self, status_id: str) -> Status:
        return await self._c.dispatch(ApiRequest.get(f"/api/v1/statuses/{status_id}"), Status)

    async def create(self, params: CreateStatusParams) -> Status:
        return await self._c.dispatch(ApiRequest.post("/api/v1/statuses", json=params), Status)

    async def create_simple(self, text: str) -> Status:
        return await self.create(CreateStatusParams(status=text))

    async def delete(self, status_id: str) -> Status:
        return await self._c.dispatch(ApiRequest.delete(f"/api/v1/statuses/{status_id}"), Status)

    async def context(self, status_id: str) -> Context:
        return await self._c.dispatch(ApiRequest.get(f"/api/v1/statuses/{status_id}/context"), Context)

    async def _action(self, status_id: str, action: str) -> Status:
        return await self._c.dispatch(ApiRequest.post(f"/api/v1/statuses/{status_id}/{action}"), Status)

    async def reblog(self, status_id: str) -> Status:
        return await self._action(status_id, "reblog")

    async def unreblog(self, status_id: str) -> Status:
        return await self._action(status_id, "unreblog")

    async def favourite(self, status_id: str) -> Status:
        return await self._action(status_id, "favourite")

    async def unfavourite(self, status_id: str) -> Status:
        return await self._action(status_id, "unfavourite")

    async def bookmark(self, status_id: str) -> Status:
        return await self._action(status_id, "bookmark")

    async def unbookmark(self, status_id: str) -> Status:
        return await self._action(status_id, "unbookmark")
