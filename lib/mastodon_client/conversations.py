from __future__ import annotations

from typing import TYPE_CHECKING

from .models import Conversation
from .paging import PageCursor
from .request_spec import ApiRequest

if TYPE_CHECKING:
    from .client import MastodonClient


class ConversationsHandler:
    def __init__(self, client: MastodonClient):
        self._c = client

    def paged(self, *, limit: int | None = None) -> PageCursor[Conversation]:
        return self._c.paged("/api/v1/conversations", Conversation, {"limit": limit})

    async def mark_read(self, conversation_id: str) -> Conversation:
        request = ApiRequest.post(f"/api/v1/conversations/{conversation_id}/read")
        return await self._c.dispatch(request, Conversation)

    async def remove(self, conversation_id: str) -> None:
        await self._c.dispatch(ApiRequest.delete(f"/api/v1/conversations/{conversation_id}"), None)
