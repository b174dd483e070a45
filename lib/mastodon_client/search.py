from __future__ import annotations

from typing import TYPE_CHECKING

from .models import SearchResults
from .request_spec import ApiRequest

if TYPE_CHECKING:
    from .client import MastodonClient


class SearchHandler:
    def __init__(self, client: MastodonClient):
        self._c = client

    async def v2(
            self,
            query: str,
            *,
            kind: str | None = None,
            resolve: bool = False,
            limit: int | None = None,
    ) -> SearchResults:
        """Search accounts, statuses and hashtags; ``kind`` narrows to one of them."""
        params = {"q": query, "type": kind, "resolve": resolve or None, "limit": limit}
        return await self._c.dispatch(ApiRequest.get("/api/v2/search", params), SearchResults)
