from __future__ import annotations

from typing import TYPE_CHECKING

from .models import Instance
from .request_spec import ApiRequest

if TYPE_CHECKING:
    from .client import MastodonClient


class InstanceHandler:
    def __init__(self, client: MastodonClient):
        self._c = client

    async def get(self) -> Instance:
        return await self._c.dispatch(ApiRequest.get("/api/v1/instance"), Instance)
