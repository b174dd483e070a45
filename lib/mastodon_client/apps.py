from __future__ import annotations

from typing import TYPE_CHECKING

from .models import AppRegistration, RegisterAppParams
from .request_spec import ApiRequest

if TYPE_CHECKING:
    from .client import MastodonClient


class AppsHandler:
    def __init__(self, client: MastodonClient):
        self._c = client

    async def register(self, params: RegisterAppParams) -> AppRegistration:
        """Register an OAuth application; the result carries client_id/client_secret."""
        return await self._c.dispatch(ApiRequest.post("/api/v1/apps", json=params), AppRegistration)

    async def verify_credentials(self) -> AppRegistration:
        return await self._c.dispatch(ApiRequest.get("/api/v1/apps/verify_credentials"), AppRegistration)
