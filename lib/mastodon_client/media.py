from __future__ import annotations

import mimetypes
import os
from typing import TYPE_CHECKING

from .errors import MastodonClientError
from .models import MediaAttachment
from .request_spec import ApiRequest, MultipartBody

if TYPE_CHECKING:
    from .client import MastodonClient


def _content_type(filename: str) -> str:
    return mimetypes.guess_type(filename)[0] or "application/octet-stream"


class MediaHandler:
    """Media uploads. Attach the returned id via ``CreateStatusParams.media_ids``."""

    def __init__(self, client: MastodonClient):
        self._c = client

    async def upload(self, file_path: str, *, description: str | None = None) -> MediaAttachment:
        # The file is streamed, so this request is sent exactly once.
        filename = os.path.basename(file_path)
        fields = {"description": description} if description else None
        try:
            f = open(file_path, "rb")
        except OSError as e:
            raise MastodonClientError(f"cannot read {file_path}: {e}") from e
        with f:
            body = MultipartBody({"file": (filename, f, _content_type(filename))}, fields)
            return await self._c.dispatch(ApiRequest.post("/api/v2/media", multipart=body), MediaAttachment)

    async def upload_bytes(
            self,
            data: bytes,
            filename: str,
            *,
            description: str | None = None,
    ) -> MediaAttachment:
        fields = {"description": description} if description else None
        body = MultipartBody({"file": (filename, data, _content_type(filename))}, fields)
        return await self._c.dispatch(ApiRequest.post("/api/v2/media", multipart=body), MediaAttachment)

    async def get(self, media_id: str) -> MediaAttachment:
        return await self._c.dispatch(ApiRequest.get(f"/api/v1/media/{media_id}"), MediaAttachment)
