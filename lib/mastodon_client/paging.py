from __future__ import annotations

import logging
from typing import Any, Generic, Mapping, TypeVar

from .dispatcher import Dispatcher, decode_body
from .request_spec import ApiRequest

log = logging.getLogger(__name__)

T = TypeVar("T")


def parse_link_header(value: str | None, rel: str = "next") -> str | None:
    """Return the first URL in a ``Link`` header tagged with ``rel``.

    Example: ``<https://h/api?max_id=7>; rel="next", <https://h/api?min_id=9>; rel="prev"``
    """
    if not value:
        return None
    for entry in value.split(","):
        url_part, _, params = entry.partition(";")
        url_part = url_part.strip()
        if not (url_part.startswith("<") and url_part.endswith(">")):
            continue
        for param in params.split(";"):
            key, _, raw = param.strip().partition("=")
            if key.strip().lower() != "rel":
                continue
            if rel in raw.strip().strip('"').split():
                return url_part[1:-1].strip()
    return None


class PageCursor(Generic[T]):
    """Pulls one page at a time by following ``Link: <...>; rel="next"``.

    Each page is a single authenticated GET without the dispatcher's retry.
    Once a response arrives without a next link the cursor is exhausted and
    ``next_page`` keeps returning ``None`` without touching the network.
    """

    def __init__(
            self,
            dispatcher: Dispatcher,
            url: str,
            item_type: type[T],
            params: Mapping[str, Any] | None = None,
    ):
        self._d = dispatcher
        self._item_type = item_type
        self._request: ApiRequest | None = ApiRequest.get(url, params)

    @property
    def exhausted(self) -> bool:
        return self._request is None

    @property
    def next_url(self) -> str | None:
        return self._request.path if self._request is not None else None

    async def next_page(self) -> list[T] | None:
        request = self._request
        if request is None:
            return None
        response = await self._d.send_once(request)
        page = decode_body(response, list[self._item_type])

        next_url = parse_link_header(response.headers.get("Link"))
        self._request = ApiRequest.get(next_url) if next_url else None
        log.debug("page of %d from %s, next=%s", len(page), request.path, next_url)
        return page

    def __aiter__(self) -> PageCursor[T]:
        return self

    async def __anext__(self) -> list[T]:
        page = await self.next_page()
        if page is None:
            raise StopAsyncIteration
        return page
