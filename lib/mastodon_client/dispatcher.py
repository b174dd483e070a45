"""Authenticated request execution with retry and uniform error mapping."""

from __future__ import annotations

import asyncio
import functools
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .config_types import ClientConfig
from .errors import ApiError, DecodeError
from .request_spec import ApiRequest
from .transport import Transport

log = logging.getLogger(__name__)

T = TypeVar("T")

MAX_RETRIES = 3
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"

Sleep = Callable[[float], Awaitable[None]]


@dataclass
class RetryState:
    max_retries: int = MAX_RETRIES
    attempt: int = 0

    def should_retry(self, response: httpx.Response) -> bool:
        if self.attempt >= self.max_retries:
            return False
        status = response.status_code
        if status == 429:
            # Presence of the reset header gates the retry; its value is not used for timing.
            return RATE_LIMIT_RESET_HEADER in response.headers
        return 500 <= status < 600

    def backoff(self) -> float:
        return float(2 ** self.attempt)


@functools.lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def decode_body(response: httpx.Response, result_type: Any) -> Any:
    try:
        return _adapter(result_type).validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(f"unexpected response body for {response.request.url.path}: {e}") from e


def response_text(response: httpx.Response) -> str:
    try:
        return response.text
    except Exception:
        return ""


class Dispatcher:
    def __init__(self, cfg: ClientConfig, transport: Transport, *, sleep: Sleep = asyncio.sleep):
        self._cfg = cfg
        self._t = transport
        self._sleep = sleep

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def transport(self) -> Transport:
        return self._t

    async def send_once(self, request: ApiRequest) -> httpx.Response:
        """Single authenticated attempt, no retry; non-success raises ApiError."""
        response = await self._t.send(request, token=self._cfg.token)
        if not response.is_success:
            raise ApiError(response.status_code, response_text(response))
        return response

    async def dispatch(self, request: ApiRequest, result_type: type[T] | Any) -> T:
        """Execute ``request`` and decode the body into ``result_type``.

        429 responses carrying the rate-limit reset header and 5xx responses
        are retried up to three times, waiting 1, 2 and 4 seconds. Requests
        with a streamed body are sent once. Pass ``result_type=None`` to
        discard the body.
        """
        state = RetryState(max_retries=MAX_RETRIES if request.replayable else 0)
        while True:
            log.debug("%s %s attempt=%d", request.method, request.path, state.attempt + 1)
            response = await self._t.send(request, token=self._cfg.token)
            if state.should_retry(response):
                delay = state.backoff()
                log.warning(
                    "%s %s returned %d, retrying in %.0fs (%d/%d)",
                    request.method,
                    request.path,
                    response.status_code,
                    delay,
                    state.attempt + 1,
                    state.max_retries,
                )
                await self._sleep(delay)
                state.attempt += 1
                continue

            if not response.is_success:
                raise ApiError(response.status_code, response_text(response))
            if result_type is None:
                return None
            return decode_body(response, result_type)
