from __future__ import annotations

from dataclasses import dataclass

import typer

from mastodon_client import (
    ApiError,
    AuthError,
    ClientConfig,
    DecodeError,
    MastodonClient,
    MastodonClientError,
    NetworkError,
    StreamError,
    UrlError,
)

from . import console
from .config import AppConfig, apply_profile, load_config, normalize_base_url


@dataclass
class CliState:
    profile: str | None = None
    base_url: str | None = None


def make_client(
    cfg: AppConfig,
    *,
    profile: str | None,
    base_url_override: str | None,
    require_token: bool = False,
) -> MastodonClient:
    effective_cfg = apply_profile(cfg, profile)
    base_url = normalize_base_url(base_url_override or effective_cfg.base_url, warn=True)
    token = effective_cfg.auth.token or None
    if require_token and not token:
        raise AuthError("Not authenticated. No token found.")
    return MastodonClient(ClientConfig(base_url=base_url, token=token))


def client_from_context(ctx: typer.Context, *, require_token: bool = False) -> MastodonClient:
    state = ctx.obj if isinstance(ctx.obj, CliState) else CliState()
    try:
        return make_client(
            load_config(),
            profile=state.profile,
            base_url_override=state.base_url,
            require_token=require_token,
        )
    except MastodonClientError as exc:
        render_client_error(exc, action="create client")
        raise typer.Exit(code=2)


def render_client_error(exc: MastodonClientError, *, action: str) -> None:
    if isinstance(exc, AuthError):
        console.err(str(exc))
        console.info("Run: mastodon settings set --token <token>")
        return
    if isinstance(exc, ApiError):
        if exc.status_code in (401, 403):
            console.err("Not authenticated. Your token is invalid or lacks the required scope.")
            return
        if exc.status_code == 404:
            console.err(f"Failed to {action}: not found.")
            return
        console.err(f"Failed to {action}: HTTP {exc.status_code}")
        if exc.body:
            console.err(exc.body[:1000])
        return
    if isinstance(exc, UrlError):
        console.err(f"Invalid URL: {exc}")
        return
    if isinstance(exc, NetworkError):
        console.err(f"Failed to {action}: server unreachable ({exc})")
        return
    if isinstance(exc, StreamError):
        console.err(f"Stream ended with an error: {exc}")
        return
    if isinstance(exc, DecodeError):
        console.err(f"Failed to {action}: unexpected response from server.")
        return
    console.err(f"Failed to {action}: {exc}")
