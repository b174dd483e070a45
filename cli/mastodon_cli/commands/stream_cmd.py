from __future__ import annotations

import asyncio

import typer

from mastodon_client import (
    DeleteEvent,
    FiltersChangedEvent,
    MastodonClientError,
    NotificationEvent,
    StreamEvent,
    UpdateEvent,
)

from .. import console
from ..config import apply_profile, load_config
from ..formatting import format_notification, format_status
from ..http import CliState, client_from_context, render_client_error


def describe_event(event: StreamEvent) -> str:
    if isinstance(event, UpdateEvent):
        return format_status(event.status)
    if isinstance(event, NotificationEvent):
        return "notification: " + format_notification(event.notification)
    if isinstance(event, DeleteEvent):
        return f"deleted #{event.status_id}"
    if isinstance(event, FiltersChangedEvent):
        return "filters changed"
    return repr(event)


def stream(
        ctx: typer.Context,
        name: str | None = typer.Argument(None, help="Stream name: user, public, public:local, hashtag, list..."),
        tag: str | None = typer.Option(None, "--tag", help="Hashtag for hashtag streams."),
        list_id: str | None = typer.Option(None, "--list", help="List id for list streams."),
        limit: int | None = typer.Option(None, "--limit", min=1, help="Stop after this many events."),
):
    """
    Follow a streaming timeline until it closes or Ctrl+C.
    """
    state = ctx.obj if isinstance(ctx.obj, CliState) else CliState()
    stream_name = name or apply_profile(load_config(), state.profile).default_stream
    client = client_from_context(ctx)

    async def _run() -> int:
        received = 0
        async with client:
            events = await client.streaming().subscribe(stream_name, tag=tag, list_id=list_id)
            async with events:
                async for event in events:
                    console.console.print(describe_event(event), markup=False, highlight=False)
                    received += 1
                    if limit is not None and received >= limit:
                        break
        return received

    console.info(f"Streaming {stream_name}. Press Ctrl+C to stop.")
    try:
        received = asyncio.run(_run())
    except KeyboardInterrupt:
        console.info("Stopped.")
        return
    except MastodonClientError as exc:
        render_client_error(exc, action=f"stream {stream_name}")
        raise typer.Exit(code=2)
    console.info(f"Stream closed after {received} event(s).")
