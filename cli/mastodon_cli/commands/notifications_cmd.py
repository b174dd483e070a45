from __future__ import annotations

import asyncio

import typer

from mastodon_client import MastodonClientError

from .. import console
from ..formatting import format_list_timestamp, format_notification
from ..http import client_from_context, render_client_error


def notifications(
        ctx: typer.Context,
        limit: int = typer.Option(15, "--limit", min=1, max=80, help="Number of notifications."),
        clear: bool = typer.Option(False, "--clear", help="Dismiss all notifications afterwards."),
):
    """
    List the latest notifications.
    """
    client = client_from_context(ctx, require_token=True)

    async def _run():
        async with client:
            items = await client.notifications.list(limit=limit)
            if clear:
                await client.notifications.clear()
            return items

    try:
        items = asyncio.run(_run())
    except MastodonClientError as exc:
        render_client_error(exc, action="fetch notifications")
        raise typer.Exit(code=2)

    if not items:
        console.info("No notifications.")
        return
    for item in items:
        stamp = format_list_timestamp(item.created_at)
        console.console.print(f"{stamp} {format_notification(item)}", markup=False, highlight=False)
    if clear:
        console.ok("Notifications cleared.")
