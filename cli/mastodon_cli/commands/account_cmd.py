from __future__ import annotations

import asyncio

import typer

from mastodon_client import MastodonClientError

from .. import console
from ..formatting import format_list_timestamp, strip_html
from ..http import client_from_context, render_client_error


def whoami(ctx: typer.Context):
    """
    Show the account that owns the configured token.
    """
    client = client_from_context(ctx, require_token=True)

    async def _run():
        async with client:
            return await client.accounts.verify_credentials()

    try:
        me = asyncio.run(_run())
    except MastodonClientError as exc:
        render_client_error(exc, action="verify credentials")
        raise typer.Exit(code=2)

    console.rule("Whoami")
    console.console.print(f"[bold]Account:[/] @{me.acct}")
    console.console.print(f"[bold]Name:[/] {me.display_name or me.username}")
    console.console.print(
        f"[bold]Posts:[/] {me.statuses_count}  [bold]Following:[/] {me.following_count}"
        f"  [bold]Followers:[/] {me.followers_count}"
    )
    console.console.print(f"[bold]Since:[/] {format_list_timestamp(me.created_at or None)}")
    if me.note:
        console.console.print(strip_html(me.note), markup=False)


def instance(ctx: typer.Context):
    """
    Show instance metadata.
    """
    client = client_from_context(ctx)

    async def _run():
        async with client:
            return await client.instance.get()

    try:
        info = asyncio.run(_run())
    except MastodonClientError as exc:
        render_client_error(exc, action="fetch instance")
        raise typer.Exit(code=2)

    console.rule(info.title)
    console.console.print(f"[bold]URI:[/] {info.uri}")
    console.console.print(f"[bold]Version:[/] {info.version or '-'}")
    console.console.print(f"[bold]Contact:[/] {info.email or '-'}")
    if info.description:
        console.console.print(strip_html(info.description), markup=False)
