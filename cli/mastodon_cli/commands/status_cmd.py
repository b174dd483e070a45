from __future__ import annotations

import asyncio

import typer

from mastodon_client import MastodonClientError

from .. import console
from ..formatting import format_status
from ..http import client_from_context, render_client_error

app = typer.Typer(help="Post and manage statuses.", no_args_is_help=True)

VISIBILITIES = ("public", "unlisted", "private", "direct")


def _call(ctx: typer.Context, action: str, fn):
    client = client_from_context(ctx, require_token=True)

    async def _run():
        async with client:
            return await fn(client)

    try:
        return asyncio.run(_run())
    except MastodonClientError as exc:
        render_client_error(exc, action=action)
        raise typer.Exit(code=2)


@app.command("post", help="Publish a new status.")
def status_post(
        ctx: typer.Context,
        text: str = typer.Argument(..., help="Status text."),
        visibility: str | None = typer.Option(None, "--visibility", help="public, unlisted, private or direct."),
        spoiler: str | None = typer.Option(None, "--cw", help="Content warning."),
        reply_to: str | None = typer.Option(None, "--reply-to", help="Status id to reply to."),
        media: list[str] = typer.Option([], "--media", help="Attach a file (repeatable)."),
        description: str | None = typer.Option(None, "--description", help="Alt text for attached media."),
):
    if visibility is not None and visibility not in VISIBILITIES:
        console.err(f"Unknown visibility: {visibility}")
        raise typer.Exit(code=2)

    async def _post(client):
        builder = client.statuses.builder(text)
        for path in media:
            attachment = await client.media.upload(path, description=description)
            builder.media(attachment.id)
        if visibility:
            builder.visibility(visibility)
        if spoiler:
            builder.spoiler_text(spoiler)
        if reply_to:
            builder.in_reply_to(reply_to)
        return await builder.send()

    status = _call(ctx, "post status", _post)
    console.ok(f"Posted {status.url or status.id}")


@app.command("show", help="Show a status.")
def status_show(ctx: typer.Context, status_id: str = typer.Argument(..., help="Status id.")):
    status = _call(ctx, "fetch status", lambda c: c.statuses.get(status_id))
    console.console.print(format_status(status), markup=False, highlight=False)


@app.command("delete", help="Delete one of your statuses.")
def status_delete(ctx: typer.Context, status_id: str = typer.Argument(..., help="Status id.")):
    _call(ctx, "delete status", lambda c: c.statuses.delete(status_id))
    console.ok(f"Deleted {status_id}")


@app.command("favourite", help="Favourite a status.")
def status_favourite(ctx: typer.Context, status_id: str = typer.Argument(..., help="Status id.")):
    _call(ctx, "favourite status", lambda c: c.statuses.favourite(status_id))
    console.ok(f"Favourited {status_id}")


@app.command("boost", help="Boost (reblog) a status.")
def status_boost(ctx: typer.Context, status_id: str = typer.Argument(..., help="Status id.")):
    _call(ctx, "boost status", lambda c: c.statuses.reblog(status_id))
    console.ok(f"Boosted {status_id}")
