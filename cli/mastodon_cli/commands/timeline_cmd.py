from __future__ import annotations

import asyncio

import typer

from mastodon_client import MastodonClientError, PageCursor
from mastodon_client.models import Status

from .. import console
from ..formatting import format_status
from ..http import client_from_context, render_client_error

app = typer.Typer(help="Read timelines page by page.", no_args_is_help=True)

DEFAULT_LIMIT = 20


async def _print_pages(cursor: PageCursor[Status], pages: int) -> int:
    shown = 0
    for _ in range(pages):
        page = await cursor.next_page()
        if page is None:
            break
        for status in page:
            console.console.print(format_status(status), markup=False, highlight=False)
            shown += 1
    return shown


def _show(ctx: typer.Context, make_cursor, *, pages: int, require_token: bool = False) -> None:
    client = client_from_context(ctx, require_token=require_token)

    async def _run() -> int:
        async with client:
            return await _print_pages(make_cursor(client), pages)

    try:
        shown = asyncio.run(_run())
    except MastodonClientError as exc:
        render_client_error(exc, action="fetch timeline")
        raise typer.Exit(code=2)
    if not shown:
        console.info("No statuses.")


@app.command("public", help="Public (federated) timeline.")
def timeline_public(
        ctx: typer.Context,
        local: bool = typer.Option(False, "--local", help="Only statuses from this instance."),
        pages: int = typer.Option(1, "--pages", min=1, help="Number of pages to fetch."),
        limit: int = typer.Option(DEFAULT_LIMIT, "--limit", min=1, max=40, help="Statuses per page."),
):
    _show(ctx, lambda c: c.timelines.public_paged(local=local, limit=limit), pages=pages)


@app.command("home", help="Home timeline of the authenticated account.")
def timeline_home(
        ctx: typer.Context,
        pages: int = typer.Option(1, "--pages", min=1, help="Number of pages to fetch."),
        limit: int = typer.Option(DEFAULT_LIMIT, "--limit", min=1, max=40, help="Statuses per page."),
):
    _show(ctx, lambda c: c.timelines.home_paged(limit=limit), pages=pages, require_token=True)


@app.command("tag", help="Statuses with a hashtag.")
def timeline_tag(
        ctx: typer.Context,
        tag: str = typer.Argument(..., help="Hashtag, with or without #."),
        local: bool = typer.Option(False, "--local", help="Only statuses from this instance."),
        pages: int = typer.Option(1, "--pages", min=1, help="Number of pages to fetch."),
        limit: int = typer.Option(DEFAULT_LIMIT, "--limit", min=1, max=40, help="Statuses per page."),
):
    _show(ctx, lambda c: c.timelines.hashtag(tag, local=local, limit=limit), pages=pages)
