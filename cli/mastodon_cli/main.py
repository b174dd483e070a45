from __future__ import annotations

import typer

from .commands import account_cmd, notifications_cmd, settings_cmd, stream_cmd
from .commands.status_cmd import app as status_app
from .commands.timeline_cmd import app as timeline_app
from .http import CliState
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="mastodon",
        help="Mastodon command line client",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(timeline_app, name="timeline")
    app.add_typer(status_app, name="status")
    app.command("whoami")(account_cmd.whoami)
    app.command("instance")(account_cmd.instance)
    app.command("notifications")(notifications_cmd.notifications)
    app.command("stream")(stream_cmd.stream)

    @app.callback()
    def _main(
            ctx: typer.Context,
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
            profile: str | None = typer.Option(None, "--profile", help="Use a [profiles.<name>] section of the config."),
            base_url: str | None = typer.Option(None, "--base-url", help="Override the instance URL."),
    ):
        setup_logging(verbose)
        ctx.obj = CliState(profile=profile, base_url=base_url)

    return app


app = _build_app()
