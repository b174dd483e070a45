from __future__ import annotations

import os

import typer

from .. import console
from ..config import config_path, default_config, load_config, normalize_base_url, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/mastodon/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        base_url: str = typer.Option(
            ...,
            "--base-url",
            prompt="Instance URL",
            help="Instance URL like https://mastodon.social",
        ),
        token: str = typer.Option("", "--token", help="Access token (Settings > Development)."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.base_url = normalize_base_url(base_url, warn=True)
    if not cfg.base_url:
        console.err("Base URL cannot be empty.")
        raise typer.Exit(code=2)
    cfg.auth.token = token.strip()
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    token_state = "(set)" if (cfg.auth.token or "").strip() else "(empty)"
    console.console.print(
        f"base_url={cfg.base_url} token={token_state} default_stream={cfg.default_stream}"
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (base_url, default_stream)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "base_url":
        console.console.print(cfg.base_url)
        return
    if k == "default_stream":
        console.console.print(cfg.default_stream)
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set instance URL."),
        token: str | None = typer.Option(None, "--token", help="Set access token (empty string clears it)."),
        default_stream: str | None = typer.Option(None, "--default-stream", help="Stream used by `mastodon stream`."),
):
    cfg = load_config(env=False)
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True)
    if token is not None:
        cfg.auth.token = token.strip()
    if default_stream is not None:
        cfg.default_stream = default_stream.strip() or cfg.default_stream
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
