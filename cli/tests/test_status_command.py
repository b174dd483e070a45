from __future__ import annotations

import json

import httpx
import respx
from typer.testing import CliRunner

from mastodon_cli import config, main

BASE_URL = "https://mastodon.example"


def _login(monkeypatch) -> None:
    monkeypatch.setenv(config.ENV_BASE_URL, BASE_URL)
    monkeypatch.setenv(config.ENV_TOKEN, "cli-token")


@respx.mock
def test_status_post_sends_builder_fields(monkeypatch, status_json) -> None:
    _login(monkeypatch)
    route = respx.post(f"{BASE_URL}/api/v1/statuses").mock(
        return_value=httpx.Response(200, json=status_json("55"))
    )

    runner = CliRunner()
    result = runner.invoke(
        main.app,
        ["status", "post", "hello world", "--visibility", "unlisted", "--cw", "test", "--reply-to", "9"],
    )

    assert result.exit_code == 0, result.output
    request = route.calls[0].request
    assert request.headers["Authorization"] == "Bearer cli-token"
    assert json.loads(request.content) == {
        "status": "hello world",
        "visibility": "unlisted",
        "spoiler_text": "test",
        "in_reply_to_id": "9",
    }
    assert "Posted" in result.output


@respx.mock
def test_status_post_uploads_media_first(monkeypatch, tmp_path, status_json) -> None:
    _login(monkeypatch)
    image = tmp_path / "cat.png"
    image.write_bytes(b"\x89PNG fake")
    upload = respx.post(f"{BASE_URL}/api/v2/media").mock(
        return_value=httpx.Response(200, json={"id": "m1", "type": "image"})
    )
    post = respx.post(f"{BASE_URL}/api/v1/statuses").mock(
        return_value=httpx.Response(200, json=status_json("56"))
    )

    runner = CliRunner()
    result = runner.invoke(main.app, ["status", "post", "look", "--media", str(image)])

    assert result.exit_code == 0, result.output
    assert upload.call_count == 1
    assert json.loads(post.calls[0].request.content)["media_ids"] == ["m1"]


def test_status_post_rejects_unknown_visibility(monkeypatch) -> None:
    _login(monkeypatch)
    runner = CliRunner()
    result = runner.invoke(main.app, ["status", "post", "hi", "--visibility", "everyone"])

    assert result.exit_code == 2
    assert "Unknown visibility" in result.output


@respx.mock
def test_status_show_and_actions(monkeypatch, status_json) -> None:
    _login(monkeypatch)
    respx.get(f"{BASE_URL}/api/v1/statuses/7").mock(
        return_value=httpx.Response(200, json=status_json("7", "<p>[not markup]</p>"))
    )
    fav = respx.post(f"{BASE_URL}/api/v1/statuses/7/favourite").mock(
        return_value=httpx.Response(200, json=status_json("7"))
    )
    boost = respx.post(f"{BASE_URL}/api/v1/statuses/7/reblog").mock(
        return_value=httpx.Response(200, json=status_json("7"))
    )
    delete = respx.delete(f"{BASE_URL}/api/v1/statuses/7").mock(
        return_value=httpx.Response(200, json=status_json("7"))
    )

    runner = CliRunner()
    shown = runner.invoke(main.app, ["status", "show", "7"])
    assert shown.exit_code == 0, shown.output
    assert "[not markup]" in shown.output

    assert runner.invoke(main.app, ["status", "favourite", "7"]).exit_code == 0
    assert runner.invoke(main.app, ["status", "boost", "7"]).exit_code == 0
    assert runner.invoke(main.app, ["status", "delete", "7"]).exit_code == 0
    assert fav.call_count == 1
    assert boost.call_count == 1
    assert delete.call_count == 1


@respx.mock
def test_status_show_unauthorized(monkeypatch) -> None:
    _login(monkeypatch)
    respx.get(f"{BASE_URL}/api/v1/statuses/7").mock(
        return_value=httpx.Response(401, json={"error": "The access token is invalid"})
    )

    runner = CliRunner()
    result = runner.invoke(main.app, ["status", "show", "7"])

    assert result.exit_code == 2
    assert "Not authenticated" in result.output
