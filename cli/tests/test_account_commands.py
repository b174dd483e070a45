from __future__ import annotations

import httpx
import respx
from typer.testing import CliRunner

from mastodon_cli import config, main

BASE_URL = "https://mastodon.example"


@respx.mock
def test_whoami_prints_account(monkeypatch, account_json) -> None:
    monkeypatch.setenv(config.ENV_BASE_URL, BASE_URL)
    monkeypatch.setenv(config.ENV_TOKEN, "cli-token")
    data = account_json("1", "alice")
    data.update({"statuses_count": 3, "created_at": "2025-05-01T00:00:00.000Z"})
    respx.get(f"{BASE_URL}/api/v1/accounts/verify_credentials").mock(return_value=httpx.Response(200, json=data))

    runner = CliRunner()
    result = runner.invoke(main.app, ["whoami"])

    assert result.exit_code == 0, result.output
    assert "@alice" in result.output
    assert "2025-05-01 00:00" in result.output


def test_whoami_without_token() -> None:
    runner = CliRunner()
    result = runner.invoke(main.app, ["whoami"])

    assert result.exit_code == 2
    assert "Not authenticated" in result.output


@respx.mock
def test_instance_uses_profile(write_config) -> None:
    write_config(
        'base_url = "https://default.example"',
        "",
        "[profiles.other]",
        'base_url = "https://other.example"',
    )
    route = respx.get("https://other.example/api/v1/instance").mock(
        return_value=httpx.Response(200, json={"uri": "other.example", "title": "Other", "version": "4.3.0"})
    )

    runner = CliRunner()
    result = runner.invoke(main.app, ["--profile", "other", "instance"])

    assert result.exit_code == 0, result.output
    assert route.call_count == 1
    assert "4.3.0" in result.output


@respx.mock
def test_notifications_list_and_clear(monkeypatch, account_json) -> None:
    monkeypatch.setenv(config.ENV_BASE_URL, BASE_URL)
    monkeypatch.setenv(config.ENV_TOKEN, "cli-token")
    respx.get(f"{BASE_URL}/api/v1/notifications").mock(
        return_value=httpx.Response(
            200,
            json=[{"id": "n1", "type": "follow", "created_at": "2026-01-30T12:00:00Z", "account": account_json("2", "bob")}],
        )
    )
    clear = respx.post(f"{BASE_URL}/api/v1/notifications/clear").mock(return_value=httpx.Response(200, json={}))

    runner = CliRunner()
    result = runner.invoke(main.app, ["notifications", "--clear"])

    assert result.exit_code == 0, result.output
    assert "follow from @bob" in result.output
    assert clear.call_count == 1
