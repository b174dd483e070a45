from __future__ import annotations

import pytest

from mastodon_cli import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    monkeypatch.delenv(config.ENV_BASE_URL, raising=False)
    monkeypatch.delenv(config.ENV_TOKEN, raising=False)
    return tmp_path


@pytest.fixture
def write_config(isolated_config):
    def _write(*lines: str):
        path = isolated_config / "config.toml"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def account_json():
    def _make(account_id: str = "1", username: str = "alice") -> dict:
        return {"id": account_id, "username": username, "acct": username, "display_name": username.title()}

    return _make


@pytest.fixture
def status_json(account_json):
    def _make(status_id: str = "100", content: str = "<p>hello</p>") -> dict:
        return {
            "id": status_id,
            "created_at": "2026-01-30T12:00:00.000Z",
            "uri": f"https://mastodon.example/users/alice/statuses/{status_id}",
            "url": f"https://mastodon.example/@alice/{status_id}",
            "content": content,
            "account": account_json(),
        }

    return _make
