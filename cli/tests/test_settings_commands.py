from __future__ import annotations

from typer.testing import CliRunner

from mastodon_cli import config, main


def test_settings_group_available() -> None:
    runner = CliRunner()
    result = runner.invoke(main.app, ["--help"])
    assert result.exit_code == 0
    assert "settings" in result.output


def test_settings_init_writes_config(isolated_config) -> None:
    runner = CliRunner()
    result = runner.invoke(main.app, ["settings", "init", "--base-url", "mastodon.example", "--token", "abc"])

    assert result.exit_code == 0, result.output
    cfg = config.load_config()
    assert cfg.base_url == "https://mastodon.example"
    assert cfg.auth.token == "abc"


def test_settings_init_does_not_overwrite(write_config) -> None:
    write_config('base_url = "https://kept.example"')
    runner = CliRunner()
    result = runner.invoke(main.app, ["settings", "init", "--base-url", "other.example"])

    assert result.exit_code == 0
    assert "already exists" in result.output
    assert config.load_config().base_url == "https://kept.example"


def test_settings_set_and_get(monkeypatch) -> None:
    runner = CliRunner()
    result = runner.invoke(
        main.app,
        ["settings", "set", "--base-url", "https://mastodon.example", "--default-stream", "public"],
    )
    assert result.exit_code == 0, result.output

    result = runner.invoke(main.app, ["settings", "get", "default_stream"])
    assert result.exit_code == 0
    assert result.output.strip() == "public"


def test_settings_set_does_not_persist_env_token(monkeypatch, isolated_config) -> None:
    monkeypatch.setenv(config.ENV_TOKEN, "from-env")
    runner = CliRunner()
    result = runner.invoke(main.app, ["settings", "set", "--default-stream", "public"])

    assert result.exit_code == 0
    assert "from-env" not in isolated_config.joinpath("config.toml").read_text(encoding="utf-8")


def test_settings_get_unknown_key() -> None:
    runner = CliRunner()
    result = runner.invoke(main.app, ["settings", "get", "nope"])
    assert result.exit_code == 2
    assert "Unknown setting" in result.output
