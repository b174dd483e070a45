from mastodon_cli import config


def test_save_config_round_trips(isolated_config) -> None:
    cfg = config.AppConfig(
        base_url="https://mastodon.example",
        auth=config.AuthConfig(token="token", token_type="bearer"),
        default_stream="public",
    )

    path = config.save_config(cfg)
    contents = isolated_config.joinpath("config.toml").read_text(encoding="utf-8")
    loaded = config.load_config()

    assert path.endswith("config.toml")
    assert 'base_url = "https://mastodon.example"' in contents
    assert loaded.base_url == "https://mastodon.example"
    assert loaded.auth.token == "token"
    assert loaded.default_stream == "public"


def test_load_config_defaults_without_file() -> None:
    cfg = config.load_config()
    assert cfg.base_url == config.BASE_URL_DEFAULT
    assert cfg.auth.token == ""
    assert cfg.default_stream == "user"


def test_env_overrides_file(write_config, monkeypatch) -> None:
    write_config('base_url = "https://file.example"', "", "[auth]", 'token = "file-token"')
    monkeypatch.setenv(config.ENV_BASE_URL, "env.example/")
    monkeypatch.setenv(config.ENV_TOKEN, "env-token")

    cfg = config.load_config()
    assert cfg.base_url == "https://env.example"
    assert cfg.auth.token == "env-token"

    raw = config.load_config(env=False)
    assert raw.base_url == "https://file.example"
    assert raw.auth.token == "file-token"


def test_apply_profile_overrides_base_url_and_token(write_config) -> None:
    write_config(
        'base_url = "https://default.example"',
        "",
        "[auth]",
        'token = "default-token"',
        "",
        "[profiles.work]",
        'base_url = "https://work.example"',
        'token = "work-token"',
        'default_stream = "public:local"',
    )

    cfg = config.apply_profile(config.load_config(), "work")

    assert cfg.base_url == "https://work.example"
    assert cfg.auth.token == "work-token"
    assert cfg.default_stream == "public:local"


def test_apply_profile_unknown_keeps_config(write_config) -> None:
    write_config('base_url = "https://default.example"')
    cfg = config.load_config()
    assert config.apply_profile(cfg, "missing") is cfg


def test_normalize_base_url_defaults_to_https() -> None:
    assert config.normalize_base_url("example.com") == "https://example.com"


def test_normalize_base_url_defaults_to_http_for_localhost() -> None:
    assert config.normalize_base_url("127.0.0.1:3000") == "http://127.0.0.1:3000"


def test_normalize_base_url_strips_trailing_slash() -> None:
    assert config.normalize_base_url("https://example.com/") == "https://example.com"
