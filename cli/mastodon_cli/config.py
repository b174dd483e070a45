from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from . import console

APP_NAME = "mastodon"
CONFIG_FILENAME = "config.toml"
BASE_URL_DEFAULT = "https://mastodon.social"
ENV_BASE_URL = "MASTODON_BASE_URL"
ENV_TOKEN = "MASTODON_TOKEN"

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AuthConfig:
    token: str = ""
    token_type: str = "bearer"


@dataclass
class AppConfig:
    base_url: str
    auth: AuthConfig
    default_stream: str = "user"


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(
        base_url=BASE_URL_DEFAULT,
        auth=AuthConfig(token="", token_type="bearer"),
    )


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not _is_interactive():
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _is_interactive() -> bool:
    import sys
    return bool(sys.stderr.isatty() or sys.stdout.isatty())


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "base_url": cfg.base_url,
        "default_stream": cfg.default_stream,
        "auth": {
            "token": cfg.auth.token,
            "token_type": cfg.auth.token_type,
        },
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)
    if base_url:
        cfg.base_url = base_url
    default_stream = str(data.get("default_stream") or "").strip()
    if default_stream:
        cfg.default_stream = default_stream
    auth_raw = data.get("auth") or {}
    if isinstance(auth_raw, dict):
        cfg.auth = AuthConfig(
            token=str(auth_raw.get("token") or ""),
            token_type=str(auth_raw.get("token_type") or "bearer"),
        )
    return cfg


def _read_toml(path: str) -> dict[str, Any] | None:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return None


def apply_env(cfg: AppConfig) -> AppConfig:
    base_url = os.getenv(ENV_BASE_URL, "").strip()
    token = os.getenv(ENV_TOKEN, "").strip()
    if base_url:
        cfg.base_url = normalize_base_url(base_url, warn=True)
    if token:
        cfg.auth = AuthConfig(token=token, token_type="bearer")
    return cfg


def load_config(*, env: bool = True) -> AppConfig:
    """Read config.toml; ``env=False`` skips environment overrides (use before saving)."""
    data = _read_toml(config_path())
    cfg = from_toml(data) if data is not None else default_config()
    return apply_env(cfg) if env else cfg


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    data = _read_toml(config_path())
    if data is None:
        return cfg

    profiles_raw = data.get("profiles") or {}
    if not isinstance(profiles_raw, dict):
        return cfg
    prof = profiles_raw.get(profile)
    if not isinstance(prof, dict):
        console.warn(f"profile {profile!r} not found in {config_path()}")
        return cfg

    base_url = normalize_base_url(str(prof.get("base_url") or cfg.base_url), warn=True)
    auth_raw = prof.get("auth") if isinstance(prof.get("auth"), dict) else {}
    token = str(prof.get("token") or auth_raw.get("token") or cfg.auth.token)
    return AppConfig(
        base_url=base_url or cfg.base_url,
        auth=AuthConfig(token=token, token_type=cfg.auth.token_type),
        default_stream=str(prof.get("default_stream") or cfg.default_stream),
    )


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
