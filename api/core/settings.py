"""
Environment-backed settings.

Values are read at call time so tests can patch the environment.
"""

from __future__ import annotations

import os

DEFAULT_DISCORD_API_BASE_URL = "https://discord.com/api"
LOCAL_DEV_ORIGIN = "http://localhost:3000"


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def database_ssl() -> str | None:
    # Hosted Postgres wants TLS but ships certificates we don't verify.
    value = env_str("DATABASE_SSL").lower()
    if value in ("", "0", "false", "off", "disable"):
        return None
    return "require"


def discord_client_id() -> str:
    return env_str("DISCORD_CLIENT_ID")


def discord_client_secret() -> str:
    return env_str("DISCORD_CLIENT_SECRET")


def discord_redirect_uri() -> str:
    return env_str("DISCORD_REDIRECT_URI")


def discord_api_base_url() -> str:
    return env_str("DISCORD_API_BASE_URL", DEFAULT_DISCORD_API_BASE_URL)


def discord_timeout_s() -> float:
    return env_float("DISCORD_TIMEOUT_S", 10.0)


def client_origin() -> str:
    return env_str("CLIENT_ORIGIN")


def cors_origins() -> list[str]:
    origins: list[str] = []
    for raw in [client_origin(), *env_str("CORS_ORIGINS").split(","), LOCAL_DEV_ORIGIN]:
        origin = raw.strip().rstrip("/")
        if origin and origin not in origins:
            origins.append(origin)
    return origins
