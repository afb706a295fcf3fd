"""
Session credential helpers.
"""

from __future__ import annotations

import time
from typing import Any

import jwt

from core import settings

SESSION_TOKEN_TYPE = "session"
SESSION_TOKEN_TTL_S = 7 * 24 * 60 * 60


class AuthSecurityError(RuntimeError):
    pass


def jwt_secret() -> str:
    # Local default keeps development simple.
    # In production, set JWT_SECRET in environment.
    return settings.env_str("JWT_SECRET", "dev-change-this-secret")


def jwt_algorithm() -> str:
    return settings.env_str("JWT_ALG", "HS256")


def now_epoch_s() -> int:
    return int(time.time())


def build_session_token(*, discord_id: str, username: str, display_name: str | None) -> str:
    issued_at = now_epoch_s()
    expires_at = issued_at + SESSION_TOKEN_TTL_S

    payload = {
        "discord_id": discord_id,
        "username": username,
        "display_name": display_name,
        "type": SESSION_TOKEN_TYPE,
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(payload, jwt_secret(), algorithm=jwt_algorithm())


def decode_session_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Session token is empty.")

    try:
        payload = jwt.decode(
            raw,
            jwt_secret(),
            algorithms=[jwt_algorithm()],
            options={"require": ["exp"]},
        )
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid token") from exc

    token_type = str(payload.get("type") or "").strip().lower()
    if token_type != SESSION_TOKEN_TYPE:
        raise AuthSecurityError("Token is not a session token.")

    if not str(payload.get("discord_id") or "").strip():
        raise AuthSecurityError("Token has no discord_id claim.")

    return payload
