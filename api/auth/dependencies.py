"""
Auth dependencies for protected FastAPI routes.

The guard only validates the session token; it never touches the database.
"""

from __future__ import annotations

from fastapi import Depends, Header

from core.errors import Unauthorized

from . import service


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise Unauthorized("Unauthorized")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise Unauthorized("Invalid Authorization header format.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise Unauthorized("Authorization must be: Bearer <token>.")
    return token


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


async def get_current_user(session_token: str = Depends(get_bearer_token)) -> dict:
    return service.get_claims_from_session_token(session_token)
