"""
Auth business logic.

Login flow (`/auth/callback`):
1) Exchange the OAuth2 code for a Discord access token
2) Fetch the Discord profile
3) Upsert the local user row
4) Issue a signed session token and hand it back via redirect
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import ValidationError

from core import discord, settings
from core.db import Database
from core.errors import ClientInputError, StorageError, Unauthorized, UpstreamAuthError

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def append_token(redirect_url: str, token: str) -> str:
    parts = urlsplit(redirect_url)
    params = parse_qsl(parts.query, keep_blank_values=True)
    params.append(("token", token))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(params), parts.fragment))


def resolve_redirect(redirect: str | None) -> str:
    target = (redirect or "").strip() or settings.client_origin()
    if not target:
        raise ClientInputError("Missing redirect target")
    return target


async def login_with_discord(db: Database, *, code: str | None, redirect: str | None = None) -> str:
    """
    Run the full login handshake and return the URL to redirect the browser to.
    """
    code = (code or "").strip()
    if not code:
        raise ClientInputError("Missing code")
    target = resolve_redirect(redirect)

    base_url = settings.discord_api_base_url()
    timeout_s = settings.discord_timeout_s()
    try:
        access_token = await discord.exchange_code(
            base_url=base_url,
            client_id=settings.discord_client_id(),
            client_secret=settings.discord_client_secret(),
            redirect_uri=settings.discord_redirect_uri(),
            code=code,
            timeout_s=timeout_s,
        )
        data = await discord.fetch_current_user(
            base_url=base_url,
            access_token=access_token,
            timeout_s=timeout_s,
        )
        profile = schemas.DiscordProfile.model_validate(data)
    except (discord.DiscordError, ValidationError) as exc:
        logger.exception("auth_callback_failed reason=%s", exc)
        reason = str(exc) if isinstance(exc, discord.DiscordError) else "User fetch failed"
        raise UpstreamAuthError(f"Authentication failed: {reason}") from exc

    try:
        user_row = await repository.upsert_discord_user(
            db,
            discord_id=profile.id,
            username=profile.username,
            display_name=profile.display_name,
            avatar=profile.avatar,
        )
    except StorageError as exc:
        logger.exception("auth_callback_failed reason=%s", exc.detail)
        raise

    token = security.build_session_token(
        discord_id=str(user_row["discord_id"]),
        username=str(user_row["username"]),
        display_name=user_row.get("display_name"),
    )
    logger.info("login_complete discord_id=%s", user_row["discord_id"])
    return append_token(target, token)


def get_claims_from_session_token(token: str) -> dict:
    try:
        payload = security.decode_session_token(token)
    except security.AuthSecurityError as exc:
        raise Unauthorized(str(exc)) from exc

    claims = schemas.SessionClaims(
        discord_id=str(payload["discord_id"]),
        username=str(payload.get("username") or ""),
        display_name=payload.get("display_name"),
    )
    return claims.model_dump()
