"""
Discord OAuth2 HTTP client helpers.

Used endpoints:
- POST /oauth2/token  -> {"access_token": "...", "token_type": "Bearer", ...}
- GET  /users/@me     -> {"id": "...", "username": "...", "global_name": ..., "avatar": ...}
"""

from __future__ import annotations

from typing import Any

import httpx

# Discord failures are explicit and separable from other runtime errors.
class DiscordError(RuntimeError):
    pass


def _normalize_base_url(base_url: str) -> str:
    base_url = (base_url or "").strip()
    if not base_url:
        raise DiscordError("DISCORD_API_BASE_URL is empty.")
    return base_url.rstrip("/")


def _json_object(resp: httpx.Response, failure: str) -> dict[str, Any]:
    try:
        data = resp.json()
    except ValueError as exc:
        raise DiscordError(f"{failure}: invalid response") from exc
    if not isinstance(data, dict):
        raise DiscordError(f"{failure}: invalid response")
    return data


async def exchange_code(
    *,
    base_url: str,
    client_id: str,
    client_secret: str,
    redirect_uri: str,
    code: str,
    timeout_s: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """
    Trade an OAuth2 authorization code for a Discord access token.
    """
    base_url = _normalize_base_url(base_url)
    form = {
        "client_id": client_id,
        "client_secret": client_secret,
        "grant_type": "authorization_code",
        "code": code,
        "redirect_uri": redirect_uri,
    }
    try:
        async with httpx.AsyncClient(base_url=base_url, timeout=timeout_s, transport=transport) as client:
            resp = await client.post("/oauth2/token", data=form)
    except httpx.HTTPError as exc:
        raise DiscordError("Token exchange failed") from exc

    if not resp.is_success:
        raise DiscordError(f"Token exchange failed: {resp.status_code}")

    data = _json_object(resp, "Token exchange failed")
    access_token = data.get("access_token")
    if not isinstance(access_token, str) or not access_token:
        raise DiscordError("Token exchange failed: no access_token")
    return access_token


async def fetch_current_user(
    *,
    base_url: str,
    access_token: str,
    timeout_s: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any]:
    """
    Fetch the profile of the user that owns `access_token`.
    """
    base_url = _normalize_base_url(base_url)
    headers = {"Authorization": f"Bearer {access_token}"}
    try:
        async with httpx.AsyncClient(base_url=base_url, timeout=timeout_s, transport=transport) as client:
            resp = await client.get("/users/@me", headers=headers)
    except httpx.HTTPError as exc:
        raise DiscordError("User fetch failed") from exc

    if not resp.is_success:
        raise DiscordError(f"User fetch failed: {resp.status_code}")

    data = _json_object(resp, "User fetch failed")
    if not str(data.get("id") or "").strip() or not str(data.get("username") or "").strip():
        raise DiscordError("User fetch failed: incomplete profile")
    return data
