"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import RedirectResponse

from core.db import Database, get_db

from . import service

router = APIRouter()


@router.get("/auth/callback")
async def discord_callback(
    code: str | None = Query(default=None),
    redirect: str | None = Query(default=None),
    db: Database = Depends(get_db),
) -> RedirectResponse:
    """
    Discord OAuth2 redirect target. Sends the browser back to the client with
    `?token=<session token>` appended.
    """
    url = await service.login_with_discord(db, code=code, redirect=redirect)
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
