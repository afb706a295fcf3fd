"""
User persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database

RECENT_USERS_LIMIT = 20


async def get_user(db: Database, discord_id: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT discord_id, username, display_name, avatar, created_at, last_login
        FROM users
        WHERE discord_id = $1
        """,
        discord_id,
    )


async def list_recent_users(db: Database, *, limit: int = RECENT_USERS_LIMIT) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT discord_id, username, display_name, avatar, created_at, last_login
        FROM users
        ORDER BY last_login DESC
        LIMIT $1
        """,
        limit,
    )
