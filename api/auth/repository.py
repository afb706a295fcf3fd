"""
Auth persistence helpers.
"""

from __future__ import annotations

from core.db import Database


async def upsert_discord_user(
    db: Database,
    *,
    discord_id: str,
    username: str,
    display_name: str,
    avatar: str | None,
) -> dict:
    """
    Insert the user on first login, otherwise refresh profile fields and
    `last_login`. One statement, keyed on `discord_id`.
    """
    row = await db.fetch_one(
        """
        INSERT INTO users (discord_id, username, display_name, avatar)
        VALUES ($1, $2, $3, $4)
        ON CONFLICT (discord_id) DO UPDATE
        SET username = EXCLUDED.username,
            display_name = EXCLUDED.display_name,
            avatar = EXCLUDED.avatar,
            last_login = now()
        RETURNING discord_id, username, display_name, avatar, created_at, last_login
        """,
        discord_id,
        username,
        display_name,
        avatar,
    )
    if row is None:
        raise RuntimeError("Failed to upsert user.")
    return row
