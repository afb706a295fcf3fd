"""
User business logic.
"""

from __future__ import annotations

from core.db import Database
from core.errors import NotFound

from . import repository, schemas


def to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        discord_id=str(user_row["discord_id"]),
        username=str(user_row["username"]),
        display_name=user_row.get("display_name"),
        avatar=user_row.get("avatar"),
        created_at=user_row.get("created_at"),
        last_login=user_row.get("last_login"),
    )


async def get_user(db: Database, discord_id: str) -> schemas.UserResponse:
    row = await repository.get_user(db, discord_id)
    if row is None:
        raise NotFound("User not found")
    return to_user_response(row)


async def recent_users(db: Database) -> list[schemas.UserResponse]:
    rows = await repository.list_recent_users(db)
    return [to_user_response(row) for row in rows]
