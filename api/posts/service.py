"""
Post, like and timeline business logic.
"""

from __future__ import annotations

from typing import Any

from core.db import Database
from core.errors import ClientInputError, NotFound, StorageError

from . import repository, schemas

DEFAULT_TIMELINE_LIMIT = 50
MAX_TIMELINE_LIMIT = 100


def clamp_limit(limit: int | None) -> int:
    if limit is None or limit <= 0:
        return DEFAULT_TIMELINE_LIMIT
    return min(limit, MAX_TIMELINE_LIMIT)


def clamp_offset(offset: int | None) -> int:
    if offset is None or offset < 0:
        return 0
    return offset


def validate_content(content: Any) -> str:
    if not content or not isinstance(content, str):
        raise ClientInputError("Content is required")
    trimmed = content.strip()
    if not trimmed or len(trimmed) > schemas.MAX_CONTENT_CHARS:
        raise ClientInputError(f"Content must be 1-{schemas.MAX_CONTENT_CHARS} characters")
    return trimmed


def to_post_response(row: dict) -> schemas.PostResponse:
    return schemas.PostResponse(
        id=int(row["id"]),
        discord_id=str(row["discord_id"]),
        content=str(row["content"]),
        created_at=row.get("created_at"),
        username=str(row["username"]),
        display_name=row.get("display_name"),
        avatar=row.get("avatar"),
        like_count=int(row.get("like_count") or 0),
        liked_by_me=bool(row.get("liked_by_me", False)),
    )


async def timeline(
    db: Database,
    *,
    viewer_id: str,
    limit: int | None = None,
    offset: int | None = None,
) -> list[schemas.PostResponse]:
    rows = await repository.list_timeline(
        db,
        viewer_id=viewer_id,
        limit=clamp_limit(limit),
        offset=clamp_offset(offset),
    )
    return [to_post_response(row) for row in rows]


async def user_posts(db: Database, *, author_id: str, viewer_id: str) -> list[schemas.PostResponse]:
    rows = await repository.list_user_posts(db, author_id=author_id, viewer_id=viewer_id)
    return [to_post_response(row) for row in rows]


async def create_post(db: Database, *, discord_id: str, content: Any) -> schemas.PostResponse:
    trimmed = validate_content(content)
    row = await repository.create_post(db, discord_id=discord_id, content=trimmed)
    if row is None:
        raise StorageError("Failed to create post.")
    return to_post_response(row)


async def delete_post(db: Database, post_id: int, *, discord_id: str) -> schemas.SuccessResponse:
    # "Missing" and "not yours" stay indistinguishable to the caller.
    row = await repository.delete_post(db, post_id, discord_id=discord_id)
    if row is None:
        raise NotFound("Post not found or not yours")
    return schemas.SuccessResponse()


async def like_post(db: Database, post_id: int, *, discord_id: str) -> schemas.SuccessResponse:
    await repository.like_post(db, post_id, discord_id=discord_id)
    return schemas.SuccessResponse()


async def unlike_post(db: Database, post_id: int, *, discord_id: str) -> schemas.SuccessResponse:
    await repository.unlike_post(db, post_id, discord_id=discord_id)
    return schemas.SuccessResponse()
