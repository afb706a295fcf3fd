"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies
from core.db import Database, get_db
from posts import schemas as post_schemas
from posts import service as post_service

from . import schemas, service

router = APIRouter()


@router.get("/users/me", response_model=schemas.UserResponse)
async def get_me(
    current_user: dict = Depends(auth_dependencies.get_current_user),
    db: Database = Depends(get_db),
) -> schemas.UserResponse:
    return await service.get_user(db, current_user["discord_id"])


@router.get("/users", response_model=list[schemas.UserResponse])
async def list_users(
    _: dict = Depends(auth_dependencies.get_current_user),
    db: Database = Depends(get_db),
) -> list[schemas.UserResponse]:
    """
    Most recently active users (sidebar recommendations).
    """
    return await service.recent_users(db)


@router.get("/users/{discord_id}", response_model=schemas.UserResponse)
async def get_user(
    discord_id: str,
    _: dict = Depends(auth_dependencies.get_current_user),
    db: Database = Depends(get_db),
) -> schemas.UserResponse:
    return await service.get_user(db, discord_id)


@router.get("/users/{discord_id}/posts", response_model=list[post_schemas.PostResponse])
async def get_user_posts(
    discord_id: str,
    current_user: dict = Depends(auth_dependencies.get_current_user),
    db: Database = Depends(get_db),
) -> list[post_schemas.PostResponse]:
    return await post_service.user_posts(
        db,
        author_id=discord_id,
        viewer_id=current_user["discord_id"],
    )
