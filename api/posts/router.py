"""
Post, like and timeline API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query, status

from auth import dependencies as auth_dependencies
from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.get("/posts", response_model=list[schemas.PostResponse])
async def list_posts(
    limit: int | None = Query(default=None),
    offset: int | None = Query(default=None, le=schemas.MAX_OFFSET),
    current_user: dict = Depends(auth_dependencies.get_current_user),
    db: Database = Depends(get_db),
) -> list[schemas.PostResponse]:
    """
    Timeline: every post, newest first. `limit` is capped at 100.
    """
    return await service.timeline(
        db,
        viewer_id=current_user["discord_id"],
        limit=limit,
        offset=offset,
    )


@router.post(
    "/posts",
    response_model=schemas.PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: schemas.CreatePostRequest,
    current_user: dict = Depends(auth_dependencies.get_current_user),
    db: Database = Depends(get_db),
) -> schemas.PostResponse:
    return await service.create_post(
        db,
        discord_id=current_user["discord_id"],
        content=request.content,
    )


@router.delete("/posts/{post_id}", response_model=schemas.SuccessResponse)
async def delete_post(
    post_id: int = Path(le=schemas.MAX_POST_ID),
    current_user: dict = Depends(auth_dependencies.get_current_user),
    db: Database = Depends(get_db),
) -> schemas.SuccessResponse:
    return await service.delete_post(db, post_id, discord_id=current_user["discord_id"])


@router.post("/posts/{post_id}/like", response_model=schemas.SuccessResponse)
async def like_post(
    post_id: int = Path(le=schemas.MAX_POST_ID),
    current_user: dict = Depends(auth_dependencies.get_current_user),
    db: Database = Depends(get_db),
) -> schemas.SuccessResponse:
    return await service.like_post(db, post_id, discord_id=current_user["discord_id"])


@router.delete("/posts/{post_id}/like", response_model=schemas.SuccessResponse)
async def unlike_post(
    post_id: int = Path(le=schemas.MAX_POST_ID),
    current_user: dict = Depends(auth_dependencies.get_current_user),
    db: Database = Depends(get_db),
) -> schemas.SuccessResponse:
    return await service.unlike_post(db, post_id, discord_id=current_user["discord_id"])
