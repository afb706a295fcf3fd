"""
Post API schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel

MAX_CONTENT_CHARS = 280

# Column ranges: posts.id is INTEGER, OFFSET takes a BIGINT.
MAX_POST_ID = 2**31 - 1
MAX_OFFSET = 2**63 - 1


class CreatePostRequest(BaseModel):
    # Validated by the service so type and length errors share one message set.
    content: Any = None


class PostResponse(BaseModel):
    id: int
    discord_id: str
    content: str
    created_at: datetime | None = None
    username: str
    display_name: str | None = None
    avatar: str | None = None
    like_count: int = 0
    liked_by_me: bool = False


class SuccessResponse(BaseModel):
    success: bool = True
