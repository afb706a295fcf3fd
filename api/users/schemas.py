"""
User API schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class UserResponse(BaseModel):
    discord_id: str
    username: str
    display_name: str | None = None
    avatar: str | None = None
    created_at: datetime | None = None
    last_login: datetime | None = None
