"""
Auth schemas.
"""

from __future__ import annotations

from pydantic import BaseModel


class SessionClaims(BaseModel):
    discord_id: str
    username: str
    display_name: str | None = None


class DiscordProfile(BaseModel):
    id: str
    username: str
    global_name: str | None = None
    avatar: str | None = None

    @property
    def display_name(self) -> str:
        return self.global_name or self.username
