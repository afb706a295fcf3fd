"""
Shared fixtures for API tests.

Route tests run the FastAPI app without its lifespan (no Postgres): `get_db`
is overridden and the repository functions are swapped for `MemoryStore`.
"""

from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from auth import repository as auth_repository
from auth import security
from core.db import get_db
from core.errors import StorageError
from main import app
from posts import repository as posts_repository
from users import repository as users_repository

TEST_JWT_SECRET = "test-secret"


class MemoryStore:
    """In-memory stand-in for the users/posts/likes tables."""

    def __init__(self):
        self.users: dict[str, dict] = {}
        self.posts: dict[int, dict] = {}
        self.likes: set[tuple[int, str]] = set()
        self.calls = 0
        self._ids = itertools.count(1)
        self._ticks = itertools.count(1)
        self._epoch = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def _now(self) -> datetime:
        return self._epoch + timedelta(seconds=next(self._ticks))

    def _feed_row(self, post: dict, viewer_id: str) -> dict:
        author = self.users[post["discord_id"]]
        return {
            **post,
            "username": author["username"],
            "display_name": author["display_name"],
            "avatar": author["avatar"],
            "like_count": sum(1 for (post_id, _) in self.likes if post_id == post["id"]),
            "liked_by_me": (post["id"], viewer_id) in self.likes,
        }

    def _newest_first(self, posts):
        return sorted(posts, key=lambda p: (p["created_at"], p["id"]), reverse=True)

    async def upsert_discord_user(self, db, *, discord_id, username, display_name, avatar):
        self.calls += 1
        now = self._now()
        row = self.users.get(discord_id)
        if row is None:
            row = {"discord_id": discord_id, "created_at": now}
            self.users[discord_id] = row
        row.update(username=username, display_name=display_name, avatar=avatar, last_login=now)
        return dict(row)

    async def get_user(self, db, discord_id):
        self.calls += 1
        row = self.users.get(discord_id)
        return dict(row) if row else None

    async def list_recent_users(self, db, *, limit=20):
        self.calls += 1
        rows = sorted(self.users.values(), key=lambda u: u["last_login"], reverse=True)
        return [dict(row) for row in rows[:limit]]

    async def list_timeline(self, db, *, viewer_id, limit, offset):
        self.calls += 1
        posts = self._newest_first(self.posts.values())[offset : offset + limit]
        return [self._feed_row(post, viewer_id) for post in posts]

    async def list_user_posts(self, db, *, author_id, viewer_id):
        self.calls += 1
        posts = [p for p in self.posts.values() if p["discord_id"] == author_id]
        return [self._feed_row(post, viewer_id) for post in self._newest_first(posts)]

    async def create_post(self, db, *, discord_id, content):
        self.calls += 1
        if discord_id not in self.users:
            raise StorageError('insert or update on table "posts" violates foreign key constraint')
        post = {"id": next(self._ids), "discord_id": discord_id, "content": content, "created_at": self._now()}
        self.posts[post["id"]] = post
        return self._feed_row(post, discord_id)

    async def delete_post(self, db, post_id, *, discord_id):
        self.calls += 1
        post = self.posts.get(post_id)
        if post is None or post["discord_id"] != discord_id:
            return None
        del self.posts[post_id]
        self.likes = {like for like in self.likes if like[0] != post_id}
        return {"id": post_id}

    async def like_post(self, db, post_id, *, discord_id):
        self.calls += 1
        if post_id not in self.posts:
            raise StorageError('insert or update on table "likes" violates foreign key constraint')
        self.likes.add((post_id, discord_id))

    async def unlike_post(self, db, post_id, *, discord_id):
        self.calls += 1
        self.likes.discard((post_id, discord_id))

    def add_user(self, discord_id: str, username: str, display_name: str | None = None) -> dict:
        now = self._now()
        self.users[discord_id] = {
            "discord_id": discord_id,
            "username": username,
            "display_name": display_name or username,
            "avatar": None,
            "created_at": now,
            "last_login": now,
        }
        return self.users[discord_id]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def auth_env(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setenv("CLIENT_ORIGIN", "https://client.example")
    monkeypatch.setenv("DISCORD_CLIENT_ID", "client-id")
    monkeypatch.setenv("DISCORD_CLIENT_SECRET", "client-secret")
    monkeypatch.setenv("DISCORD_REDIRECT_URI", "https://api.example/auth/callback")


@pytest.fixture
def store(monkeypatch):
    memory = MemoryStore()
    monkeypatch.setattr(auth_repository, "upsert_discord_user", memory.upsert_discord_user)
    for name in ("get_user", "list_recent_users"):
        monkeypatch.setattr(users_repository, name, getattr(memory, name))
    for name in ("list_timeline", "list_user_posts", "create_post", "delete_post", "like_post", "unlike_post"):
        monkeypatch.setattr(posts_repository, name, getattr(memory, name))
    return memory


@pytest.fixture
def client(store):
    app.dependency_overrides[get_db] = lambda: object()
    # Not used as a context manager, so the lifespan (Postgres pool) never runs.
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_token(discord_id: str, username: str, display_name: str | None = None) -> str:
    return security.build_session_token(
        discord_id=discord_id,
        username=username,
        display_name=display_name or username,
    )


def auth_headers(discord_id: str, username: str = "user") -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(discord_id, username)}"}
