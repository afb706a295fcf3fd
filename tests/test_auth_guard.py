"""
Tests for the bearer-token guard on protected routes.
"""

import time

import jwt
import pytest

from conftest import TEST_JWT_SECRET, auth_headers

PROTECTED = [
    ("get", "/users/me"),
    ("get", "/users"),
    ("get", "/users/42"),
    ("get", "/users/42/posts"),
    ("get", "/posts"),
    ("post", "/posts"),
    ("delete", "/posts/1"),
    ("post", "/posts/1/like"),
    ("delete", "/posts/1/like"),
]


def _expired_token() -> str:
    now = int(time.time())
    return jwt.encode(
        {"discord_id": "42", "username": "bob", "type": "session", "iat": now - 3600, "exp": now - 60},
        TEST_JWT_SECRET,
        algorithm="HS256",
    )


class TestAuthGuard:

    @pytest.mark.parametrize("method,path", PROTECTED)
    def test_missing_header(self, client, store, method, path):
        resp = client.request(method, path, json={"content": "hi"})
        assert resp.status_code == 401
        assert store.calls == 0

    @pytest.mark.parametrize(
        "header",
        [
            "garbage",
            "Basic abc",
            "Bearer ",
            "Bearer not-a-jwt",
        ],
    )
    def test_garbled_header(self, client, store, header):
        resp = client.post("/posts", json={"content": "hi"}, headers={"Authorization": header})
        assert resp.status_code == 401
        assert store.calls == 0
        assert store.posts == {}

    def test_expired_token(self, client, store):
        resp = client.get("/posts", headers={"Authorization": f"Bearer {_expired_token()}"})
        assert resp.status_code == 401
        assert resp.headers["www-authenticate"] == "Bearer"
        assert store.calls == 0

    def test_valid_token_passes(self, client, store):
        resp = client.get("/posts", headers=auth_headers("42", "bob"))
        assert resp.status_code == 200
        assert resp.json() == []

    def test_health_is_public(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}
