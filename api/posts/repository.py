"""
Post and like persistence (raw SQL).

Feed queries return each post with its author fields, the like count and
whether the viewer liked it, all in one statement (no per-post lookups).
"""

from __future__ import annotations

from core.db import Database

_POST_FEED_SELECT = """
    SELECT
      p.id,
      p.discord_id,
      p.content,
      p.created_at,
      u.username,
      u.display_name,
      u.avatar,
      COUNT(l.id) AS like_count,
      EXISTS(
        SELECT 1 FROM likes l2
        WHERE l2.post_id = p.id
          AND l2.discord_id = $1
      ) AS liked_by_me
    FROM posts p
    JOIN users u ON u.discord_id = p.discord_id
    LEFT JOIN likes l ON l.post_id = p.id
"""

_POST_FEED_GROUP = """
    GROUP BY p.id, u.username, u.display_name, u.avatar
    ORDER BY p.created_at DESC, p.id DESC
"""


async def list_timeline(db: Database, *, viewer_id: str, limit: int, offset: int) -> list[dict]:
    return await db.fetch_all(
        _POST_FEED_SELECT
        + _POST_FEED_GROUP
        + """
        LIMIT $2
        OFFSET $3
        """,
        viewer_id,
        limit,
        offset,
    )


async def list_user_posts(db: Database, *, author_id: str, viewer_id: str) -> list[dict]:
    return await db.fetch_all(
        _POST_FEED_SELECT
        + """
        WHERE p.discord_id = $2
        """
        + _POST_FEED_GROUP,
        viewer_id,
        author_id,
    )


async def create_post(db: Database, *, discord_id: str, content: str) -> dict | None:
    """
    Insert a post and return it joined with its author.

    A brand-new post has no likes, so the counters are constants.
    """
    return await db.fetch_one(
        """
        WITH inserted AS (
            INSERT INTO posts (discord_id, content)
            VALUES ($1, $2)
            RETURNING id, discord_id, content, created_at
        )
        SELECT
          i.id,
          i.discord_id,
          i.content,
          i.created_at,
          u.username,
          u.display_name,
          u.avatar,
          0 AS like_count,
          false AS liked_by_me
        FROM inserted i
        JOIN users u ON u.discord_id = i.discord_id
        """,
        discord_id,
        content,
    )


async def delete_post(db: Database, post_id: int, *, discord_id: str) -> dict | None:
    """
    Delete a post owned by the given user.
    Returns the deleted id, or None when missing or owned by someone else.
    """
    return await db.fetch_one(
        """
        DELETE FROM posts
        WHERE id = $1
          AND discord_id = $2
        RETURNING id
        """,
        post_id,
        discord_id,
    )


async def like_post(db: Database, post_id: int, *, discord_id: str) -> None:
    await db.execute(
        """
        INSERT INTO likes (post_id, discord_id)
        VALUES ($1, $2)
        ON CONFLICT (post_id, discord_id) DO NOTHING
        """,
        post_id,
        discord_id,
    )


async def unlike_post(db: Database, post_id: int, *, discord_id: str) -> None:
    await db.execute(
        """
        DELETE FROM likes
        WHERE post_id = $1
          AND discord_id = $2
        """,
        post_id,
        discord_id,
    )
