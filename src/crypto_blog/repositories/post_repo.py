"""In-process post store used by the development server and tests."""
from __future__ import annotations

import asyncio
import time
from itertools import count

from crypto_blog.schemas.post import Post

__all__ = ["InMemoryPostStore"]


class InMemoryPostStore:
    """Thin in-memory store for post entities.

    Identifiers increase monotonically and timestamps are taken in nanoseconds
    at creation time. Posts are listed in creation order.
    """

    def __init__(self, posts: list[Post] | None = None) -> None:
        """Initialize the store, optionally seeded with existing posts."""
        self._posts: list[Post] = list(posts or [])
        start = max((post.id for post in self._posts), default=-1) + 1
        self._ids = count(start)
        self._lock = asyncio.Lock()

    async def list_posts(self) -> list[Post]:
        """Return every post in creation order."""
        return list(self._posts)

    async def create_post(self, title: str, body: str, author: str) -> Post:
        """Insert a new post and return it.

        Args:
            title: Post title.
            body: Post body.
            author: Display name of the author.
        """
        async with self._lock:
            post = Post(
                id=next(self._ids),
                title=title,
                body=body,
                author=author,
                timestamp=time.time_ns(),
            )
            self._posts.append(post)
        return post

    def __len__(self) -> int:
        return len(self._posts)
