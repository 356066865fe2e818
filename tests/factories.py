"""Builders for test data."""
from __future__ import annotations

from crypto_blog.schemas.post import Post


def make_post(post_id: int, title: str = "Hello", **overrides: object) -> Post:
    fields: dict[str, object] = {
        "id": post_id,
        "title": title,
        "body": "World",
        "author": "Alice",
        "timestamp": 1_000_000_000,
    }
    fields.update(overrides)
    return Post.model_validate(fields)
