"""Plain-text rendering of posts and form errors."""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from crypto_blog.schemas.post import Post

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
EMPTY_LIST_MESSAGE = "No posts yet."


def render_byline(post: Post) -> str:
    return f"By {post.author} on {post.posted_at.strftime(DATE_FORMAT)}"


def render_post(post: Post) -> str:
    """Render one post card: title, byline, then body."""
    return "\n".join((post.title, render_byline(post), post.body))


def render_posts(posts: Iterable[Post]) -> str:
    """Render the post list in the order given."""
    cards = [render_post(post) for post in posts]
    if not cards:
        return EMPTY_LIST_MESSAGE
    return "\n\n".join(cards)


def render_field_errors(errors: Mapping[str, str]) -> str:
    return "\n".join(f"{name}: {message}" for name, message in errors.items())
