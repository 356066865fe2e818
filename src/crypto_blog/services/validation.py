"""Draft handling and submission validation for new posts."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from crypto_blog.schemas.post import PostCreate

__all__ = ["DRAFT_FIELDS", "Draft", "ValidationResult", "validate"]

DRAFT_FIELDS = ("title", "body", "author")

REQUIRED_MESSAGES = {
    "title": "Title is required",
    "body": "Body is required",
    "author": "Author is required",
}


@dataclass
class Draft:
    """Client-held input for a post that has not been created yet."""

    title: str = ""
    body: str = ""
    author: str = ""

    def update_field(self, name: str, value: str) -> None:
        """Set one draft field from user input."""
        if name not in DRAFT_FIELDS:
            raise ValueError(f"Unknown draft field: {name}")
        setattr(self, name, value)

    def reset(self) -> None:
        """Discard everything typed so far."""
        self.title = ""
        self.body = ""
        self.author = ""

    def is_empty(self) -> bool:
        return not (self.title or self.body or self.author)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a draft: a payload or per-field errors."""

    payload: PostCreate | None = None
    errors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_valid(self) -> bool:
        return self.payload is not None


def validate(draft: Draft) -> ValidationResult:
    """Check that every draft field is present.

    Presence only: values are not trimmed, so whitespace counts as content.
    Every failing field is reported, in form order.

    Args:
        draft: The draft to check. It is not modified.

    Returns:
        A result carrying either the validated payload or the error messages.
    """
    errors = {
        name: REQUIRED_MESSAGES[name]
        for name in DRAFT_FIELDS
        if not getattr(draft, name)
    }
    if errors:
        return ValidationResult(errors=MappingProxyType(errors))

    payload = PostCreate(title=draft.title, body=draft.body, author=draft.author)
    return ValidationResult(payload=payload)
