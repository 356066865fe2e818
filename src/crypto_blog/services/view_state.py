"""View state for the post list and the authoring surface.

This module provides the ViewStateController that keeps the displayed posts
in step with the remote store and sequences writes:

- refresh replaces the whole post collection or leaves it stale on failure
- submit creates a post first and only then refreshes
- observers receive a new immutable snapshot after every change
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import httpx

from crypto_blog.schemas.post import Post, PostCreate
from crypto_blog.services.store import PostStore, PostStoreError
from crypto_blog.services.validation import Draft, ValidationResult, validate

# Configure logger for this module
logger = logging.getLogger(__name__)

# Expected store failures; anything else is logged with a traceback
STORE_FAILURES = (PostStoreError, httpx.HTTPError, OSError)

Observer = Callable[["ViewState"], None]


@dataclass(frozen=True)
class ViewState:
    """Snapshot of everything the post screen displays."""

    posts: tuple[Post, ...] = ()
    is_authoring_open: bool = False
    field_errors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    last_error: str | None = None


class ViewStateController:
    """Owns the post list, the authoring flag and the draft being composed."""

    def __init__(self, store: PostStore) -> None:
        self.store = store
        self.state = ViewState()
        self.draft = Draft()
        self._observers: list[Observer] = []
        self._creates_in_flight = 0

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register a callback for state changes and return its unsubscriber."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def _set_state(self, **changes: object) -> None:
        self.state = dataclasses.replace(self.state, **changes)
        for observer in list(self._observers):
            try:
                observer(self.state)
            except Exception:
                logger.exception("View state observer %r failed", observer)

    async def mount(self) -> None:
        """Populate the post list for the first time."""
        await self.refresh()

    async def refresh(self) -> bool:
        """Replace the post list with a fresh copy from the store.

        On failure the current posts stay on screen and the error is logged.
        """
        try:
            posts = await self.store.list_posts()
        except STORE_FAILURES as e:
            logger.warning("Error fetching posts: %s", e)
            self._set_state(last_error=f"Error fetching posts: {e}")
            return False
        except Exception as e:
            logger.warning("Unexpected error fetching posts: %s", e, exc_info=True)
            self._set_state(last_error=f"Error fetching posts: {e}")
            return False

        self._set_state(posts=tuple(posts), last_error=None)
        logger.debug("Refreshed post list with %d posts", len(posts))
        return True

    def open_authoring(self) -> None:
        self._set_state(is_authoring_open=True)

    def close_authoring(self) -> None:
        """Hide the authoring surface and discard the draft."""
        if not self.draft.is_empty():
            logger.debug("Discarding unsent draft titled %r", self.draft.title)
        self.draft.reset()
        self._set_state(is_authoring_open=False, field_errors=MappingProxyType({}))

    def update_field(self, name: str, value: str) -> None:
        self.draft.update_field(name, value)

    async def submit_draft(self) -> ValidationResult:
        """Validate the current draft and submit it when it passes.

        Invalid drafts never reach the store; their errors are kept on the
        state for the authoring surface to display.
        """
        result = validate(self.draft)
        payload = result.payload
        if payload is None:
            self._set_state(field_errors=result.errors)
            return result

        self._set_state(field_errors=MappingProxyType({}))
        await self.submit_post(payload)
        return result

    async def submit_post(self, payload: PostCreate) -> bool:
        """Create a post, then close the surface and refresh the list.

        The refresh is only issued after the create resolved. A failed refresh
        does not undo the create. A failed create keeps the surface open and
        the draft untouched so the same submit can be retried.

        Args:
            payload: A payload that already passed validation.

        Returns:
            True if the store accepted the post.
        """
        if self._creates_in_flight:
            # Overlapping submits are not blocked; make them visible
            logger.warning(
                "Submitting a post while %d create call(s) are still pending",
                self._creates_in_flight,
            )

        self._creates_in_flight += 1
        try:
            await self.store.create_post(payload.title, payload.body, payload.author)
        except STORE_FAILURES as e:
            logger.warning("Error creating post: %s", e)
            self._set_state(last_error=f"Error creating post: {e}")
            return False
        except Exception as e:
            logger.warning("Unexpected error creating post: %s", e, exc_info=True)
            self._set_state(last_error=f"Error creating post: {e}")
            return False
        finally:
            self._creates_in_flight -= 1

        self.draft.reset()
        self._set_state(
            is_authoring_open=False,
            field_errors=MappingProxyType({}),
            last_error=None,
        )
        await self.refresh()
        return True
