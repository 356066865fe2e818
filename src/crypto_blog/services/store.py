"""Post store client for the Crypto Blog.

This module provides the PostStoreClient class that handles all communication
between the client and the remote post store. It includes:

- HTTP client with lazily created connection pool
- Translation of transport and store failures into PostStoreError
- Metrics collection for monitoring
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections import defaultdict
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from crypto_blog.core.settings import settings
from crypto_blog.schemas.post import Post, PostCreate

# Configure logger for this module
logger = logging.getLogger(__name__)

# HTTP status codes
HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NO_CONTENT = 204
HTTP_BAD_REQUEST = 400
HTTP_INTERNAL_SERVER_ERROR = 500


class PostStoreError(RuntimeError):
    """Base exception raised for post store failures.

    Covers transport errors, server errors and malformed responses.
    """


class PostStoreRejectedError(PostStoreError):
    """Raised when the store refuses a request with a 4xx answer.

    Server-side validation failures on create end up here.
    """

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"Post store rejected request ({status_code}): {detail}")
        self.status_code = status_code
        self.detail = detail


class PostStore(Protocol):
    """The two operations the client consumes from a post store."""

    async def list_posts(self) -> list[Post]:
        ...

    async def create_post(self, title: str, body: str, author: str) -> Post | None:
        ...


OPERATION_LIST = "list"
OPERATION_CREATE = "create"


@dataclass
class OperationStats:
    """Call counts and timings for one store operation."""

    calls: int = 0
    failures: int = 0
    total_seconds: float = 0.0
    slowest_seconds: float = 0.0

    def as_dict(self) -> dict[str, Any]:
        return {
            "calls": self.calls,
            "failures": self.failures,
            "average_seconds": self.total_seconds / self.calls if self.calls else 0.0,
            "slowest_seconds": self.slowest_seconds,
        }


@dataclass
class StoreMetrics:
    """Per-operation metrics for the list and create calls.

    Failures are also counted by kind: ``http_<status>`` for store answers,
    ``network_error`` for transport failures and ``unknown_error`` otherwise.
    """

    operations: dict[str, OperationStats] = field(
        default_factory=lambda: {
            OPERATION_LIST: OperationStats(),
            OPERATION_CREATE: OperationStats(),
        }
    )
    failures_by_kind: dict[str, int] = field(default_factory=lambda: defaultdict(int))

    def record(self, operation: str, seconds: float, failure_kind: str | None = None) -> None:
        stats = self.operations.setdefault(operation, OperationStats())
        stats.calls += 1
        stats.total_seconds += seconds
        stats.slowest_seconds = max(stats.slowest_seconds, seconds)
        if failure_kind:
            stats.failures += 1
            self.failures_by_kind[failure_kind] += 1


@dataclass(frozen=True)
class StoreConfig:
    """Immutable configuration for post store operations."""

    base_url: str
    posts_path: str
    timeout_seconds: float | None


def load_store_config() -> StoreConfig:
    """Build configuration object from global settings."""

    return StoreConfig(
        base_url=settings.store_base_url,
        posts_path=settings.posts_path,
        timeout_seconds=settings.store_http_timeout_seconds,
    )


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, Mapping) and "detail" in payload:
        return str(payload["detail"])
    return str(payload)


class PostStoreClient:
    """HTTP client wrapper for the remote post store."""

    def __init__(
        self,
        config: StoreConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or load_store_config()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()
        self._metrics = StoreMetrics()

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    base_url=self.config.base_url,
                    timeout=httpx.Timeout(self.config.timeout_seconds),
                    transport=self._transport,
                )

        return self._client

    @dataclass
    class RequestParams:
        """Parameters for HTTP requests."""
        operation: str
        method: str
        path: str
        json_data: Any | None = None

    async def _request(self, params: RequestParams) -> httpx.Response:
        client = await self._ensure_client()

        start_time = time.time()
        endpoint = f"{params.method} {params.path}"
        error_type = None
        response_time = 0.0

        try:
            response = await client.request(
                params.method,
                params.path,
                json=params.json_data,
                headers={"Accept": "application/json"},
            )
            response_time = time.time() - start_time
            logger.debug(
                "%s answered %d in %.3fs", endpoint, response.status_code, response_time
            )

            if response.status_code >= HTTP_INTERNAL_SERVER_ERROR:
                error_type = f"http_{response.status_code}"
                raise PostStoreError(f"Post store responded with {response.status_code}")
            if response.status_code >= HTTP_BAD_REQUEST:
                error_type = f"http_{response.status_code}"
                raise PostStoreRejectedError(response.status_code, _error_detail(response))

        except PostStoreError:
            raise
        except httpx.HTTPError as exc:
            response_time = time.time() - start_time
            error_type = "network_error"
            raise PostStoreError(f"Post store request failed: {exc}") from exc
        except Exception as exc:
            response_time = time.time() - start_time
            error_type = "unknown_error"
            raise PostStoreError(f"Post store request failed: {exc}") from exc
        finally:
            self._metrics.record(params.operation, response_time, error_type)

        return response

    async def list_posts(self) -> list[Post]:
        """Fetch every post, in the order the store returns them."""

        response = await self._request(
            self.RequestParams(
                operation=OPERATION_LIST, method="GET", path=self.config.posts_path
            )
        )

        if response.status_code != HTTP_OK:
            raise PostStoreError(
                f"Unexpected post store response ({response.status_code}) when listing posts",
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise PostStoreError("Post store returned invalid JSON for post list") from exc
        if not isinstance(payload, list):
            raise PostStoreError("Post store returned a non-list payload for post list")

        try:
            return [Post.model_validate(item) for item in payload]
        except ValidationError as exc:
            raise PostStoreError(f"Post store returned a malformed post: {exc}") from exc

    async def create_post(self, title: str, body: str, author: str) -> Post | None:
        """Create a post and return it when the store echoes it back."""

        payload = PostCreate.model_construct(title=title, body=body, author=author)
        response = await self._request(
            self.RequestParams(
                operation=OPERATION_CREATE,
                method="POST",
                path=self.config.posts_path,
                json_data=payload.model_dump(),
            )
        )

        if response.status_code not in (HTTP_OK, HTTP_CREATED, HTTP_NO_CONTENT):
            raise PostStoreError(
                f"Unexpected post store response ({response.status_code}) when creating post",
            )

        if response.status_code == HTTP_NO_CONTENT or not response.content:
            return None
        try:
            return Post.model_validate(response.json())
        except (ValueError, ValidationError):
            # the create already happened; the follow-up refresh shows the post
            logger.debug("Post store create response did not contain a post")
            return None

    def get_metrics(self) -> dict[str, Any]:
        """Return list/create call statistics and failure counts by kind."""
        metrics: dict[str, Any] = {
            name: stats.as_dict() for name, stats in self._metrics.operations.items()
        }
        metrics["failures_by_kind"] = dict(self._metrics.failures_by_kind)
        return metrics

    async def close(self) -> None:
        """Clean up underlying HTTP client resources."""

        async with self._client_lock:
            if self._client is not None:
                await self._client.aclose()
                self._client = None
