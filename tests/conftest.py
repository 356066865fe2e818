# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Iterator
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from crypto_blog.devserver import create_app
from crypto_blog.repositories.post_repo import InMemoryPostStore
from crypto_blog.schemas.post import Post
from crypto_blog.services.store import PostStoreClient, StoreConfig
from tests.factories import make_post

TEST_BASE_URL = "http://test"
POSTS_PATH = "/api/v1/posts"


@pytest.fixture()
def sample_posts() -> list[Post]:
    return [make_post(2, "Second"), make_post(1, "First")]


@pytest.fixture()
def memory_store() -> InMemoryPostStore:
    return InMemoryPostStore()


@pytest.fixture()
def dev_app(memory_store: InMemoryPostStore) -> FastAPI:
    return create_app(memory_store)


@pytest.fixture()
def api_client(dev_app: FastAPI) -> Iterator[TestClient]:
    with TestClient(dev_app, base_url=TEST_BASE_URL) as test_client:
        yield test_client


@pytest.fixture()
def store_config() -> StoreConfig:
    return StoreConfig(base_url=TEST_BASE_URL, posts_path=POSTS_PATH, timeout_seconds=None)


@pytest.fixture()
def store_client(dev_app: FastAPI, store_config: StoreConfig) -> PostStoreClient:
    """Client wired to the development store without opening sockets."""
    return PostStoreClient(store_config, transport=httpx.ASGITransport(app=dev_app))


@pytest.fixture()
def mock_transport_client(
    store_config: StoreConfig,
) -> Callable[[Callable[[httpx.Request], httpx.Response]], PostStoreClient]:
    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> PostStoreClient:
        return PostStoreClient(store_config, transport=httpx.MockTransport(handler))

    return _factory


@pytest.fixture()
def mock_store(sample_posts: list[Post]) -> AsyncMock:
    store = AsyncMock(spec=PostStoreClient)
    store.list_posts.return_value = sample_posts
    store.create_post.return_value = None
    return store
