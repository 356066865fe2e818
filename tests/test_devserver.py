from fastapi.testclient import TestClient

from crypto_blog.repositories.post_repo import InMemoryPostStore


def test_list_posts_starts_empty(api_client: TestClient) -> None:
    res = api_client.get("/api/v1/posts")

    assert res.status_code == 200
    assert res.json() == []


def test_create_post_returns_created_post(api_client: TestClient) -> None:
    res = api_client.post(
        "/api/v1/posts",
        json={"title": "Hello", "body": "World", "author": "Alice"},
    )

    assert res.status_code == 201
    data = res.json()
    assert data["id"] == 0
    assert data["title"] == "Hello"
    assert data["body"] == "World"
    assert data["author"] == "Alice"
    assert isinstance(data["timestamp"], int)


def test_posts_listed_in_creation_order(
    api_client: TestClient, memory_store: InMemoryPostStore
) -> None:
    for title in ("first", "second", "third"):
        api_client.post("/api/v1/posts", json={"title": title, "body": "b", "author": "a"})

    res = api_client.get("/api/v1/posts")

    assert [post["title"] for post in res.json()] == ["first", "second", "third"]
    assert [post["id"] for post in res.json()] == [0, 1, 2]
    assert len(memory_store) == 3


def test_create_post_requires_every_field(api_client: TestClient) -> None:
    res = api_client.post("/api/v1/posts", json={"title": "", "body": "b"})

    assert res.status_code == 422
    assert api_client.get("/api/v1/posts").json() == []
