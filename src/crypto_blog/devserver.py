"""Development post store for running the client locally.

Run with ``uvicorn crypto_blog.devserver:app``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, status

from crypto_blog.core.settings import settings
from crypto_blog.repositories.post_repo import InMemoryPostStore
from crypto_blog.schemas.post import Post, PostCreate


def create_app(store: InMemoryPostStore | None = None) -> FastAPI:
    """Build a FastAPI app serving the list and create operations."""
    backing_store = store if store is not None else InMemoryPostStore()

    def get_store() -> InMemoryPostStore:
        return backing_store

    StoreDep = Annotated[InMemoryPostStore, Depends(get_store)]
    router = APIRouter(prefix="/posts", tags=["posts"])

    @router.get("", response_model=list[Post])
    async def list_posts(store: StoreDep) -> list[Post]:
        return await store.list_posts()

    @router.post("", response_model=Post, status_code=status.HTTP_201_CREATED)
    async def create_post(payload: PostCreate, store: StoreDep) -> Post:
        return await store.create_post(payload.title, payload.body, payload.author)

    application = FastAPI(
        title=f"{settings.app_name} development store",
        version=settings.app_version,
    )
    application.include_router(router, prefix=settings.store_api_prefix.rstrip("/"))
    application.state.store = backing_store
    return application


app = create_app()
