import pytest

from crypto_blog.cli import build_parser, run
from crypto_blog.repositories.post_repo import InMemoryPostStore
from crypto_blog.services.store import PostStoreError
from tests.factories import make_post


class UnreachableStore:
    async def list_posts(self) -> list:
        raise PostStoreError("store offline")

    async def create_post(self, title: str, body: str, author: str) -> None:
        raise PostStoreError("store offline")


def _args(*argv: str):
    return build_parser().parse_args(list(argv))


@pytest.mark.asyncio
async def test_list_prints_posts(capsys: pytest.CaptureFixture[str]) -> None:
    store = InMemoryPostStore([make_post(0, "Hello", body="World", author="Alice")])

    code = await run(_args("list"), store=store)

    out = capsys.readouterr().out
    assert code == 0
    assert "Hello" in out
    assert "By Alice on" in out


@pytest.mark.asyncio
async def test_list_empty_store(capsys: pytest.CaptureFixture[str]) -> None:
    code = await run(_args("list"), store=InMemoryPostStore())

    assert code == 0
    assert "No posts yet." in capsys.readouterr().out


@pytest.mark.asyncio
async def test_create_with_missing_title_reports_error(capsys: pytest.CaptureFixture[str]) -> None:
    store = InMemoryPostStore()

    code = await run(_args("create", "--body", "x", "--author", "y"), store=store)

    captured = capsys.readouterr()
    assert code == 1
    assert "title: Title is required" in captured.out
    assert "body:" not in captured.out
    assert len(store) == 0


@pytest.mark.asyncio
async def test_create_prints_refreshed_list(capsys: pytest.CaptureFixture[str]) -> None:
    store = InMemoryPostStore()

    code = await run(
        _args("create", "--title", "Fresh", "--body", "News", "--author", "Dana"),
        store=store,
    )

    assert code == 0
    assert len(store) == 1
    assert "Fresh" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_unreachable_store_fails_without_raising(capsys: pytest.CaptureFixture[str]) -> None:
    code = await run(_args("list"), store=UnreachableStore())

    assert code == 1
    assert "store offline" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_create_against_unreachable_store(capsys: pytest.CaptureFixture[str]) -> None:
    code = await run(
        _args("create", "--title", "a", "--body", "b", "--author", "c"),
        store=UnreachableStore(),
    )

    assert code == 1
    assert "Error creating post" in capsys.readouterr().err


def test_base_url_option_parses() -> None:
    args = _args("--base-url", "http://other:1", "list")

    assert args.base_url == "http://other:1"
    assert args.command == "list"
