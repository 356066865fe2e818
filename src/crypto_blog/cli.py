"""
Crypto Blog command line client.

Exit code:
  0 = command completed
  1 = validation failed or the post store could not be reached

Typical usage:
  crypto-blog list
  crypto-blog create --title Hello --body World --author Alice
  crypto-blog --base-url http://127.0.0.1:8000 list
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys

from crypto_blog.core.settings import settings
from crypto_blog.presentation.render import render_field_errors, render_posts
from crypto_blog.services.store import PostStore, PostStoreClient, load_store_config
from crypto_blog.services.view_state import ViewStateController

logger = logging.getLogger(__name__)


def say(msg: str) -> None:
    print(msg)


def fail(msg: str) -> None:
    print(f"[crypto-blog][FAIL] {msg}", file=sys.stderr)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="crypto-blog", description=settings.app_name)
    parser.add_argument(
        "--base-url",
        default=None,
        help="Post store base URL (defaults to BLOG_STORE_BASE_URL)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="Show every post")

    create = commands.add_parser("create", help="Author a new post")
    create.add_argument("--title", default="")
    create.add_argument("--body", default="")
    create.add_argument("--author", default="")
    return parser


async def run_list(controller: ViewStateController) -> int:
    await controller.mount()
    if controller.state.last_error:
        fail(controller.state.last_error)
        return 1
    say(render_posts(controller.state.posts))
    return 0


async def run_create(controller: ViewStateController, args: argparse.Namespace) -> int:
    await controller.mount()
    controller.open_authoring()
    controller.update_field("title", args.title)
    controller.update_field("body", args.body)
    controller.update_field("author", args.author)

    result = await controller.submit_draft()
    if not result.is_valid:
        fail("Post not submitted")
        say(render_field_errors(result.errors))
        return 1
    if controller.state.is_authoring_open:
        # create failed; the draft is still held by the controller
        fail(controller.state.last_error or "Error creating post")
        return 1

    if controller.state.last_error:
        fail(controller.state.last_error)
    say(render_posts(controller.state.posts))
    return 0


async def run(args: argparse.Namespace, store: PostStore | None = None) -> int:
    """Execute one command against the given store or the configured one."""
    client: PostStoreClient | None = None
    if store is None:
        config = load_store_config()
        if args.base_url:
            config = dataclasses.replace(config, base_url=args.base_url)
        client = PostStoreClient(config)
        store = client

    controller = ViewStateController(store)
    logger.debug("Running %s command", args.command)
    try:
        if args.command == "create":
            return await run_create(controller, args)
        return await run_list(controller)
    finally:
        if client is not None:
            await client.close()


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
