#!/usr/bin/env python3
"""
Read a user feed with both signing schemes.

Requirements:
- STREAM_API_KEY and STREAM_API_SECRET environment variables set (or a .env file)
- Optional: STREAM_REGION to target a regional endpoint

Usage:
    python examples/read_feed.py [user_id]
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv

from streamfeed import (
    AsyncStreamClient,
    Feed,
    Request,
    StreamClient,
    StreamConfig,
    TransportError,
    with_params,
    with_token,
)

load_dotenv()
logging.basicConfig(level=logging.DEBUG)


def read_with_key_secret(config: StreamConfig, feed: Feed) -> None:
    req = with_params(Request(path=f"/feed/{feed.slug}/{feed.user_id}/"), {"limit": "5"})
    with StreamClient(config) as client:
        print(client.send(req))


async def read_with_token(config: StreamConfig, feed: Feed) -> None:
    req = with_token(Request(path=f"/feed/{feed.slug}/{feed.user_id}/"), feed, "feed", "read")
    async with AsyncStreamClient(config) as client:
        print(await client.send(req))


def main() -> None:
    user_id = sys.argv[1] if len(sys.argv) > 1 else "eric"
    config = StreamConfig.from_env()
    feed = Feed(slug="user", user_id=user_id)
    try:
        read_with_key_secret(config, feed)
        asyncio.run(read_with_token(config, feed))
    except TransportError as e:
        print(f"Request failed: {e.payload!r}")
        sys.exit(1)


if __name__ == "__main__":
    main()
