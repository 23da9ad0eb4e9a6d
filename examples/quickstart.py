#!/usr/bin/env python3
"""
feedloader Quickstart Example

Shows both ways of loading a feed: the completion callback and the awaitable
bridge.

Usage:
    python examples/quickstart.py https://example.com/feed.json
"""

import asyncio
import sys

from feedloader import (
    HttpxHTTPClient,
    LoadFailure,
    LoadResult,
    RemoteFeedLoader,
    load_async,
)


def report(result: LoadResult) -> None:
    if isinstance(result, LoadFailure):
        print(f"✗ Failed: {result.error.value}")
        return
    print(f"✓ Loaded {len(result.items)} items")
    for item in result.items:
        print(f"  {item.id}  {item.location or '-'}  {item.image_url}")


async def main(url: str) -> None:
    """Load the same feed with a callback, then by awaiting."""

    async with HttpxHTTPClient(timeout=10.0) as client:
        loader = RemoteFeedLoader(url, client)

        # Callback style
        print("Callback load...")
        done = asyncio.Event()

        def on_complete(result: LoadResult) -> None:
            report(result)
            done.set()

        loader.load(on_complete)
        await done.wait()

        print("\nAwaitable load...")
        report(await load_async(loader))


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "https://example.com/feed.json"))
