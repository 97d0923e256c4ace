#!/usr/bin/env python3
"""
01_basic_download.py - Resolve a stream reference and keep the file

Demonstrates: resolve() then load() into a persistent directory
Note: Requires internet connection and SOUNDCLOUD_CLIENT_ID to run
"""
import asyncio
import os
import sys

from soundcloud_downloader import StorageConfig, StreamClient


async def main() -> None:
    """Download one track to ./downloads/01-basic.mp3."""
    client_id = os.environ["SOUNDCLOUD_CLIENT_ID"]
    reference = sys.argv[1]

    async with StreamClient(
        client_id, StorageConfig.persistent("./downloads")
    ) as client:
        stream = await client.resolve(reference)
        if stream is None:
            print(f"Could not resolve {reference}")
            return

        # Running the example twice does not download again
        path = await client.load("01-basic")

    print(f"Saved to {path}")


if __name__ == "__main__":
    asyncio.run(main())
