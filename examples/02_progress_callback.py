#!/usr/bin/env python3
"""
02_progress_callback.py - Custom progress reporting with a temporary file

Demonstrates:
- A progress callback receiving (total_percent, current_percent, chunk)
- Ephemeral storage removed by end_stream()

Note: Requires internet connection and SOUNDCLOUD_CLIENT_ID to run
"""
import asyncio
import os
import sys

from soundcloud_downloader import StreamClient


def on_chunk(total_percent: float, current_percent: int, chunk: bytes) -> None:
    sys.stdout.write(f"\r  {current_percent:3d}% (+{len(chunk)} bytes)")
    sys.stdout.flush()


async def main() -> None:
    """Stream a track into a temp file, report its size, then delete it."""
    client_id = os.environ["SOUNDCLOUD_CLIENT_ID"]
    reference = sys.argv[1]

    async with StreamClient(client_id) as client:
        await client.resolve(reference)
        path = await client.load(on_chunk=on_chunk)
        print(f"\n  {path.stat().st_size} bytes in {path}")

        await client.end_stream()

    print("Temporary file removed.")


if __name__ == "__main__":
    asyncio.run(main())
