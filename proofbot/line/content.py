"""Byte-stream accumulation for LINE message content."""
from collections.abc import AsyncIterator


async def accumulate(chunks: AsyncIterator[bytes]) -> bytes:
    """Join chunks in arrival order once the stream is exhausted.

    An error raised by the stream propagates as-is; a partial buffer is never returned.
    """
    buffer = [chunk async for chunk in chunks]
    return b"".join(buffer)
