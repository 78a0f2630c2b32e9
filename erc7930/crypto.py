from __future__ import annotations
from Crypto.Hash import keccak

import asyncio


DIGEST_SIZE = 32


def keccak_256(msg: bytes | bytearray | memoryview) -> bytes:
    return keccak.new(data=bytes(msg), digest_bytes=DIGEST_SIZE).digest()


async def keccak_256_async(
    msg: bytes | bytearray | memoryview,
    loop: asyncio.AbstractEventLoop | None = None
) -> bytes:
    loop = loop or asyncio.get_running_loop()
    return await loop.run_in_executor(None, keccak_256, msg)
