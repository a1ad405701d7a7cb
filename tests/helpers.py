"""Test helpers: scripted sockets and frame builders."""

import struct
from typing import Iterable, List

from Crypto.Cipher import AES

from lgspkctl.const import AES_IV, AES_KEY, MAGIC


class ScriptedSocket:
    """Stands in for a connected socket; ``recv`` replays the given chunks.

    After the script runs out it behaves like a closed peer (returns b"").
    An ``Exception`` instance in the script is raised instead of returned.
    """

    def __init__(self, chunks: Iterable):
        self.chunks: List = list(chunks)
        self.sent = bytearray()
        self.recv_sizes: List[int] = []

    def recv(self, bufsize: int) -> bytes:
        self.recv_sizes.append(bufsize)
        if not self.chunks:
            return b""
        chunk = self.chunks.pop(0)
        if isinstance(chunk, Exception):
            raise chunk
        assert len(chunk) <= bufsize, f"script chunk {len(chunk)} > recv size {bufsize}"
        return chunk

    def sendall(self, data: bytes) -> None:
        self.sent += data


def split(data: bytes, size: int) -> List[bytes]:
    return [data[i : i + size] for i in range(0, len(data), size)]


def raw_frame(plain_block_aligned: bytes) -> bytes:
    """Encrypt already padded plaintext without adding padding of its own."""
    payload = AES.new(AES_KEY, AES.MODE_CBC, iv=AES_IV).encrypt(plain_block_aligned)
    return bytes([MAGIC]) + struct.pack(">I", len(payload)) + payload
