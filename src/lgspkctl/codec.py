"""Packet codec: encrypted, length-prefixed frames.

Frame layout::

    +-------+----------------+------------------------------------+
    | Magic | Length (BE u32)| AES-256-CBC payload (block padded) |
    | 1 byte| 4 bytes        | Length bytes                       |
    +-------+----------------+------------------------------------+

- Magic: 0x10
- Length: size of the *encrypted* payload, a positive multiple of 16
- Payload: UTF-8 JSON, padded with 1..16 bytes whose value is the pad length
"""

import enum
import logging
import struct
from dataclasses import dataclass
from typing import Optional, Union

from .const import DEFAULT_CONFIG, HEADER_SIZE, ProtocolConfig
from .crypto import decrypt_payload, encrypt_payload, padded_size

logger = logging.getLogger(__name__)

_LENGTH = struct.Struct(">I")


class DecodeStatus(enum.Enum):
    COMPLETE = "complete"
    NEED_MORE = "need_more"
    BUFFER_TOO_SMALL = "buffer_too_small"


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of one :meth:`PacketCodec.decode` attempt.

    ``offset`` is where the next decode should start. For ``NEED_MORE`` it
    is the first byte worth keeping; everything before it is garbage or
    already consumed. ``required`` is set for ``BUFFER_TOO_SMALL``.
    """

    status: DecodeStatus
    offset: int
    payload: bytes = b""
    required: int = 0

    @property
    def complete(self) -> bool:
        return self.status is DecodeStatus.COMPLETE

    @property
    def text(self) -> str:
        return self.payload.decode("utf-8")


class PacketCodec:
    """Stateless encoder/decoder for control-channel packets."""

    def __init__(self, config: ProtocolConfig = DEFAULT_CONFIG):
        self.config = config
        self._magic = bytes([config.magic])

    def encoded_size(self, plaintext: Union[bytes, str]) -> int:
        """Size of the packet :meth:`encode` would produce for ``plaintext``."""
        return HEADER_SIZE + padded_size(len(_as_bytes(plaintext)))

    def encode(self, plaintext: Union[bytes, str]) -> bytes:
        data = _as_bytes(plaintext)
        if not data:
            raise ValueError("Cannot encode an empty payload")
        payload = encrypt_payload(data, self.config)
        return self._magic + _LENGTH.pack(len(payload)) + payload

    def decode(
        self,
        window: Union[bytes, bytearray, memoryview],
        offset: int = 0,
        max_size: Optional[int] = None,
    ) -> DecodeResult:
        """Extract the first complete frame at or after ``offset``.

        Bytes before the magic marker are skipped as garbage. Raises
        :class:`~lgspkctl.errors.MalformedPayloadError` when the frame
        decrypts to invalid padding.
        """
        end = len(window)
        if not 0 <= offset <= end:
            raise ValueError(f"Offset {offset} outside window of {end} bytes")

        start = bytes(window[offset:]).find(self._magic)
        if start < 0:
            if end > offset:
                logger.debug("No frame marker in %d bytes, discarding", end - offset)
            return DecodeResult(DecodeStatus.NEED_MORE, end)
        start += offset
        if start > offset:
            logger.debug("Skipped %d bytes of garbage before frame", start - offset)

        body = start + HEADER_SIZE
        if end < body:
            return DecodeResult(DecodeStatus.NEED_MORE, start)
        (length,) = _LENGTH.unpack_from(window, start + 1)
        if end - body < length:
            return DecodeResult(DecodeStatus.NEED_MORE, start)
        if max_size is not None and max_size < length:
            return DecodeResult(DecodeStatus.BUFFER_TOO_SMALL, start, required=length)

        payload = decrypt_payload(bytes(window[body : body + length]), self.config)
        return DecodeResult(DecodeStatus.COMPLETE, body + length, payload=payload)


def _as_bytes(plaintext: Union[bytes, str]) -> bytes:
    if plaintext is None:
        raise ValueError("Payload must not be None")
    if isinstance(plaintext, str):
        return plaintext.encode("utf-8")
    return bytes(plaintext)
