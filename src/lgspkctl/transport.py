"""Low-level wire protocol: socket helpers and stream reassembly."""

import logging
import socket

from .codec import DecodeStatus, PacketCodec
from .const import DEFAULT_MAX_PAYLOAD_SIZE
from .errors import ConnectionClosedError, FrameTooLargeError, TransportError

logger = logging.getLogger(__name__)


def send_packet(sock: socket.socket, packet: bytes) -> None:
    try:
        sock.sendall(packet)
    except OSError as exc:
        raise TransportError(f"Send failed: {exc}") from exc
    logger.debug("Sent %d byte packet", len(packet))


class StreamReassembler:
    """Reads one complete packet out of a fragmented byte stream.

    The receive buffer holds twice ``max_payload_size`` bytes. After every
    incomplete decode attempt it is compacted, so a peer that keeps sending
    bytes without ever completing a frame ends in
    :class:`FrameTooLargeError` instead of unbounded growth.
    """

    def __init__(
        self,
        sock: socket.socket,
        codec: PacketCodec,
        max_payload_size: int = DEFAULT_MAX_PAYLOAD_SIZE,
    ):
        if max_payload_size <= 0:
            raise ValueError(f"max_payload_size must be positive: {max_payload_size}")
        self.sock = sock
        self.codec = codec
        self.max_payload_size = max_payload_size
        self.capacity = max_payload_size * 2
        self.buffer = bytearray()

    def _recv(self) -> bytes:
        try:
            chunk = self.sock.recv(self.capacity - len(self.buffer))
        except OSError as exc:
            raise TransportError(f"Receive failed: {exc}") from exc
        if not chunk:
            raise ConnectionClosedError("Socket closed while reading data")
        return chunk

    def read_packet(self) -> bytes:
        """Block until one packet is decoded and return its plaintext."""
        while True:
            if len(self.buffer) >= self.capacity:
                raise FrameTooLargeError(
                    f"Receive buffer of {self.capacity} bytes exhausted without a complete frame"
                )
            self.buffer += self._recv()

            result = self.codec.decode(self.buffer, 0, self.max_payload_size)
            if result.status is DecodeStatus.COMPLETE:
                logger.debug("Received %d byte payload", len(result.payload))
                # One response per request; anything after the frame is dropped.
                del self.buffer[:]
                return result.payload
            if result.status is DecodeStatus.BUFFER_TOO_SMALL:
                raise FrameTooLargeError(
                    f"Frame of {result.required} bytes exceeds limit of {self.max_payload_size}",
                    required=result.required,
                )
            del self.buffer[: result.offset]
