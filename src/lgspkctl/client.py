"""Speaker control client: one request, one response, one connection."""

import json
import logging
import socket
from typing import Any, Dict, Optional

from .codec import PacketCodec
from .const import DEFAULT_CONFIG, DEFAULT_MAX_PAYLOAD_SIZE, DEFAULT_PORT, ProtocolConfig
from .errors import TransportError
from .response import parse_response
from .transport import StreamReassembler, send_packet

logger = logging.getLogger(__name__)


class SpeakerClient:
    def __init__(
        self,
        host: str = "127.0.0.1",
        port: int = DEFAULT_PORT,
        *,
        config: ProtocolConfig = DEFAULT_CONFIG,
        max_payload_size: int = DEFAULT_MAX_PAYLOAD_SIZE,
        timeout: Optional[float] = None,
    ):
        self.host = host
        self.port = port
        self.codec = PacketCodec(config)
        self.max_payload_size = max_payload_size
        self.timeout = timeout
        self.sock: Optional[socket.socket] = None

    def __enter__(self) -> "SpeakerClient":
        self.connect()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def connect(self) -> None:
        try:
            self.sock = socket.create_connection((self.host, self.port), timeout=self.timeout)
        except OSError as exc:
            raise TransportError(f"Cannot connect to {self.host}:{self.port}: {exc}") from exc
        logger.info("Connected to %s:%d", self.host, self.port)

    def close(self) -> None:
        if self.sock:
            self.sock.close()
            self.sock = None

    def exchange(self, payload: bytes) -> bytes:
        """Send one plaintext payload and return the decoded reply bytes."""
        if not self.sock:
            raise RuntimeError("Not connected")
        send_packet(self.sock, self.codec.encode(payload))
        return StreamReassembler(self.sock, self.codec, self.max_payload_size).read_packet()

    def send_raw(self, message: Dict[str, Any]) -> Dict[str, Any]:
        """Send an arbitrary JSON request; the reply envelope is not validated."""
        reply = self.exchange(json.dumps(message).encode("utf-8"))
        return json.loads(reply)

    def get(self, kind: str) -> Dict[str, Any]:
        """Query ``kind`` and return the validated ``data`` object."""
        reply = self.exchange(json.dumps({"cmd": "get", "msg": kind}).encode("utf-8"))
        return parse_response(kind, reply)

    # ── Views ───────────────────────────────────────────────────────

    def equalizer_info(self) -> Dict[str, Any]:
        return self.get("EQ_VIEW_INFO")

    def speaker_info(self) -> Dict[str, Any]:
        return self.get("SPK_LIST_VIEW_INFO")

    def play_info(self) -> Dict[str, Any]:
        return self.get("PLAY_INFO")

    def function_info(self) -> Dict[str, Any]:
        return self.get("FUNC_VIEW_INFO")

    def settings(self) -> Dict[str, Any]:
        return self.get("SETTING_VIEW_INFO")

    def product_info(self) -> Dict[str, Any]:
        return self.get("PRODUCT_INFO")

    def update_info(self) -> Dict[str, Any]:
        return self.get("UPDATE_VIEW_INFO")

    def build_info(self) -> Dict[str, Any]:
        return self.get("BUILD_INFO_DEV")

    def mac_info(self) -> Dict[str, Any]:
        return self.get("MAC_INFO_DEV")
