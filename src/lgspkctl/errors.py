"""Exception kinds raised by the control client."""

from typing import Optional


class SpeakerError(Exception):
    """Base class for every control-channel failure."""


class TransportError(SpeakerError):
    """Connect, send or receive failed."""


class ConnectionClosedError(TransportError, EOFError):
    """Peer closed the connection before a full response arrived."""


class FramingError(SpeakerError):
    """The byte stream cannot be split into frames."""


class FrameTooLargeError(FramingError):
    """Receive buffer exhausted before a frame completed."""

    def __init__(self, message: str, required: Optional[int] = None) -> None:
        self.required = required
        super().__init__(message)


class MalformedPayloadError(SpeakerError):
    """Decrypted payload violates the padding rules."""


class MalformedResponseError(SpeakerError):
    """Response envelope was rejected."""

    def __init__(self, kind: str, message: str) -> None:
        self.kind = kind
        super().__init__(f"{kind}: {message}")


__all__ = [
    "SpeakerError",
    "TransportError",
    "ConnectionClosedError",
    "FramingError",
    "FrameTooLargeError",
    "MalformedPayloadError",
    "MalformedResponseError",
]
