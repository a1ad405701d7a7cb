"""LG speaker control-channel client."""

from .client import SpeakerClient
from .codec import DecodeResult, DecodeStatus, PacketCodec
from .const import (
    DEFAULT_ASSOCIATIONS,
    DEFAULT_CONFIG,
    DEFAULT_PORT,
    EQUALIZERS,
    FUNCTIONS,
    MESSAGE_KINDS,
    QUERY_KINDS,
    Association,
    LookupTable,
    ProtocolConfig,
)
from .errors import (
    ConnectionClosedError,
    FrameTooLargeError,
    FramingError,
    MalformedPayloadError,
    MalformedResponseError,
    SpeakerError,
    TransportError,
)
from .render import ResponseRenderer
from .response import parse_response, validate_response
from .transport import StreamReassembler

__all__ = [
    "SpeakerClient",
    "PacketCodec",
    "DecodeResult",
    "DecodeStatus",
    "StreamReassembler",
    "ResponseRenderer",
    "parse_response",
    "validate_response",
    "ProtocolConfig",
    "LookupTable",
    "Association",
    "DEFAULT_CONFIG",
    "DEFAULT_PORT",
    "DEFAULT_ASSOCIATIONS",
    "EQUALIZERS",
    "FUNCTIONS",
    "MESSAGE_KINDS",
    "QUERY_KINDS",
    "SpeakerError",
    "TransportError",
    "ConnectionClosedError",
    "FramingError",
    "FrameTooLargeError",
    "MalformedPayloadError",
    "MalformedResponseError",
]
