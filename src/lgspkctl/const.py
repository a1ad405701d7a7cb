"""Protocol constants, message kinds and label tables."""

from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_PORT = 9741

MAGIC = 0x10
HEADER_SIZE = 5  # magic + u32 big-endian length
BLOCK_SIZE = 16  # AES block size
KEY_LEN = 32
IV_LEN = BLOCK_SIZE

AES_KEY = b"T^&*J%^7tr~4^%^&I(o%^!jIJ__+a0 k"
AES_IV = b"'%^Ur7gy$~t+f)%@"

# Largest decoded response the client expects; the receive buffer holds twice this.
DEFAULT_MAX_PAYLOAD_SIZE = 4096


@dataclass(frozen=True)
class ProtocolConfig:
    """Pre-shared cryptographic parameters, identical for both peers."""

    key: bytes = AES_KEY
    iv: bytes = AES_IV
    magic: int = MAGIC

    def __post_init__(self) -> None:
        if len(self.key) != KEY_LEN:
            raise ValueError(f"Expected {KEY_LEN}-byte key, got {len(self.key)}")
        if len(self.iv) != IV_LEN:
            raise ValueError(f"Expected {IV_LEN}-byte IV, got {len(self.iv)}")
        if not 0 <= self.magic <= 0xFF:
            raise ValueError(f"Magic must fit in one byte: {self.magic}")


DEFAULT_CONFIG = ProtocolConfig()


MESSAGE_KINDS: Tuple[str, ...] = (
    "EQ_VIEW_INFO",
    "SPK_LIST_VIEW_INFO",
    "PLAY_INFO",
    "FUNC_VIEW_INFO",
    "SETTING_VIEW_INFO",
    "PRODUCT_INFO",
    "C4A_SETTING_INFO",
    "RADIO_VIEW_INFO",
    "SHARE_AP_INFO",
    "UPDATE_VIEW_INFO",
    "BUILD_INFO_DEV",
    "OPTION_INFO_DEV",
    "MAC_INFO_DEV",
    "MEM_MON_DEV",
    "TEST_DEV",
    "TEST_TONE_REQ",
    "FACTORY_SET_REQ",
)

# TEST_DEV, TEST_TONE_REQ and FACTORY_SET_REQ make the device do something.
QUERY_KINDS: Tuple[str, ...] = MESSAGE_KINDS[:14]


@dataclass(frozen=True)
class LookupTable:
    """Labels indexed by small integer codes."""

    name: str
    labels: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.labels)

    def label(self, value: object) -> Optional[str]:
        """Return the label for ``value`` or None when it is not a valid index."""
        # bool is an int subclass but never an index
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if 0 <= value < len(self.labels):
            return self.labels[value]
        return None


EQUALIZERS = LookupTable("equalizer", (
    "Standard",
    "Bass",
    "Flat",
    "Boost",
    "Treble and Bass",
    "User",
    "Music",
    "Cinema",
    "Night",
    "News",
    "Voice",
    "ia_sound",
    "Adaptive Sound Control",
    "Movie",
    "Bass Blast",
    "Dolby Atmos",
    "DTS Virtual X",
    "Bass Boost Plus",
))

FUNCTIONS = LookupTable("function", (
    "Wifi",
    "Bluetooth",
    "Portable",
    "Aux",
    "Optical",
    "CP",
    "HDMI",
    "ARC",
    "Spotify",
    "Optical2",
    "HDMI2",
    "HDMI3",
    "LG TV",
    "Mic",
    "Chromecast",
    "Optical/HDMI ARC",
    "LG Optical",
    "FM",
    "USB",
))


@dataclass(frozen=True)
class Association:
    """Binds a message kind's selector and list fields to a label table."""

    kind: str
    selector: str  # scalar "current index" field
    list_field: str  # array of supported codes
    table: LookupTable


DEFAULT_ASSOCIATIONS: Tuple[Association, ...] = (
    Association("EQ_VIEW_INFO", "i_curr_eq", "ai_eq_list", EQUALIZERS),
    Association("FUNC_VIEW_INFO", "i_curr_func", "ai_func_list", FUNCTIONS),
)
