"""Encryption layer: AES-256-CBC with the fixed pre-shared key and IV."""

from Crypto.Cipher import AES
from Crypto.Util.Padding import pad

from .const import BLOCK_SIZE, DEFAULT_CONFIG, ProtocolConfig
from .errors import MalformedPayloadError


def pad_length(size: int) -> int:
    """Padding appended to ``size`` bytes: always 1..BLOCK_SIZE."""
    return BLOCK_SIZE - (size % BLOCK_SIZE)


def padded_size(size: int) -> int:
    return size + pad_length(size)


def _cipher(config: ProtocolConfig):
    # New cipher per packet: the IV restarts from the constant every time.
    return AES.new(config.key, AES.MODE_CBC, iv=config.iv)


def encrypt_payload(plaintext: bytes, config: ProtocolConfig = DEFAULT_CONFIG) -> bytes:
    """Pad and encrypt one packet payload."""
    return _cipher(config).encrypt(pad(plaintext, BLOCK_SIZE, style="pkcs7"))


def decrypt_payload(ciphertext: bytes, config: ProtocolConfig = DEFAULT_CONFIG) -> bytes:
    """Decrypt one packet payload and strip its padding.

    Only the pad-length byte is checked; the peer is not required to fill
    the padding with copies of it.
    """
    if not ciphertext or len(ciphertext) % BLOCK_SIZE:
        raise MalformedPayloadError(
            f"Encrypted payload length {len(ciphertext)} is not a positive multiple of {BLOCK_SIZE}"
        )
    plain = _cipher(config).decrypt(ciphertext)
    pad_size = plain[-1]
    if pad_size > BLOCK_SIZE:
        raise MalformedPayloadError(f"Bad padding length {pad_size}")
    return plain[: len(plain) - pad_size]
