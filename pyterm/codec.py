"""
Content Codec Module

Reversible single-byte XOR obfuscation for seeded file content, plus
base64 for handing file bodies to the front end.

This is obfuscation only and gives no confidentiality.

Author: YSNRFD
Version: 1.0.0
"""

import base64


SECRET_KEY = 0x53

UNDECODABLE = "??"


def xor_bytes(data: bytes, key: int = SECRET_KEY) -> bytes:
    """XOR every byte with ``key``. Applying it twice is a no-op."""
    return bytes(b ^ key for b in data)


def encode(text: str, key: int = SECRET_KEY) -> bytes:
    """Obfuscate a string into stored bytes."""
    return xor_bytes(text.encode('utf-8'), key)


def decode(data: bytes, key: int = SECRET_KEY) -> str:
    """
    Recover the text of obfuscated bytes.

    Returns ``"??"`` when the result is not valid UTF-8.
    """
    try:
        return xor_bytes(data, key).decode('utf-8')
    except UnicodeDecodeError:
        return UNDECODABLE


def base64_encode(data: bytes) -> str:
    """Standard padded base64 of raw bytes."""
    return base64.b64encode(data).decode('ascii')
