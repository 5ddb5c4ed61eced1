from __future__ import annotations

import typing as t

from .utils import hash256

B58_CHARS = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
B58_BASE = len(B58_CHARS)

CHECKSUM_LENGTH = 4


def b58encode(v: bytes) -> str:
    """Encode v, which is a string of bytes, to base58."""
    long_value = int.from_bytes(v, "big")

    chars = []
    while long_value:
        long_value, mod = divmod(long_value, B58_BASE)
        chars.append(B58_CHARS[mod])

    # Bitcoin does a little leading-zero-compression:
    # leading 0-bytes in the input become leading-1s
    n_pad = len(v) - len(v.lstrip(b"\x00"))

    return B58_CHARS[0] * n_pad + "".join(reversed(chars))


def b58decode(v: t.AnyStr) -> bytes:
    """Decode base58 string v into bytes."""
    str_v = v.decode() if isinstance(v, bytes) else v

    long_value = 0
    for c in str_v:
        index = B58_CHARS.find(c)
        if index < 0:
            raise ValueError("invalid Base58 string")
        long_value = long_value * B58_BASE + index

    n_pad = len(str_v) - len(str_v.lstrip(B58_CHARS[0]))
    byte_length = (long_value.bit_length() + 7) // 8

    return b"\x00" * n_pad + long_value.to_bytes(byte_length, "big")


def b58check_encode(v: bytes) -> str:
    checksum = hash256(v)[:CHECKSUM_LENGTH]
    return b58encode(v + checksum)


def b58check_decode(v: t.AnyStr) -> bytes:
    dec = b58decode(v)
    if len(dec) < CHECKSUM_LENGTH:
        raise ValueError("Base58Check string too short")
    data, checksum = dec[:-CHECKSUM_LENGTH], dec[-CHECKSUM_LENGTH:]
    if hash256(data)[:CHECKSUM_LENGTH] != checksum:
        raise ValueError("invalid checksum")
    return data
