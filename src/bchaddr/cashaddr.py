"""Cashaddr codec.

A cashaddr string is a human-readable prefix, a colon, and a base32 payload.
The payload carries a version byte (address type and hash size), the hash
itself and a 40-bit BCH checksum computed over both the payload and the
prefix.

This module only knows how to encode and decode the string. Which prefixes
mean which network is up to the caller.
"""

from __future__ import annotations

import typing as t
from types import MappingProxyType

import construct as c

from .utils import CashaddrPayload, convertbits

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
SEPARATOR = ":"
CHECKSUM_LENGTH = 8

_GENERATORS = (0x98F2BC8E61, 0x79B76D99E2, 0xF33E5FB3C4, 0xAE2EABE2A8, 0x1E4F43E470)

TYPES = MappingProxyType({"P2PKH": 0, "P2SH": 1})
"""Supported address types and their numeric value in the version byte."""

_TYPE_NAMES = MappingProxyType({value: name for name, value in TYPES.items()})

HASH_SIZES = (160, 192, 224, 256, 320, 384, 448, 512)
"""Hash sizes in bits, indexed by the size code of the version byte."""


class CashaddrData(t.NamedTuple):
    prefix: str
    type: str
    hash: bytes


def polymod(values: t.Iterable[int]) -> int:
    """Compute the cashaddr checksum polynomial over GF(2^5)."""
    chk = 1
    for value in values:
        top = chk >> 35
        chk = ((chk & 0x07_FFFF_FFFF) << 5) ^ value
        for i, generator in enumerate(_GENERATORS):
            if (top >> i) & 1:
                chk ^= generator
    return chk ^ 1


def prefix_expand(prefix: str) -> list[int]:
    """Lower five bits of each prefix character, followed by a zero separator."""
    return [ord(x) & 0x1F for x in prefix] + [0]


def create_checksum(prefix: str, data: list[int]) -> list[int]:
    mod = polymod(prefix_expand(prefix) + data + [0] * CHECKSUM_LENGTH)
    return [(mod >> 5 * (CHECKSUM_LENGTH - 1 - i)) & 0x1F for i in range(CHECKSUM_LENGTH)]


def verify_checksum(prefix: str, data: list[int]) -> bool:
    return polymod(prefix_expand(prefix) + data) == 0


def encode(prefix: str, type_name: str, hash: bytes) -> str:
    """Encode a hash of the given type as a cashaddr string under `prefix`."""
    if not prefix:
        raise ValueError("Empty cashaddr prefix")
    if type_name not in TYPES:
        raise ValueError(f"Unsupported cashaddr type: {type_name}")
    size_bits = len(hash) * 8
    if size_bits not in HASH_SIZES:
        raise ValueError(f"Unsupported hash length: {len(hash)} bytes")

    payload = CashaddrPayload.build(
        dict(
            version=dict(type=TYPES[type_name], size=HASH_SIZES.index(size_bits)),
            hash=hash,
        )
    )
    data = convertbits(payload, 8, 5)
    if data is None:
        raise ValueError("Cannot pack cashaddr payload")
    checksum = create_checksum(prefix, data)
    return prefix + SEPARATOR + "".join(CHARSET[d] for d in data + checksum)


def decode(address: str) -> CashaddrData:
    """Decode a prefixed cashaddr string.

    Decoding is case insensitive as long as the string is not mixed-case. The
    returned prefix is always lower-case.
    """
    if any(ord(x) < 33 or ord(x) > 126 for x in address):
        raise ValueError("Invalid character in cashaddr string")
    if address.lower() != address and address.upper() != address:
        raise ValueError("Mixed-case cashaddr string")

    prefix, separator, text = address.lower().partition(SEPARATOR)
    if not separator or not prefix:
        raise ValueError("Missing cashaddr prefix")
    if not text or any(x not in CHARSET for x in text):
        raise ValueError("Invalid cashaddr payload character")

    data = [CHARSET.index(x) for x in text]
    if not verify_checksum(prefix, data):
        raise ValueError("invalid checksum")

    payload = convertbits(data[:-CHECKSUM_LENGTH], 5, 8, pad=False)
    if payload is None:
        raise ValueError("Invalid padding in cashaddr payload")

    try:
        parsed = CashaddrPayload.parse(bytes(payload))
    except c.ConstructError as e:
        raise ValueError("Invalid cashaddr version byte") from e

    if HASH_SIZES[parsed.version.size] != len(parsed.hash) * 8:
        raise ValueError("Hash length does not match version byte")
    type_name = _TYPE_NAMES.get(parsed.version.type)
    if type_name is None:
        raise ValueError(f"Unsupported cashaddr type: {parsed.version.type}")

    return CashaddrData(prefix, type_name, parsed.hash)
