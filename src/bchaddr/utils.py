from __future__ import annotations

import hashlib
import typing as t

import construct as c


def hash256(data: bytes) -> bytes:
    """Perform OP_HASH256.

    Hashes the data with SHA256 twice.
    """
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def convertbits(
    data: t.Iterable[int], frombits: int, tobits: int, pad: bool = True
) -> list[int] | None:
    """Regroup a sequence of `frombits`-wide values into `tobits`-wide values.

    Returns None if a value does not fit into `frombits`, or if `pad` is False
    and the input leaves excess or non-zero padding bits.
    """
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or (value >> frombits):
            return None
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits or ((acc << (tobits - bits)) & maxv):
        return None
    return ret


LegacyPayload = c.Struct(
    "version" / c.Int8ub,
    "hash" / c.GreedyBytes,
)
"""Legacy address payload: a version byte followed by the hash."""

CashaddrVersion = c.BitStruct(
    "reserved" / c.Const(0, c.BitsInteger(1)),
    "type" / c.BitsInteger(4),
    "size" / c.BitsInteger(3),
)
"""Cashaddr version byte.

The top bit is reserved and must be zero, followed by four bits of address
type and three bits of hash size code.
"""

CashaddrPayload = c.Struct(
    "version" / CashaddrVersion,
    "hash" / c.GreedyBytes,
)
"""Cashaddr payload, before it is regrouped into 5-bit symbols."""
