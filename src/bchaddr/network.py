from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .script_type import AddressType


class Network(Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"


@dataclass(frozen=True)
class NetworkParams:
    network: Network
    p2pkh_version: int
    p2sh_version: int

    cashaddr_prefix: str
    """Prefix emitted when encoding a cashaddr."""
    cashaddr_prefixes: tuple[str, ...]
    """Prefixes accepted when decoding a cashaddr, in inference order."""

    def legacy_version(self, address_type: AddressType) -> int:
        if address_type is AddressType.P2PKH:
            return self.p2pkh_version
        return self.p2sh_version


BitcoinCash = NetworkParams(
    network=Network.MAINNET,
    p2pkh_version=0,
    p2sh_version=5,
    cashaddr_prefix="bitcoincash",
    cashaddr_prefixes=("bitcoincash",),
)

# regtest addresses are accepted as testnet, but never produced
BitcoinCashTestnet = NetworkParams(
    network=Network.TESTNET,
    p2pkh_version=111,
    p2sh_version=196,
    cashaddr_prefix="bchtest",
    cashaddr_prefixes=("bchtest", "regtest"),
)

NETWORKS = MappingProxyType(
    {params.network: params for params in (BitcoinCash, BitcoinCashTestnet)}
)

INFERRED_PREFIXES = tuple(
    prefix for params in NETWORKS.values() for prefix in params.cashaddr_prefixes
)
"""Prefixes tried, in order, on a cashaddr string that carries none."""


def from_cashaddr_prefix(prefix: str) -> Network | None:
    for params in NETWORKS.values():
        if prefix in params.cashaddr_prefixes:
            return params.network
    return None
