from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class AddressType(Enum):
    """Script template an address hash stands for."""

    P2PKH = "p2pkh"
    P2SH = "p2sh"

    @property
    def cashaddr_name(self) -> str:
        """Type name used by the cashaddr codec."""
        return _CASHADDR_NAMES[self]

    @classmethod
    def from_cashaddr_name(cls, name: str) -> AddressType | None:
        return _FROM_CASHADDR_NAMES.get(name)


_CASHADDR_NAMES = MappingProxyType(
    {
        AddressType.P2PKH: "P2PKH",
        AddressType.P2SH: "P2SH",
    }
)

_FROM_CASHADDR_NAMES = MappingProxyType(
    {name: address_type for address_type, name in _CASHADDR_NAMES.items()}
)
