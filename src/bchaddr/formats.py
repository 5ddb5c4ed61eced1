from __future__ import annotations

import logging
import typing as t
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

import construct as c
from typing_extensions import Protocol

from . import base58, cashaddr
from .exceptions import InvalidAddressError
from .network import INFERRED_PREFIXES, NETWORKS, Network, from_cashaddr_prefix
from .script_type import AddressType
from .utils import LegacyPayload

LOG = logging.getLogger(__name__)


class Format(Enum):
    LEGACY = "legacy"
    CASHADDR = "cashaddr"


@dataclass(frozen=True)
class DecodedAddress:
    hash: bytes
    format: Format
    network: Network
    type: AddressType


_LEGACY_VERSIONS = MappingProxyType(
    {
        params.legacy_version(address_type): (params.network, address_type)
        for params in NETWORKS.values()
        for address_type in AddressType
    }
)


class AddressFormat(Protocol):
    FORMAT: t.ClassVar[Format]

    @classmethod
    def decode(cls, address: str) -> DecodedAddress | None:
        ...

    @classmethod
    def encode(cls, decoded: DecodedAddress) -> str:
        ...


class LegacyFormat(AddressFormat):
    FORMAT = Format.LEGACY

    @classmethod
    def decode(cls, address: str) -> DecodedAddress | None:
        try:
            payload = LegacyPayload.parse(base58.b58check_decode(address))
        except (ValueError, c.ConstructError) as e:
            LOG.debug("Not a base58check address: %r (%s)", address, e)
            return None

        entry = _LEGACY_VERSIONS.get(payload.version)
        if entry is None:
            LOG.debug("Unknown legacy version byte %d", payload.version)
            return None
        network, address_type = entry
        return DecodedAddress(payload.hash, cls.FORMAT, network, address_type)

    @classmethod
    def encode(cls, decoded: DecodedAddress) -> str:
        version = NETWORKS[decoded.network].legacy_version(decoded.type)
        payload = LegacyPayload.build(dict(version=version, hash=decoded.hash))
        return base58.b58check_encode(payload)


class CashaddrFormat(AddressFormat):
    """Cashaddr strings, with or without an explicit prefix.

    Without a prefix, each known prefix is tried in turn and the first one
    whose checksum matches wins.
    """

    FORMAT = Format.CASHADDR

    @classmethod
    def decode(cls, address: str) -> DecodedAddress | None:
        if cashaddr.SEPARATOR in address:
            return cls._decode_prefixed(address)

        for prefix in INFERRED_PREFIXES:
            decoded = cls._decode_prefixed(prefix + cashaddr.SEPARATOR + address)
            if decoded is not None:
                LOG.debug("Inferred cashaddr prefix %r for %r", prefix, address)
                return decoded
        return None

    @classmethod
    def _decode_prefixed(cls, address: str) -> DecodedAddress | None:
        try:
            data = cashaddr.decode(address)
        except ValueError as e:
            LOG.debug("Not a cashaddr address: %r (%s)", address, e)
            return None

        network = from_cashaddr_prefix(data.prefix)
        if network is None:
            LOG.debug("Unknown cashaddr prefix %r", data.prefix)
            return None
        address_type = AddressType.from_cashaddr_name(data.type)
        if address_type is None:
            LOG.debug("Unknown cashaddr type %r", data.type)
            return None
        return DecodedAddress(data.hash, cls.FORMAT, network, address_type)

    @classmethod
    def encode(cls, decoded: DecodedAddress) -> str:
        prefix = NETWORKS[decoded.network].cashaddr_prefix
        return cashaddr.encode(prefix, decoded.type.cashaddr_name, decoded.hash)


ALL_FORMATS = (LegacyFormat, CashaddrFormat)

FORMATS = MappingProxyType({cls.FORMAT: cls for cls in ALL_FORMATS})


def decode_address(address: str) -> DecodedAddress:
    """Identify an address and decode it with the first format that accepts it.

    Formats are tried in the order of `ALL_FORMATS`. Failures of individual
    formats are not reported; if none accepts the address,
    `InvalidAddressError` is raised.
    """
    if not isinstance(address, str):
        raise InvalidAddressError
    for cls in ALL_FORMATS:
        decoded = cls.decode(address)
        if decoded is not None:
            return decoded
    raise InvalidAddressError


def encode_address(decoded: DecodedAddress, format: Format) -> str:
    """Encode a decoded address in the given format.

    Raises `ValueError` if the format cannot represent the address.
    """
    return FORMATS[format].encode(decoded)
