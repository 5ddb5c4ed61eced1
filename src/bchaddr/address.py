"""Bitcoin Cash address detection and translation.

Addresses are accepted in either legacy (base58check) or cashaddr format, for
mainnet and testnet. Cashaddr input may omit its prefix.
"""

from __future__ import annotations

from . import cashaddr
from .exceptions import InvalidAddressError
from .formats import Format, decode_address, encode_address
from .network import Network
from .script_type import AddressType


def to_legacy_address(address: str) -> str:
    """Translate `address` into legacy format.

    Legacy input is returned unchanged.
    """
    decoded = decode_address(address)
    if decoded.format is Format.LEGACY:
        return address
    return encode_address(decoded, Format.LEGACY)


def to_cash_address(address: str) -> str:
    """Translate `address` into cashaddr format.

    Cashaddr input with an explicit prefix is returned unchanged. Input without
    a prefix is not passed through: it is re-encoded with the canonical prefix
    of its network.
    """
    decoded = decode_address(address)
    if decoded.format is Format.CASHADDR and cashaddr.SEPARATOR in address:
        return address
    try:
        return encode_address(decoded, Format.CASHADDR)
    except ValueError as e:
        # legacy hash of a length cashaddr has no size code for
        raise InvalidAddressError from e


def detect_address_format(address: str) -> Format:
    return decode_address(address).format


def detect_address_network(address: str) -> Network:
    return decode_address(address).network


def detect_address_type(address: str) -> AddressType:
    return decode_address(address).type


def is_legacy_address(address: str) -> bool:
    return detect_address_format(address) is Format.LEGACY


def is_cash_address(address: str) -> bool:
    return detect_address_format(address) is Format.CASHADDR


def is_mainnet_address(address: str) -> bool:
    return detect_address_network(address) is Network.MAINNET


def is_testnet_address(address: str) -> bool:
    return detect_address_network(address) is Network.TESTNET


def is_p2pkh_address(address: str) -> bool:
    return detect_address_type(address) is AddressType.P2PKH


def is_p2sh_address(address: str) -> bool:
    return detect_address_type(address) is AddressType.P2SH


def is_valid_address(address: str) -> bool:
    """Check whether `address` is recognized, without raising."""
    try:
        decode_address(address)
    except InvalidAddressError:
        return False
    return True
