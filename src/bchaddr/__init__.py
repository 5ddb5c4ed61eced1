# re-import names that should be visible to the user
from .address import (  # noqa: F401
    detect_address_format,
    detect_address_network,
    detect_address_type,
    is_cash_address,
    is_legacy_address,
    is_mainnet_address,
    is_p2pkh_address,
    is_p2sh_address,
    is_testnet_address,
    is_valid_address,
    to_cash_address,
    to_legacy_address,
)
from .exceptions import InvalidAddressError  # noqa: F401
from .formats import DecodedAddress, Format, decode_address, encode_address  # noqa: F401
from .network import Network  # noqa: F401
from .script_type import AddressType  # noqa: F401
