import construct as c
import pytest

from bchaddr import cashaddr
from bchaddr.utils import CashaddrVersion, convertbits

HASHES = (
    bytes.fromhex("76a04053bda0a88bda5177b86a15c3b29f559873"),
    bytes.fromhex("cb481232299cd5743151ac4b2d63ae198e7bb0a9"),
    bytes.fromhex("011f28e473c95f4013d7d53ec5fbc3b42df8ed10"),
)

# fmt: off
VECTORS_VALID = (  # prefix, type, hash, address
    ("bitcoincash", "P2PKH", HASHES[0], "bitcoincash:qpm2qsznhks23z7629mms6s4cwef74vcwvy22gdx6a"),
    ("bitcoincash", "P2PKH", HASHES[1], "bitcoincash:qr95sy3j9xwd2ap32xkykttr4cvcu7as4y0qverfuy"),
    ("bitcoincash", "P2PKH", HASHES[2], "bitcoincash:qqq3728yw0y47sqn6l2na30mcw6zm78dzqre909m2r"),
    ("bitcoincash", "P2SH", HASHES[0], "bitcoincash:ppm2qsznhks23z7629mms6s4cwef74vcwvn0h829pq"),
    ("bitcoincash", "P2SH", HASHES[1], "bitcoincash:pr95sy3j9xwd2ap32xkykttr4cvcu7as4yc93ky28e"),
    ("bitcoincash", "P2SH", HASHES[2], "bitcoincash:pqq3728yw0y47sqn6l2na30mcw6zm78dzq5ucqzc37"),
    (
        "bchtest",
        "P2SH",
        bytes.fromhex("f5bf48b397dae70be82b3cca4793f8eb2b6cdac9"),
        "bchtest:pr6m7j9njldwwzlg9v7v53unlr4jkmx6eyvwc0uz5t",
    ),
    (
        "bchtest",
        "P2PKH",
        bytes.fromhex("fc916f213a3d7f1369313d5fa30f6168f9446a2d"),
        "bchtest:qr7fzmep8g7h7ymfxy74lgc0v950j3r295pdnvy3hr",
    ),
    (
        "pref",
        "P2SH",
        bytes.fromhex("f5bf48b397dae70be82b3cca4793f8eb2b6cdac9"),
        "pref:pr6m7j9njldwwzlg9v7v53unlr4jkmx6ey65nvtks5",
    ),
)
# fmt: on

VECTORS_INVALID = (
    "bitcoincash:ppm2qsznhks23z7629mms6s4cwef74vcwvn0h829pr",  # invalid checksum
    "bitcoincash:PPM2QSZNHKS23Z7629MMS6S4CWEF74VCWVN0H829PQ",  # mixed case
    "bitcoincash:ppm2qsznhks23z7629mmS6s4cwef74vcwvn0h829pq",  # mixed case
    ":ppm2qsznhks23z7629mms6s4cwef74vcwvn0h82",  # empty prefix
    "ppm2qsznhks23z7629mms6s4cwef74vcwvn0h829pq",  # no prefix
    "bitcoin cash:ppm2qsznhks23z7629mms6s4cwef74vcwvn0h829pq",  # space in prefix
    "bitcoincash:ppm2qsznbks23z7629mms6s4cwef74vcwvn0h82",  # b is not in the charset
    "bitcoincash:",  # empty payload
    "bitcoincash:qpm2qsznhks23z7629mms6s4cwef74vcwvy22gdx6a:x",  # second separator
    "prefix:0r6m7j9njldwwzlg9v7v53unlr4jkmx6ey3qnjwsrf",  # unknown type 15
    "bitcoincash:zr6m7j9njldwwzlg9v7v53unlr4jkmx6eycnjehshe",  # token-aware type 2
)


@pytest.mark.parametrize("prefix, type_name, hash, address", VECTORS_VALID)
def test_decode(prefix, type_name, hash, address):
    assert cashaddr.decode(address) == (prefix, type_name, hash)


@pytest.mark.parametrize("prefix, type_name, hash, address", VECTORS_VALID)
def test_encode(prefix, type_name, hash, address):
    assert cashaddr.encode(prefix, type_name, hash) == address


def test_decode_upper_case():
    data = cashaddr.decode("BITCOINCASH:PPM2QSZNHKS23Z7629MMS6S4CWEF74VCWVN0H829PQ")
    assert data.prefix == "bitcoincash"
    assert data.type == "P2SH"
    assert data.hash == HASHES[0]


@pytest.mark.parametrize("address", VECTORS_INVALID)
def test_decode_invalid(address):
    with pytest.raises(ValueError):
        cashaddr.decode(address)


@pytest.mark.parametrize("size", cashaddr.HASH_SIZES)
@pytest.mark.parametrize("type_name", cashaddr.TYPES)
def test_all_sizes(size, type_name):
    hash = bytes(range(size // 8))
    address = cashaddr.encode("bchtest", type_name, hash)
    assert cashaddr.decode(address) == ("bchtest", type_name, hash)


@pytest.mark.parametrize("length", (0, 19, 21, 33, 65))
def test_encode_bad_size(length):
    with pytest.raises(ValueError):
        cashaddr.encode("bitcoincash", "P2PKH", bytes(length))


def test_encode_bad_type():
    with pytest.raises(ValueError):
        cashaddr.encode("bitcoincash", "P2WPKH", HASHES[0])


def test_encode_empty_prefix():
    with pytest.raises(ValueError):
        cashaddr.encode("", "P2PKH", HASHES[0])


def test_size_mismatch():
    # version byte claims 160 bits, but the payload carries 192
    payload = CashaddrVersion.build(dict(type=0, size=0)) + bytes(24)
    data = convertbits(payload, 8, 5)
    address = "bitcoincash:" + "".join(
        cashaddr.CHARSET[d] for d in data + cashaddr.create_checksum("bitcoincash", data)
    )
    with pytest.raises(ValueError, match="does not match"):
        cashaddr.decode(address)


def test_version_byte():
    assert CashaddrVersion.build(dict(type=0, size=0)) == b"\x00"
    assert CashaddrVersion.build(dict(type=1, size=0)) == b"\x08"
    assert CashaddrVersion.build(dict(type=1, size=7)) == b"\x0f"
    parsed = CashaddrVersion.parse(b"\x0b")
    assert parsed.type == 1
    assert parsed.size == 3


def test_reserved_bit():
    with pytest.raises(c.ConstructError):
        CashaddrVersion.parse(b"\x80")


def test_convertbits_rejects_out_of_range():
    assert convertbits([256], 8, 5) is None
    assert convertbits([32], 5, 8, pad=False) is None
