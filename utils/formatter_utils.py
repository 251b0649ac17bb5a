from typing import Optional

from eth_utils import encode_hex, is_address
from eth_utils import to_checksum_address as eth_to_checksum_address

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def utf8_to_hex(text: str) -> str:
    """
    Encodes text as a 0x-prefixed hex string, the form contracts expect for `bytes` context fields.
    """
    return encode_hex(text.encode("utf-8"))


def to_normalized_address(address: Optional[str]) -> Optional[str]:
    """
    Converts an address to its checksummed form.
    Returns None for missing or malformed input.
    """
    if address is None or not isinstance(address, str):
        return None
    if not is_address(address):
        return None
    return eth_to_checksum_address(address)


def is_zero_address(address: Optional[str]) -> bool:
    return address is None or int(address, 16) == 0
