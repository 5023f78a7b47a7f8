from typing import Optional

from eth_utils import is_address, to_checksum_address, to_hex
from hexbytes import HexBytes

from utils.logger_utils import get_logger

logger = get_logger("Formatter Utils")


def normalize_chain(chain: Optional[str]) -> str:
    """
    Normalizes a chain identifier ("  Polygon " -> "polygon").
    """
    if not isinstance(chain, str):
        return ""
    return chain.strip().lower()


def to_normalized_address(address: Optional[str]) -> Optional[str]:
    """
    Converts an EVM address to its EIP-55 checksum form.
    Returns the input unchanged when it is not a valid address.
    """
    if address is None or not isinstance(address, str):
        return None

    if not is_address(address):
        logger.debug(f"Not an EVM address, keeping verbatim: {address}")
        return address
    return to_checksum_address(address)


def bytes_to_hex_data(data: bytes) -> str:
    """
    Renders call data as a 0x-prefixed lower-case hex string.
    """
    return to_hex(bytes(data))


def hex_data_to_bytes(data: str) -> bytes:
    """
    Parses 0x-prefixed (or bare) hex call data.
    """
    return bytes(HexBytes(data))


def mask_secret(secret: Optional[str], visible: int = 4) -> str:
    """
    Masks a credential for display, keeping only its last characters.
    """
    if not secret:
        return "<unset>"
    if len(secret) <= visible:
        return "*" * len(secret)
    return "*" * (len(secret) - visible) + secret[-visible:]
