from typing import Any

from eth_utils import is_address

from constants.chains import SUPPORTED_CHAINS
from constants.constants import MAX_UINT256


def is_uint256(value: Any) -> bool:
    """
    Checks that value is an integer in the uint256 range.
    Booleans are rejected even though they subclass int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= MAX_UINT256


def validate_proposal_id(proposal_id: Any) -> None:
    """
    Validate a governor proposal id.

    Args:
        proposal_id: The proposal id, must be a uint256

    Raises:
        ValueError: If the proposal id is not a uint256
    """
    if not is_uint256(proposal_id):
        raise ValueError(f"Proposal id must be an integer in [0, 2**256 - 1], got {proposal_id!r}")


def validate_chain(chain: str) -> None:
    """
    Validate a single (normalized) chain identifier.

    Raises:
        ValueError: If the chain is not supported by the Smart Wallet API
    """
    if chain not in SUPPORTED_CHAINS:
        raise ValueError(
            f"Unsupported chain '{chain}'. Supported chains: {', '.join(SUPPORTED_CHAINS)}"
        )


def validate_contract_address(address: Any) -> None:
    """
    Validate an EVM contract address (checksummed or lower-case hex).

    Raises:
        ValueError: If the address is not a valid EVM address
    """
    if not isinstance(address, str) or not is_address(address):
        raise ValueError(f"Invalid contract address: {address!r}")
