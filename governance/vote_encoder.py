"""
Encodes governor vote calls into the call data a sponsored transaction carries.

The selector is derived from GOVERNOR_ABI and the arguments are ABI-encoded with
eth_abi, so the payload matches what an OpenZeppelin Governor expects:

    castVote(uint256 proposalId, uint8 support) returns (uint256 weight)
"""

from typing import Any, Dict, Optional, Tuple, Union

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError

from abi.dao_governance_abi import GOVERNOR_ABI
from constants.contract_function_selectors import GOVERNOR_FUNCTION_SELECTORS, GOVERNOR_VOTE_FUNCTIONS
from governance.enums.vote_choice import VoteChoice
from governance.errors import EncodingError
from utils.formatter_utils import hex_data_to_bytes
from utils.validation_utils import validate_proposal_id
from utils.web3_utils import find_function_abi, function_selector, get_input_types

CAST_VOTE = "castVote"
CAST_VOTE_WITH_REASON = "castVoteWithReason"

# selector -> (function name, input types), computed once from the ABI
_VOTE_FUNCTIONS: Dict[bytes, Tuple[str, list]] = {}
for _fn_name in GOVERNOR_VOTE_FUNCTIONS:
    _fn_abi = find_function_abi(GOVERNOR_ABI, _fn_name)
    _VOTE_FUNCTIONS[function_selector(_fn_abi)] = (_fn_name, get_input_types(_fn_abi))

_SELECTORS: Dict[str, bytes] = {name: selector for selector, (name, _) in _VOTE_FUNCTIONS.items()}


def _to_vote_choice(choice: Any) -> VoteChoice:
    # bool is an int subclass; True must not be read as FOR
    if isinstance(choice, bool) or not isinstance(choice, int):
        raise EncodingError(f"Vote choice must be one of 0 (against), 1 (for), 2 (abstain), got {choice!r}")
    try:
        return VoteChoice(choice)
    except ValueError:
        raise EncodingError(
            f"Vote choice must be one of 0 (against), 1 (for), 2 (abstain), got {choice!r}"
        ) from None


def _check_proposal_id(proposal_id: Any) -> None:
    try:
        validate_proposal_id(proposal_id)
    except ValueError as e:
        raise EncodingError(str(e)) from e


def _encode_call(fn_name: str, args: list) -> bytes:
    selector = _SELECTORS[fn_name]
    _, input_types = _VOTE_FUNCTIONS[selector]
    return selector + encode(input_types, args)


def encode_vote(proposal_id: int, choice: VoteChoice) -> bytes:
    """
    Encodes castVote(proposal_id, choice).

    Args:
        proposal_id: uint256 proposal id
        choice: VoteChoice or its integer code (0, 1, 2)

    Returns:
        4-byte selector followed by the ABI-encoded arguments.

    Raises:
        EncodingError: If the choice or the proposal id is invalid.
    """
    vote_choice = _to_vote_choice(choice)
    _check_proposal_id(proposal_id)
    return _encode_call(CAST_VOTE, [proposal_id, int(vote_choice)])


def encode_vote_with_reason(proposal_id: int, choice: VoteChoice, reason: str) -> bytes:
    """
    Encodes castVoteWithReason(proposal_id, choice, reason).

    Raises:
        EncodingError: If the choice, the proposal id or the reason is invalid.
    """
    vote_choice = _to_vote_choice(choice)
    _check_proposal_id(proposal_id)
    if not isinstance(reason, str):
        raise EncodingError(f"Vote reason must be a string, got {type(reason).__name__}")
    return _encode_call(CAST_VOTE_WITH_REASON, [proposal_id, int(vote_choice), reason])


def encode_ballot(proposal_id: int, choice: VoteChoice, reason: Optional[str] = None) -> bytes:
    """castVoteWithReason when a reason is given, castVote otherwise."""
    if reason is None:
        return encode_vote(proposal_id, choice)
    return encode_vote_with_reason(proposal_id, choice, reason)


def decode_vote(call_data: Union[bytes, str]) -> Dict[str, Any]:
    """
    Decodes call data produced by encode_vote / encode_vote_with_reason.
    Accepts raw bytes or 0x-prefixed hex.

    Returns:
        {"function": ..., "proposal_id": ..., "choice": VoteChoice, "reason": str | None}

    Raises:
        EncodingError: If the selector is not a vote function or the arguments are malformed.
    """
    if isinstance(call_data, str):
        try:
            call_data = hex_data_to_bytes(call_data)
        except ValueError as e:
            raise EncodingError(f"Call data is not valid hex: {e}") from e
    call_data = bytes(call_data)
    selector, encoded_args = call_data[:4], call_data[4:]
    if selector not in _VOTE_FUNCTIONS:
        known = GOVERNOR_FUNCTION_SELECTORS.get(f"0x{selector.hex()}")
        if known:
            raise EncodingError(f"{known} is not a vote function")
        raise EncodingError(f"Unknown vote function selector 0x{selector.hex()}")

    fn_name, input_types = _VOTE_FUNCTIONS[selector]
    try:
        values = decode(input_types, encoded_args)
    except (DecodingError, ValueError) as e:
        raise EncodingError(f"Malformed {fn_name} call data: {e}") from e

    return {
        "function": fn_name,
        "proposal_id": values[0],
        "choice": _to_vote_choice(values[1]),
        "reason": values[2] if len(values) > 2 else None,
    }
