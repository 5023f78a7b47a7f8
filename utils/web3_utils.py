from typing import Any, Dict, List

from web3 import Web3


def find_function_abi(abi: List[Dict[str, Any]], fn_name: str) -> Dict[str, Any]:
    """
    Returns the ABI entry of the function named fn_name.

    Raises:
        KeyError: If the ABI has no function with that name
    """
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == fn_name:
            return entry
    raise KeyError(f"Function '{fn_name}' not found in ABI")


def get_input_types(fn_abi: Dict[str, Any]) -> List[str]:
    return [param["type"] for param in fn_abi.get("inputs", [])]


def canonical_signature(fn_abi: Dict[str, Any]) -> str:
    """
    Builds the canonical signature, e.g. "castVote(uint256,uint8)".
    """
    return f"{fn_abi['name']}({','.join(get_input_types(fn_abi))})"


def function_selector(fn_abi: Dict[str, Any]) -> bytes:
    """
    First 4 bytes of keccak256(signature).
    """
    return bytes(Web3.keccak(text=canonical_signature(fn_abi))[:4])
