# uint256 upper bound for proposal ids
MAX_UINT256 = 2**256 - 1

DEFAULT_TOKEN_SYMBOL = "DAO"
