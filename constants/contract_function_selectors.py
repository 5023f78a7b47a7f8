# Governor (OpenZeppelin IGovernor) Function Selectors
GOVERNOR_FUNCTION_SELECTORS = {
    "0x7d5e81e2": "propose(address[],uint256[],bytes[],string)",
    "0x56781388": "castVote(uint256,uint8)",
    "0x7b3c71d3": "castVoteWithReason(uint256,uint8,string)",
}

# Functions a sponsored vote transaction may call
GOVERNOR_VOTE_FUNCTIONS = ("castVote", "castVoteWithReason")
