# Chains the Smart Wallet API can provision wallets on and sponsor gas for.
# Chain identifier -> EVM chain id
SUPPORTED_CHAINS = {
    "ethereum": 1,
    "polygon": 137,
    "avalanche": 43114,
    "bnb": 56,
    "optimism": 10,
    "arbitrum": 42161,
}

DEFAULT_CHAINS = list(SUPPORTED_CHAINS.keys())
