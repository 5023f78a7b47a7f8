from typing import Tuple

from pydantic import BaseModel, ConfigDict


class WalletIdentity(BaseModel):
    """A cross-chain wallet created by the Smart Wallet API. Immutable once provisioned."""

    model_config = ConfigDict(frozen=True)

    token_symbol: str
    supported_chains: Tuple[str, ...]
    address: str

    def supports(self, chain: str) -> bool:
        return chain in self.supported_chains
