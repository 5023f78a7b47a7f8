import json
from typing import Iterable, List, Optional

from config.settings import settings
from governance.errors import ProvisioningError
from governance.models.wallet_identity import WalletIdentity
from smart_wallet.smart_wallet_client import SmartWalletClient
from utils.formatter_utils import normalize_chain, to_normalized_address
from utils.logger_utils import get_logger
from utils.validation_utils import validate_chain

logger = get_logger("Wallet Provisioning Client")


class WalletProvisioningClient(SmartWalletClient):
    """
    Requests creation of a cross-chain wallet scoped to a governance token.

    Not idempotent: provisioning twice may create two distinct wallets unless
    the remote service deduplicates.
    """

    error_class = ProvisioningError

    def __init__(self, *args, endpoint: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.endpoint = endpoint or settings.smart_wallet.wallets_endpoint

    @staticmethod
    def _prepare_chains(chains: Iterable[str]) -> List[str]:
        """Normalizes, validates and de-duplicates chains, keeping first-seen order."""
        if isinstance(chains, str):
            chains = [chains]

        prepared = []
        for chain in chains:
            normalized = normalize_chain(chain)
            try:
                validate_chain(normalized)
            except ValueError as e:
                raise ProvisioningError(str(e)) from e
            if normalized not in prepared:
                prepared.append(normalized)

        if not prepared:
            raise ProvisioningError("At least one chain must be provided.")
        return prepared

    async def provision_wallet(self, token_symbol: str, chains: Iterable[str]) -> WalletIdentity:
        """
        Creates a wallet identity on the Smart Wallet API.

        Args:
            token_symbol: Governance token symbol the service recognizes (e.g. "DAO")
            chains: Non-empty collection of supported chain identifiers

        Returns:
            WalletIdentity holding the provisioned wallet address.

        Raises:
            ProvisioningError: On invalid input (no call is made), an unreachable
                service, a non-2xx status, or a response without walletAddress.
        """
        if not isinstance(token_symbol, str) or not token_symbol.strip():
            raise ProvisioningError("Token symbol must be a non-empty string.")
        token_symbol = token_symbol.strip()
        prepared_chains = self._prepare_chains(chains)

        logger.info(f"Provisioning {token_symbol} wallet on {len(prepared_chains)} chains: {', '.join(prepared_chains)}")
        status, body = await self._post(
            self.endpoint,
            {"tokenSymbol": token_symbol, "chains": prepared_chains},
        )

        try:
            data = json.loads(body)
        except ValueError:
            raise ProvisioningError("Wallet provisioning response is not JSON", status=status, body=body) from None

        wallet_address = data.get("walletAddress") if isinstance(data, dict) else None
        if not isinstance(wallet_address, str) or not wallet_address.strip():
            raise ProvisioningError("Wallet provisioning response has no walletAddress", status=status, body=body)

        identity = WalletIdentity(
            token_symbol=token_symbol,
            supported_chains=tuple(prepared_chains),
            address=to_normalized_address(wallet_address.strip()),
        )
        logger.info(f"Provisioned wallet {identity.address}")
        return identity
