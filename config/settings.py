from typing import Dict, List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from constants.chains import DEFAULT_CHAINS
from constants.constants import DEFAULT_TOKEN_SYMBOL


class _EnvSettings(BaseSettings):
    """Base for sub-settings: every section reads the same environment and .env file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


class AppSettings(_EnvSettings):
    """General application settings."""

    name: str = Field("DAO Gasless Voting", validation_alias="APP_NAME")
    debug: bool = Field(False, validation_alias="DEBUG")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")


class SmartWalletSettings(_EnvSettings):
    """Settings for the Smart Wallet API (wallet provisioning and sponsored transactions)."""

    api_url: str = Field(
        default="https://api.smartwallet.example/v1",
        validation_alias="SMART_WALLET_API_URL",
        description="Base URL of the Smart Wallet API",
    )
    # Opaque bearer credential, never logged
    api_key: Optional[str] = Field(default=None, validation_alias="SMART_WALLET_API_KEY")
    # Total timeout for one request (seconds)
    timeout: int = Field(default=30, gt=0, validation_alias="SMART_WALLET_TIMEOUT")
    wallets_endpoint: str = Field("wallets", validation_alias="SMART_WALLET_WALLETS_ENDPOINT")
    transactions_endpoint: str = Field("transactions", validation_alias="SMART_WALLET_TRANSACTIONS_ENDPOINT")


class GovernanceSettings(_EnvSettings):
    """Settings for the governance token and the per-chain governor contracts."""

    token_symbol: str = Field(DEFAULT_TOKEN_SYMBOL, validation_alias="GOVERNANCE_TOKEN_SYMBOL")
    # Comma-separated chain identifiers, e.g. "ethereum,polygon"
    chains: str = Field(",".join(DEFAULT_CHAINS), validation_alias="GOVERNANCE_CHAINS")
    # Governor deployed at the same address on every chain
    governor_address: Optional[str] = Field(default=None, validation_alias="GOVERNOR_ADDRESS")
    # JSON object of per-chain overrides, e.g. {"polygon": "0x..."}
    governor_addresses: Dict[str, str] = Field(default_factory=dict, validation_alias="GOVERNOR_ADDRESSES")

    @property
    def chain_list(self) -> List[str]:
        return [chain.strip().lower() for chain in self.chains.split(",") if chain.strip()]

    def governors_by_chain(self, chains: Optional[List[str]] = None) -> Dict[str, str]:
        """
        Resolves the governor address for each chain.
        Per-chain overrides win over the shared GOVERNOR_ADDRESS.
        """
        chains = chains if chains is not None else self.chain_list
        overrides = {chain.strip().lower(): address for chain, address in self.governor_addresses.items()}

        governors = {}
        for chain in chains:
            address = overrides.get(chain, self.governor_address)
            if address:
                governors[chain] = address
        return governors


class Settings(BaseSettings):
    """
    Main Settings class that composes all sub-settings.
    Each sub-settings section maps flat env vars through validation_alias.
    """

    app: AppSettings = Field(default_factory=AppSettings)
    smart_wallet: SmartWalletSettings = Field(default_factory=SmartWalletSettings)
    governance: GovernanceSettings = Field(default_factory=GovernanceSettings)

    # Config to load from .env file
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


# Singleton instance
settings = Settings()
