from smart_wallet.smart_wallet_client import SmartWalletClient
from smart_wallet.transaction_submission_client import TransactionSubmissionClient
from smart_wallet.wallet_provisioning_client import WalletProvisioningClient

__all__ = [
    "SmartWalletClient",
    "TransactionSubmissionClient",
    "WalletProvisioningClient",
]
