from governance.models.proposal import Ballot, ProposalReference
from governance.models.transaction import TransactionRequest, TransactionResult, VoteOutcome
from governance.models.wallet_identity import WalletIdentity

__all__ = [
    "Ballot",
    "ProposalReference",
    "TransactionRequest",
    "TransactionResult",
    "VoteOutcome",
    "WalletIdentity",
]
