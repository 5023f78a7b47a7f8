import uuid
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from governance.enums.vote_choice import VoteChoice
from governance.errors import GovernanceWorkflowError
from governance.models.proposal import ProposalReference
from utils.formatter_utils import bytes_to_hex_data


class TransactionRequest(BaseModel):
    """
    A sponsored call on behalf of a wallet. Built fresh for every vote and
    consumed exactly once by the submission client.
    """

    model_config = ConfigDict(frozen=True)

    request_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    wallet_address: str
    chain: str
    target_contract_address: str
    call_data: bytes
    value: Literal[0] = 0

    def to_payload(self) -> Dict[str, Any]:
        """Request body expected by the transaction submission endpoint."""
        return {
            "walletAddress": self.wallet_address,
            "chain": self.chain,
            "to": self.target_contract_address,
            "data": bytes_to_hex_data(self.call_data),
            "value": self.value,
        }


class TransactionResult(BaseModel):
    """Synchronous acknowledgment from the Smart Wallet API. Not an on-chain confirmation."""

    model_config = ConfigDict(frozen=True)

    request_id: str
    chain: str
    status: int
    payload: Any = None


class VoteOutcome(BaseModel):
    """What happened to one attempted vote during a session."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    proposal: ProposalReference
    choice: VoteChoice
    result: Optional[TransactionResult] = None
    error: Optional[GovernanceWorkflowError] = None

    @property
    def succeeded(self) -> bool:
        return self.result is not None and self.error is None
