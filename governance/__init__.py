from governance.enums import OrchestratorState, VoteChoice
from governance.errors import (
    EncodingError,
    GovernanceWorkflowError,
    ProvisioningError,
    SmartWalletError,
    SubmissionError,
    WorkflowStateError,
)

__all__ = [
    "EncodingError",
    "GovernanceWorkflowError",
    "OrchestratorState",
    "ProvisioningError",
    "SmartWalletError",
    "SubmissionError",
    "VoteChoice",
    "WorkflowStateError",
]
