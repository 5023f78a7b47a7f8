from typing import Optional


class GovernanceWorkflowError(Exception):
    """Base class for every error raised by the voting workflow."""


class SmartWalletError(GovernanceWorkflowError):
    """
    An error reported by (or while reaching) the Smart Wallet API.

    status is the HTTP status, or None when the service was unreachable.
    body is the raw response body, surfaced verbatim.
    """

    def __init__(self, message: str, status: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body

    def __str__(self) -> str:
        if self.status is None and not self.body:
            return self.message
        return f"{self.message} (status={self.status}, body={self.body})"


class ProvisioningError(SmartWalletError):
    """Wallet creation was rejected, invalid, or the service was unreachable."""


class SubmissionError(SmartWalletError):
    """The sponsored vote transaction was rejected, invalid, or the service was unreachable."""


class EncodingError(GovernanceWorkflowError):
    """Invalid vote choice, malformed proposal id, or undecodable call data."""


class WorkflowStateError(GovernanceWorkflowError):
    """An orchestrator operation was called in a state that does not allow it."""
