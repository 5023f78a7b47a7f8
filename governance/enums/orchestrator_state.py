from enum import Enum


class OrchestratorState(str, Enum):
    UNPROVISIONED = "unprovisioned"
    PROVISIONED = "provisioned"
    VOTE_SUBMITTED = "vote_submitted"
