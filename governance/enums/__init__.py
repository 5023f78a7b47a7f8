from governance.enums.orchestrator_state import OrchestratorState
from governance.enums.vote_choice import VoteChoice

__all__ = ["OrchestratorState", "VoteChoice"]
