from pydantic import BaseModel, ConfigDict, Field

from constants.constants import MAX_UINT256
from governance.enums.vote_choice import VoteChoice


class ProposalReference(BaseModel):
    """A proposal as identified by the governor deployed on one chain."""

    model_config = ConfigDict(frozen=True)

    proposal_id: int = Field(ge=0, le=MAX_UINT256)
    chain: str


class Ballot(BaseModel):
    """One vote to cast: which proposal, which choice, on which chain."""

    model_config = ConfigDict(frozen=True)

    proposal_id: int = Field(ge=0, le=MAX_UINT256)
    choice: VoteChoice
    chain: str
    reason: str | None = None
