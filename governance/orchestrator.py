import asyncio
from typing import Dict, Iterable, List, Optional

from governance.enums.orchestrator_state import OrchestratorState
from governance.enums.vote_choice import VoteChoice
from governance.errors import (
    EncodingError,
    SubmissionError,
    WorkflowStateError,
)
from governance.models.proposal import Ballot, ProposalReference
from governance.models.transaction import TransactionResult, VoteOutcome
from governance.models.wallet_identity import WalletIdentity
from governance.vote_encoder import encode_ballot
from smart_wallet.transaction_submission_client import TransactionSubmissionClient
from smart_wallet.wallet_provisioning_client import WalletProvisioningClient
from utils.formatter_utils import normalize_chain
from utils.logger_utils import get_logger

logger = get_logger("Governance Orchestrator")


class GovernanceOrchestrator:
    """
    Drives one voting session: provision a wallet once, then cast any number
    of sponsored votes with it.

    States: UNPROVISIONED -> PROVISIONED -> VOTE_SUBMITTED. Further votes may
    be cast from PROVISIONED or VOTE_SUBMITTED without provisioning again.
    """

    def __init__(
            self,
            provisioning_client: WalletProvisioningClient,
            submission_client: TransactionSubmissionClient,
            token_symbol: str,
            chains: Iterable[str],
            governor_addresses: Dict[str, str]
    ):
        self._provisioning_client = provisioning_client
        self._submission_client = submission_client
        self.token_symbol = token_symbol
        self.chains = list(chains)
        self.governor_addresses = {
            normalize_chain(chain): address for chain, address in governor_addresses.items()
        }

        self._state = OrchestratorState.UNPROVISIONED
        self._identity: Optional[WalletIdentity] = None
        self._history: List[VoteOutcome] = []

    @property
    def state(self) -> OrchestratorState:
        return self._state

    @property
    def identity(self) -> Optional[WalletIdentity]:
        return self._identity

    @property
    def history(self) -> List[VoteOutcome]:
        return list(self._history)

    async def start(self) -> WalletIdentity:
        """
        Provisions the session wallet (UNPROVISIONED -> PROVISIONED).

        Returns the existing identity when already provisioned. On failure the
        state stays UNPROVISIONED and ProvisioningError propagates.
        """
        if self._identity is not None:
            logger.debug(f"Wallet already provisioned: {self._identity.address}")
            return self._identity

        identity = await self._provisioning_client.provision_wallet(self.token_symbol, self.chains)
        self._identity = identity
        self._transition(OrchestratorState.PROVISIONED)
        return identity

    async def cast_vote(
            self,
            proposal_id: int,
            choice: VoteChoice,
            chain: str,
            reason: Optional[str] = None
    ) -> TransactionResult:
        """
        Encodes and submits one vote on the governor deployed on chain.

        Raises:
            WorkflowStateError: If no wallet has been provisioned yet.
            EncodingError: If the vote cannot be encoded (state unchanged).
            SubmissionError: If the submission fails. The session stays usable.
        """
        if self._identity is None:
            raise WorkflowStateError("Cannot cast a vote before a wallet is provisioned; call start() first.")

        call_data = encode_ballot(proposal_id, choice, reason)
        vote_choice = VoteChoice(choice)
        proposal = ProposalReference(proposal_id=proposal_id, chain=normalize_chain(chain))

        try:
            target = self._governor_for(proposal.chain)
            result = await self._submission_client.submit(self._identity, proposal.chain, target, call_data)
        except SubmissionError as e:
            self._record(VoteOutcome(proposal=proposal, choice=vote_choice, error=e))
            logger.error(f"Vote {vote_choice.name} on proposal {proposal_id} ({proposal.chain}) failed: {e}")
            raise

        self._record(VoteOutcome(proposal=proposal, choice=vote_choice, result=result))
        logger.info(f"Vote {vote_choice.name} on proposal {proposal_id} ({proposal.chain}) acknowledged")
        return result

    async def cast_votes(self, ballots: Iterable[Ballot], max_concurrency: int = 4) -> List[VoteOutcome]:
        """
        Casts several votes concurrently, bounded by a semaphore.

        Per-vote encoding or submission failures are returned in the outcomes
        instead of being raised. Outcomes follow the input order; the order in
        which the service receives the calls is not defined.

        Raises:
            WorkflowStateError: If no wallet has been provisioned yet.
        """
        if self._identity is None:
            raise WorkflowStateError("Cannot cast votes before a wallet is provisioned; call start() first.")

        ballots = list(ballots)
        if not ballots:
            return []

        semaphore = asyncio.Semaphore(max(1, max_concurrency))

        async def semi_cast_vote(ballot: Ballot) -> VoteOutcome:
            async with semaphore:
                return await self._cast_ballot(ballot)

        tasks = [semi_cast_vote(ballot) for ballot in ballots]
        outcomes = await asyncio.gather(*tasks)

        succeeded = sum(1 for outcome in outcomes if outcome.succeeded)
        logger.info(f"Cast {succeeded}/{len(outcomes)} votes successfully")
        return list(outcomes)

    async def _cast_ballot(self, ballot: Ballot) -> VoteOutcome:
        proposal = ProposalReference(proposal_id=ballot.proposal_id, chain=normalize_chain(ballot.chain))
        try:
            result = await self.cast_vote(ballot.proposal_id, ballot.choice, ballot.chain, ballot.reason)
        except SubmissionError as e:
            return VoteOutcome(proposal=proposal, choice=ballot.choice, error=e)
        except EncodingError as e:
            logger.error(f"Could not encode vote on proposal {ballot.proposal_id}: {e}")
            return VoteOutcome(proposal=proposal, choice=ballot.choice, error=e)
        return VoteOutcome(proposal=proposal, choice=ballot.choice, result=result)

    def _governor_for(self, chain: str) -> str:
        target = self.governor_addresses.get(chain)
        if not target:
            raise SubmissionError(f"No governor contract configured for chain '{chain}'")
        return target

    def _record(self, outcome: VoteOutcome) -> None:
        self._history.append(outcome)
        self._transition(OrchestratorState.VOTE_SUBMITTED)

    def _transition(self, new_state: OrchestratorState) -> None:
        if new_state != self._state:
            logger.debug(f"Orchestrator state {self._state.value} -> {new_state.value}")
        self._state = new_state
