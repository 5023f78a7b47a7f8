import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from eth_utils import function_signature_to_4byte_selector

from governance.enums.orchestrator_state import OrchestratorState
from governance.enums.vote_choice import VoteChoice
from governance.errors import EncodingError, ProvisioningError, SubmissionError, WorkflowStateError
from governance.models.proposal import Ballot
from governance.models.transaction import TransactionResult
from governance.models.wallet_identity import WalletIdentity
from governance.orchestrator import GovernanceOrchestrator
from governance.vote_encoder import encode_vote
from smart_wallet.transaction_submission_client import TransactionSubmissionClient
from smart_wallet.wallet_provisioning_client import WalletProvisioningClient

WALLET_ADDRESS = "0x1111111111111111111111111111111111111111"
GOVERNOR_ADDRESS = "0x2222222222222222222222222222222222222222"
POLYGON_GOVERNOR_ADDRESS = "0x3333333333333333333333333333333333333333"
ALL_CHAINS = ["ethereum", "polygon", "avalanche", "bnb", "optimism", "arbitrum"]


def _ack(chain: str = "ethereum") -> TransactionResult:
    return TransactionResult(request_id="req-1", chain=chain, status=200, payload={"status": "queued"})


@pytest.fixture
def mock_provisioning_client():
    client = MagicMock()
    client.provision_wallet = AsyncMock(
        return_value=WalletIdentity(token_symbol="DAO", supported_chains=tuple(ALL_CHAINS), address=WALLET_ADDRESS)
    )
    return client


@pytest.fixture
def mock_submission_client():
    client = MagicMock()
    client.submit = AsyncMock(return_value=_ack())
    return client


@pytest.fixture
def orchestrator(mock_provisioning_client, mock_submission_client):
    return GovernanceOrchestrator(
        provisioning_client=mock_provisioning_client,
        submission_client=mock_submission_client,
        token_symbol="DAO",
        chains=ALL_CHAINS,
        governor_addresses={"ethereum": GOVERNOR_ADDRESS, "Polygon": POLYGON_GOVERNOR_ADDRESS},
    )


@pytest.mark.asyncio
async def test_start_provisions_wallet(orchestrator, mock_provisioning_client):
    assert orchestrator.state == OrchestratorState.UNPROVISIONED

    identity = await orchestrator.start()

    assert identity.address == WALLET_ADDRESS
    assert orchestrator.state == OrchestratorState.PROVISIONED
    mock_provisioning_client.provision_wallet.assert_awaited_once_with("DAO", ALL_CHAINS)


@pytest.mark.asyncio
async def test_start_twice_does_not_provision_again(orchestrator, mock_provisioning_client):
    first = await orchestrator.start()
    second = await orchestrator.start()

    assert first is second
    assert mock_provisioning_client.provision_wallet.await_count == 1


@pytest.mark.asyncio
async def test_cast_vote_before_start_is_rejected(orchestrator, mock_submission_client):
    with pytest.raises(WorkflowStateError):
        await orchestrator.cast_vote(1, VoteChoice.FOR, "ethereum")

    assert orchestrator.state == OrchestratorState.UNPROVISIONED
    mock_submission_client.submit.assert_not_called()


@pytest.mark.asyncio
async def test_cast_vote_submits_encoded_vote(orchestrator, mock_submission_client):
    await orchestrator.start()

    result = await orchestrator.cast_vote(123456789, VoteChoice.FOR, "ethereum")

    assert result.payload == {"status": "queued"}
    assert orchestrator.state == OrchestratorState.VOTE_SUBMITTED
    identity, chain, target, payload = mock_submission_client.submit.call_args.args
    assert identity.address == WALLET_ADDRESS
    assert chain == "ethereum"
    assert target == GOVERNOR_ADDRESS
    assert payload == encode_vote(123456789, VoteChoice.FOR)

    [outcome] = orchestrator.history
    assert outcome.succeeded
    assert outcome.proposal.proposal_id == 123456789
    assert outcome.proposal.chain == "ethereum"


@pytest.mark.asyncio
async def test_cast_vote_uses_per_chain_governor(orchestrator, mock_submission_client):
    await orchestrator.start()

    await orchestrator.cast_vote(7, VoteChoice.AGAINST, "POLYGON")

    _, chain, target, _ = mock_submission_client.submit.call_args.args
    assert chain == "polygon"
    assert target == POLYGON_GOVERNOR_ADDRESS


@pytest.mark.asyncio
async def test_cast_vote_without_governor_for_chain(orchestrator, mock_submission_client):
    await orchestrator.start()

    with pytest.raises(SubmissionError):
        await orchestrator.cast_vote(7, VoteChoice.FOR, "bnb")

    mock_submission_client.submit.assert_not_called()
    assert orchestrator.state == OrchestratorState.VOTE_SUBMITTED
    assert not orchestrator.history[0].succeeded


@pytest.mark.asyncio
async def test_cast_vote_encoding_error_leaves_state_unchanged(orchestrator, mock_submission_client):
    await orchestrator.start()

    with pytest.raises(EncodingError):
        await orchestrator.cast_vote(1, 3, "ethereum")

    mock_submission_client.submit.assert_not_called()
    assert orchestrator.state == OrchestratorState.PROVISIONED
    assert orchestrator.history == []


@pytest.mark.asyncio
async def test_submission_failure_keeps_orchestrator_usable(orchestrator, mock_submission_client):
    await orchestrator.start()
    mock_submission_client.submit.side_effect = [
        SubmissionError("rejected", status=502, body="bad gateway"),
        _ack(),
    ]

    with pytest.raises(SubmissionError) as exc_info:
        await orchestrator.cast_vote(1, VoteChoice.FOR, "ethereum")
    assert exc_info.value.body == "bad gateway"
    assert orchestrator.state == OrchestratorState.VOTE_SUBMITTED

    result = await orchestrator.cast_vote(2, VoteChoice.ABSTAIN, "ethereum")

    assert result.status == 200
    assert [outcome.succeeded for outcome in orchestrator.history] == [False, True]


@pytest.mark.asyncio
async def test_cast_vote_with_reason(orchestrator, mock_submission_client):
    await orchestrator.start()

    await orchestrator.cast_vote(5, VoteChoice.AGAINST, "ethereum", reason="too expensive")

    payload = mock_submission_client.submit.call_args.args[3]
    assert payload[:4] == function_signature_to_4byte_selector("castVoteWithReason(uint256,uint8,string)")


@pytest.mark.asyncio
async def test_cast_votes_reports_each_outcome_in_order(orchestrator, mock_submission_client):
    await orchestrator.start()

    async def submit(identity, chain, target, payload):
        if chain == "polygon":
            raise SubmissionError("rejected", status=400, body="proposal not active")
        return _ack(chain)

    mock_submission_client.submit.side_effect = submit
    ballots = [
        Ballot(proposal_id=1, choice=VoteChoice.FOR, chain="ethereum"),
        Ballot(proposal_id=2, choice=VoteChoice.AGAINST, chain="polygon"),
        Ballot(proposal_id=3, choice=VoteChoice.ABSTAIN, chain="ethereum", reason="recused"),
    ]

    outcomes = await orchestrator.cast_votes(ballots, max_concurrency=2)

    assert [outcome.proposal.proposal_id for outcome in outcomes] == [1, 2, 3]
    assert [outcome.succeeded for outcome in outcomes] == [True, False, True]
    assert outcomes[1].error.status == 400
    assert len(orchestrator.history) == 3


@pytest.mark.asyncio
async def test_cast_votes_before_start_is_rejected(orchestrator):
    with pytest.raises(WorkflowStateError):
        await orchestrator.cast_votes([Ballot(proposal_id=1, choice=VoteChoice.FOR, chain="ethereum")])


@pytest.mark.asyncio
async def test_scenario_a_provision_then_vote_for(mock_session, make_response):
    """Provision on all six chains, then vote FOR proposal 123456789 on ethereum."""
    mock_session.post.side_effect = [
        make_response(200, json.dumps({"walletAddress": WALLET_ADDRESS})),
        make_response(200, json.dumps({"txHash": "0xfeed"})),
    ]
    orchestrator = GovernanceOrchestrator(
        provisioning_client=WalletProvisioningClient(api_key="k", base_url="https://wallet.test", session=mock_session),
        submission_client=TransactionSubmissionClient(api_key="k", base_url="https://wallet.test", session=mock_session),
        token_symbol="DAO",
        chains=ALL_CHAINS,
        governor_addresses={chain: GOVERNOR_ADDRESS for chain in ALL_CHAINS},
    )

    identity = await orchestrator.start()
    result = await orchestrator.cast_vote(123456789, VoteChoice.FOR, "ethereum")

    assert identity.address == WALLET_ADDRESS
    assert result.payload == {"txHash": "0xfeed"}
    submission = mock_session.post.call_args_list[1].kwargs["json"]
    assert submission["data"] == "0x56781388" + f"{123456789:064x}" + f"{1:064x}"
    assert submission["walletAddress"] == WALLET_ADDRESS
    assert submission["to"] == GOVERNOR_ADDRESS
    assert submission["value"] == 0


@pytest.mark.asyncio
async def test_scenario_b_provisioning_failure_never_submits(mock_provisioning_client, mock_submission_client):
    mock_provisioning_client.provision_wallet.side_effect = ProvisioningError(
        "rejected", status=503, body="maintenance"
    )
    orchestrator = GovernanceOrchestrator(
        provisioning_client=mock_provisioning_client,
        submission_client=mock_submission_client,
        token_symbol="DAO",
        chains=ALL_CHAINS,
        governor_addresses={"ethereum": GOVERNOR_ADDRESS},
    )

    with pytest.raises(ProvisioningError) as exc_info:
        await orchestrator.start()

    assert exc_info.value.status == 503
    assert orchestrator.state == OrchestratorState.UNPROVISIONED
    assert orchestrator.identity is None
    with pytest.raises(WorkflowStateError):
        await orchestrator.cast_vote(1, VoteChoice.FOR, "ethereum")
    mock_submission_client.submit.assert_not_called()
