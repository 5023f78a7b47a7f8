import pytest
from pydantic import ValidationError

from governance.enums.vote_choice import VoteChoice
from governance.models.proposal import Ballot, ProposalReference
from governance.models.transaction import TransactionRequest
from governance.models.wallet_identity import WalletIdentity
from utils.formatter_utils import mask_secret

WALLET_ADDRESS = "0x1111111111111111111111111111111111111111"
GOVERNOR_ADDRESS = "0x2222222222222222222222222222222222222222"


def test_wallet_identity_is_immutable():
    identity = WalletIdentity(token_symbol="DAO", supported_chains=("ethereum",), address=WALLET_ADDRESS)

    with pytest.raises(ValidationError):
        identity.address = GOVERNOR_ADDRESS
    assert identity.supports("ethereum")
    assert not identity.supports("polygon")


def test_transaction_requests_get_distinct_ids():
    kwargs = dict(
        wallet_address=WALLET_ADDRESS,
        chain="ethereum",
        target_contract_address=GOVERNOR_ADDRESS,
        call_data=b"\x56\x78\x13\x88",
    )

    assert TransactionRequest(**kwargs).request_id != TransactionRequest(**kwargs).request_id


def test_transaction_request_payload():
    request = TransactionRequest(
        wallet_address=WALLET_ADDRESS,
        chain="polygon",
        target_contract_address=GOVERNOR_ADDRESS,
        call_data=b"\x56\x78\x13\x88",
    )

    assert request.to_payload() == {
        "walletAddress": WALLET_ADDRESS,
        "chain": "polygon",
        "to": GOVERNOR_ADDRESS,
        "data": "0x56781388",
        "value": 0,
    }


def test_transaction_request_value_is_always_zero():
    with pytest.raises(ValidationError):
        TransactionRequest(
            wallet_address=WALLET_ADDRESS,
            chain="ethereum",
            target_contract_address=GOVERNOR_ADDRESS,
            call_data=b"",
            value=1,
        )


def test_proposal_reference_bounds():
    assert ProposalReference(proposal_id=2**256 - 1, chain="ethereum").proposal_id == 2**256 - 1
    with pytest.raises(ValidationError):
        ProposalReference(proposal_id=2**256, chain="ethereum")


def test_ballot_rejects_invalid_choice():
    assert Ballot(proposal_id=1, choice=2, chain="bnb").choice == VoteChoice.ABSTAIN
    with pytest.raises(ValidationError):
        Ballot(proposal_id=1, choice=3, chain="bnb")


def test_mask_secret():
    assert mask_secret(None) == "<unset>"
    assert mask_secret("abcdefgh") == "****efgh"
    assert mask_secret("abc") == "***"
