import asyncio
import json
from typing import Optional

import click

from config.settings import settings
from governance.enums.vote_choice import VoteChoice
from governance.errors import GovernanceWorkflowError
from governance.models.transaction import TransactionResult
from governance.orchestrator import GovernanceOrchestrator
from smart_wallet.transaction_submission_client import TransactionSubmissionClient
from smart_wallet.wallet_provisioning_client import WalletProvisioningClient
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Cast Vote CLI")


async def run_vote_session(
        token_symbol: str,
        proposal_id: int,
        choice: VoteChoice,
        chain: str,
        reason: Optional[str] = None
) -> TransactionResult:
    """
    Provisions a wallet on the configured chains and casts one sponsored vote.
    """
    chains = settings.governance.chain_list
    async with WalletProvisioningClient() as provisioning_client, TransactionSubmissionClient() as submission_client:
        orchestrator = GovernanceOrchestrator(
            provisioning_client=provisioning_client,
            submission_client=submission_client,
            token_symbol=token_symbol,
            chains=chains,
            governor_addresses=settings.governance.governors_by_chain(chains),
        )
        await orchestrator.start()
        return await orchestrator.cast_vote(proposal_id, choice, chain, reason)


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-p", "--proposal-id", required=True, type=int, help="Governor proposal id (uint256).")
@click.option(
    "-s",
    "--support",
    required=True,
    type=click.Choice(["against", "for", "abstain"], case_sensitive=False),
    help="Vote choice.",
)
@click.option("-c", "--chain", required=True, type=str, help="Chain whose governor receives the vote.")
@click.option("-r", "--reason", default=None, type=str, help="Cast with castVoteWithReason.")
@click.option(
    "-t",
    "--token-symbol",
    default=settings.governance.token_symbol,
    show_default=True,
    type=str,
    help="Governance token symbol the wallet is scoped to.",
)
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def cast_vote(proposal_id: int, support: str, chain: str, reason: Optional[str], token_symbol: str, log_file: str):
    """
    Provisions a smart wallet and casts a gasless vote through the Smart Wallet API.
    """
    configure_logging(log_file, settings.app.log_level)
    logger.info(f"Casting {support.upper()} on proposal {proposal_id} ({chain})...")

    try:
        result = asyncio.run(
            run_vote_session(token_symbol, proposal_id, VoteChoice.from_label(support), chain, reason)
        )
    except GovernanceWorkflowError as e:
        logger.error(f"Vote failed: {e}")
        raise click.ClickException(str(e))

    click.echo(json.dumps(result.payload, default=str))


if __name__ == "__main__":
    cast_vote()
