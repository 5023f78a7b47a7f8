import asyncio
from typing import Tuple

import click

from config.settings import settings
from governance.errors import ProvisioningError
from smart_wallet.wallet_provisioning_client import WalletProvisioningClient
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Provision Wallet CLI")


async def _provision(token_symbol: str, chains: Tuple[str, ...]):
    async with WalletProvisioningClient() as client:
        return await client.provision_wallet(token_symbol, chains)


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "-t",
    "--token-symbol",
    default=settings.governance.token_symbol,
    show_default=True,
    type=str,
    help="Governance token symbol the wallet is scoped to.",
)
@click.option(
    "-c",
    "--chain",
    "chains",
    multiple=True,
    help="Chain to provision the wallet on. Repeat for several chains. Defaults to GOVERNANCE_CHAINS.",
)
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def provision_wallet(token_symbol: str, chains: Tuple[str, ...], log_file: str):
    """
    Creates a cross-chain smart wallet and prints its address.
    """
    configure_logging(log_file, settings.app.log_level)
    chains = chains or tuple(settings.governance.chain_list)

    try:
        identity = asyncio.run(_provision(token_symbol, chains))
    except ProvisioningError as e:
        logger.error(f"Wallet provisioning failed: {e}")
        raise click.ClickException(str(e))

    click.echo(identity.address)


if __name__ == "__main__":
    provision_wallet()
