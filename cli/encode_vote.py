from typing import Optional

import click

from governance.enums.vote_choice import VoteChoice
from governance.errors import EncodingError
from governance.vote_encoder import encode_ballot
from utils.formatter_utils import bytes_to_hex_data


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-p", "--proposal-id", required=True, type=int, help="Governor proposal id (uint256).")
@click.option(
    "-s",
    "--support",
    required=True,
    type=click.Choice(["against", "for", "abstain"], case_sensitive=False),
    help="Vote choice.",
)
@click.option("-r", "--reason", default=None, type=str, help="Encode castVoteWithReason with this reason.")
def encode_vote(proposal_id: int, support: str, reason: Optional[str]):
    """
    Prints the governor call data for a vote. Makes no network call.
    """
    try:
        call_data = encode_ballot(proposal_id, VoteChoice.from_label(support), reason)
    except EncodingError as e:
        raise click.ClickException(str(e))

    click.echo(bytes_to_hex_data(call_data))


if __name__ == "__main__":
    encode_vote()
