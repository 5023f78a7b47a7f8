import click


from cli.cast_vote import cast_vote
from cli.encode_vote import encode_vote
from cli.provision_wallet import provision_wallet


@click.group()
@click.version_option(version="0.1.0")
@click.pass_context
def cli(ctx):
    pass


# Wallet provisioning
cli.add_command(provision_wallet, "provision_wallet")

# Gasless voting
cli.add_command(cast_vote, "cast_vote")

# Offline call data encoding
cli.add_command(encode_vote, "encode_vote")
