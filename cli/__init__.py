import click

from cli.agreement_commands import show_network_config, sign_agreement
from cli.dispute_commands import challenge, dispute, settle
from cli.proposal_commands import (
    change_agreement,
    change_court_settings,
    change_voting_support,
    new_poll,
    new_token_transfer,
    upgrade_app,
)
from cli.vote_commands import delegate_vote, execute_vote, set_representative, vote
from config.configs import configs


@click.group()
@click.version_option(version="0.1.0", prog_name=configs.app.name)
@click.pass_context
def cli(ctx):
    pass


# Configuration
cli.add_command(show_network_config, "show_network_config")

# Agreement
cli.add_command(sign_agreement, "sign_agreement")

# Voting
cli.add_command(vote, "vote")
cli.add_command(set_representative, "set_representative")
cli.add_command(delegate_vote, "delegate_vote")
cli.add_command(execute_vote, "execute_vote")

# Proposals
cli.add_command(new_poll, "new_poll")
cli.add_command(new_token_transfer, "new_token_transfer")
cli.add_command(upgrade_app, "upgrade_app")
cli.add_command(change_agreement, "change_agreement")
cli.add_command(change_voting_support, "change_voting_support")
cli.add_command(change_court_settings, "change_court_settings")

# Challenges and disputes
cli.add_command(challenge, "challenge")
cli.add_command(dispute, "dispute")
cli.add_command(settle, "settle")
