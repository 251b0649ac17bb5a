import click

from cli.common_options import governance_options, run_governance_operation


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-v", "--vote-id", required=True, type=int, help="ID of the vote to challenge.")
@click.option("-o", "--settlement-offer", required=True, type=int, help="Collateral amount offered to settle.")
@click.option("-j", "--justification", required=True, type=str, help="Plain text, or a path to a .md file.")
@governance_options
def challenge(vote_id, settlement_offer, justification, network, provider_uri, sender, log_file):
    """
    Challenges the action of a vote.
    """
    run_governance_operation(
        lambda orchestrator, challenger: orchestrator.challenge(vote_id, settlement_offer, justification, challenger),
        network, provider_uri, sender, log_file,
    )


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-v", "--vote-id", required=True, type=int, help="ID of the challenged vote.")
@governance_options
def dispute(vote_id, network, provider_uri, sender, log_file):
    """
    Raises a challenged action to the court, paying owed subscription fees first.
    """
    run_governance_operation(
        lambda orchestrator, submitter: orchestrator.dispute(vote_id, submitter),
        network, provider_uri, sender, log_file,
    )


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-v", "--vote-id", required=True, type=int, help="ID of the challenged vote.")
@governance_options
def settle(vote_id, network, provider_uri, sender, log_file):
    """
    Accepts the settlement offer of a challenged action.
    """
    run_governance_operation(
        lambda orchestrator, settler: orchestrator.settle(vote_id, settler),
        network, provider_uri, sender, log_file,
    )
