import click

from cli.common_options import governance_options, run_governance_operation, split_addresses


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-v", "--vote-id", required=True, type=int, help="ID of the vote.")
@click.option("-s", "--supports", required=True, type=str, help='"true" to vote yes, "false" to vote no.')
@governance_options
def vote(vote_id, supports, network, provider_uri, sender, log_file):
    """
    Casts a vote.
    """
    run_governance_operation(
        lambda orchestrator, voter: orchestrator.cast_vote(vote_id, supports, voter),
        network, provider_uri, sender, log_file,
    )


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-r", "--representative", required=True, type=str, help="Address allowed to vote on the sender's behalf.")
@governance_options
def set_representative(representative, network, provider_uri, sender, log_file):
    """
    Sets the representative of the sender.
    """
    run_governance_operation(
        lambda orchestrator, voter: orchestrator.set_representative(representative, voter),
        network, provider_uri, sender, log_file,
    )


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-v", "--vote-id", required=True, type=int, help="ID of the vote.")
@click.option("-s", "--supports", required=True, type=str, help='"true" to vote yes, "false" to vote no.')
@click.option("--voters", required=True, type=str, help="Comma-separated addresses of the represented voters.")
@governance_options
def delegate_vote(vote_id, supports, voters, network, provider_uri, sender, log_file):
    """
    Votes on behalf of voters that set the sender as their representative.
    """
    voter_addresses = split_addresses(voters)
    run_governance_operation(
        lambda orchestrator, representative: orchestrator.delegate_vote(
            vote_id, supports, voter_addresses, representative
        ),
        network, provider_uri, sender, log_file,
    )


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-v", "--vote-id", required=True, type=int, help="ID of the vote.")
@click.option("--script", required=True, type=str, help="Hex EVM script submitted with the proposal.")
@governance_options
def execute_vote(vote_id, script, network, provider_uri, sender, log_file):
    """
    Executes a passed vote.
    """
    run_governance_operation(
        lambda orchestrator, executor: orchestrator.execute_vote(vote_id, script, executor),
        network, provider_uri, sender, log_file,
    )
