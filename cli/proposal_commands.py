import click

from cli.common_options import governance_options, run_governance_operation

JUSTIFICATION_HELP = "Plain text justification, or a path to a .md file uploaded to IPFS."


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-q", "--question", required=True, type=str, help="Question of the poll, or a path to a .md file.")
@governance_options
def new_poll(question, network, provider_uri, sender, log_file):
    """
    Creates a vote without any script to execute.
    """
    run_governance_operation(
        lambda orchestrator, submitter: orchestrator.new_poll(question, submitter),
        network, provider_uri, sender, log_file,
    )


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-t", "--token", required=True, type=str, help="Address of the token held by the agent.")
@click.option("-r", "--recipient", required=True, type=str, help="Address receiving the tokens.")
@click.option("-a", "--amount", required=True, type=int, help="Amount to transfer, in the token's smallest unit.")
@click.option("-j", "--justification", required=True, type=str, help=JUSTIFICATION_HELP)
@governance_options
def new_token_transfer(token, recipient, amount, justification, network, provider_uri, sender, log_file):
    """
    Proposes a token transfer from the DAO agent.
    """
    run_governance_operation(
        lambda orchestrator, submitter: orchestrator.new_token_transfer(
            token, recipient, amount, justification, submitter
        ),
        network, provider_uri, sender, log_file,
    )


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("--app-id", required=True, type=str, help="bytes32 ID of the app to upgrade.")
@click.option("--base", required=True, type=str, help="Address of the new base implementation.")
@click.option("-j", "--justification", required=True, type=str, help=JUSTIFICATION_HELP)
@governance_options
def upgrade_app(app_id, base, justification, network, provider_uri, sender, log_file):
    """
    Proposes upgrading an app of the DAO to a new base implementation.
    """
    run_governance_operation(
        lambda orchestrator, submitter: orchestrator.upgrade_app(app_id, base, justification, submitter),
        network, provider_uri, sender, log_file,
    )


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-c", "--content", required=True, type=str, help="Path to the new agreement .md file.")
@click.option("-j", "--justification", required=True, type=str, help=JUSTIFICATION_HELP)
@governance_options
def change_agreement(content, justification, network, provider_uri, sender, log_file):
    """
    Proposes a new agreement version.
    """
    run_governance_operation(
        lambda orchestrator, submitter: orchestrator.change_agreement(content, justification, submitter),
        network, provider_uri, sender, log_file,
    )


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-s", "--support", required=True, type=int, help="Required support as an 18-decimal fixed point percentage.")
@click.option("-j", "--justification", required=True, type=str, help=JUSTIFICATION_HELP)
@governance_options
def change_voting_support(support, justification, network, provider_uri, sender, log_file):
    """
    Proposes a new required support for votes.
    """
    run_governance_operation(
        lambda orchestrator, submitter: orchestrator.change_voting_support(support, justification, submitter),
        network, provider_uri, sender, log_file,
    )


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("--term-id", required=True, type=int, help="Court term from which the new config applies.")
@click.option("-j", "--justification", required=True, type=str, help=JUSTIFICATION_HELP)
@governance_options
def change_court_settings(term_id, justification, network, provider_uri, sender, log_file):
    """
    Proposes applying the network's court config to the arbitrator.
    """
    run_governance_operation(
        lambda orchestrator, submitter: orchestrator.change_court_settings(term_id, justification, submitter),
        network, provider_uri, sender, log_file,
    )
