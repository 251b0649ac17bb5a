import json

import click

from cli.common_options import governance_options, run_governance_operation
from config.config_store import ConfigStore
from config.configs import configs
from governance.exceptions import ConfigNotFound


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@governance_options
def sign_agreement(network, provider_uri, sender, log_file):
    """
    Signs the current agreement version (if needed) and allows the agreement
    to lock the sender's staked collateral.
    """
    run_governance_operation(
        lambda orchestrator, signer: orchestrator.sign_agreement(signer),
        network, provider_uri, sender, log_file,
    )


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-n", "--network", default=configs.ethereum.network, show_default=True, type=str, help="Network to show.")
def show_network_config(network):
    """
    Prints the contract addresses and court parameters configured for a network.
    """
    try:
        network_config = ConfigStore(address_overrides=configs.addresses.as_overrides()).get(network)
    except ConfigNotFound as e:
        raise click.ClickException(str(e)) from e
    click.echo(json.dumps(network_config.model_dump(), indent=2))
