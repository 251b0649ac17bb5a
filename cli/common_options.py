import asyncio
from typing import Any, Awaitable, Callable, Optional

import click

from config.configs import configs
from governance.exceptions import GovernanceError
from governance.orchestrator import GovernanceOrchestrator
from governance.orchestrator_factory import build_orchestrator
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Governance CLI")

Operation = Callable[[GovernanceOrchestrator, str], Awaitable[Any]]


def governance_options(func):
    """Options shared by every command that talks to the DAO."""
    func = click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")(func)
    func = click.option(
        "-f",
        "--from",
        "sender",
        default=configs.ethereum.sender_address,
        type=str,
        help="Address sending the transactions. Defaults to the PRIVATE_KEY account.",
    )(func)
    func = click.option(
        "-p",
        "--provider-uri",
        default=configs.ethereum.provider_uri,
        show_default=True,
        type=str,
        help="The URI of the web3 provider e.g. https://rinkeby.infura.io/v3/<key> or a .ipc path.",
    )(func)
    func = click.option(
        "-n",
        "--network",
        default=configs.ethereum.network,
        show_default=True,
        type=str,
        help="Network whose governance deployment to use.",
    )(func)
    return func


def run_governance_operation(
    operation: Operation, network: str, provider_uri: str, sender: Optional[str], log_file: Optional[str]
) -> Any:
    configure_logging(log_file, configs.app.log_level)

    try:
        return asyncio.run(_run(operation, network, provider_uri, sender))
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
    except GovernanceError as e:
        logger.error(f"{type(e).__name__}: {e}")
        raise click.ClickException(str(e)) from e


async def _run(operation: Operation, network: str, provider_uri: str, sender: Optional[str]) -> Any:
    orchestrator, account_address = build_orchestrator(network, provider_uri)
    sender = sender or account_address
    if not sender:
        raise click.UsageError("No sender address. Pass --from or set PRIVATE_KEY.")
    logger.info(f"Running on {network} as {sender}")
    return await operation(orchestrator, sender)


def split_addresses(raw: str) -> list:
    return [address.strip() for address in raw.split(",") if address.strip()]
