from typing import Optional, Tuple

from config.config_store import ConfigStore
from config.configs import configs
from governance.allowance_manager import AllowanceManager
from governance.contract_gateway import ContractGateway
from governance.document_loader import DocumentLoader
from governance.ipfs_pinner import IpfsPinner
from governance.orchestrator import GovernanceOrchestrator
from utils.rpc_provider_utils import build_async_web3


def build_orchestrator(
    network: str,
    provider_uri: str,
    private_key: Optional[str] = configs.ethereum.private_key,
) -> Tuple[GovernanceOrchestrator, Optional[str]]:
    """
    Wires an orchestrator for `network` from the runtime configuration.

    Returns:
        The orchestrator and the local signing account address, if a private key was given.
    """
    network_config = ConfigStore(address_overrides=configs.addresses.as_overrides()).get(network)
    web3, account_address = build_async_web3(provider_uri, private_key, timeout=configs.ethereum.rpc_timeout)

    gateway = ContractGateway(web3)
    pinner = IpfsPinner(
        api_url=configs.ipfs.pinning_api_url,
        api_key=configs.ipfs.api_key,
        secret_api_key=configs.ipfs.secret_api_key,
        timeout=configs.ipfs.timeout,
    )
    orchestrator = GovernanceOrchestrator(
        network_config=network_config,
        gateway=gateway,
        allowance_manager=AllowanceManager(gateway),
        document_loader=DocumentLoader(pinner),
    )
    return orchestrator, account_address
