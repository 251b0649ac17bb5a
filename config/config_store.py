from typing import Dict, List, Optional

from config.network_config import CourtConfig, NetworkAddresses, NetworkConfig
from constants.court_config import COURT_CONFIGS
from constants.network_addresses import NETWORK_ADDRESSES
from governance.exceptions import ConfigNotFound
from utils.logger_utils import get_logger

logger = get_logger("Config Store")


class ConfigStore(object):
    """
    Read-only table of per-network governance configuration.
    Every entry is built once at construction; lookups never mutate it.
    """

    def __init__(
        self,
        network_addresses: Dict[str, Dict[str, str]] = NETWORK_ADDRESSES,
        court_configs: Dict[str, Dict] = COURT_CONFIGS,
        address_overrides: Optional[Dict[str, str]] = None,
    ):
        overrides = address_overrides or {}
        if overrides:
            logger.info(f"Applying address overrides for: {', '.join(sorted(overrides))}")

        self._configs: Dict[str, NetworkConfig] = {}
        for name, addresses in network_addresses.items():
            court = court_configs.get(name)
            self._configs[name] = NetworkConfig(
                name=name,
                addresses=NetworkAddresses(**{**addresses, **overrides}),
                court=CourtConfig(**court) if court else None,
            )

    def get(self, network: str) -> NetworkConfig:
        try:
            return self._configs[network]
        except KeyError:
            raise ConfigNotFound(network, f"known networks are {', '.join(self.networks()) or 'none'}") from None

    def networks(self) -> List[str]:
        return sorted(self._configs)
