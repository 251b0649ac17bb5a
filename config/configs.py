import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def get_env(key: str, default: any = None, cast_type: type = str):
    value = os.getenv(key)
    if value is None or value == "":
        return default

    if cast_type == bool:
        return value.lower() in ("true", "1", "t", "yes", "on")
    try:
        return cast_type(value)
    except (ValueError, TypeError):
        return default


class AppConfigs:
    def __init__(self):
        self.name = get_env("APP_NAME", "DAO Governance CLI")
        self.debug = get_env("DEBUG", False, bool)
        # DEBUG=true forces verbose logging regardless of LOG_LEVEL
        self.log_level = "DEBUG" if self.debug else get_env("LOG_LEVEL", "INFO")


class EthereumConfigs:
    def __init__(self):
        self.provider_uri = get_env("PROVIDER_URI", "http://localhost:8545")
        self.rpc_timeout = get_env("RPC_TIMEOUT", 60, int)
        self.network = get_env("NETWORK", "rinkeby")
        # Signs transactions locally when set; otherwise the node must manage the sender account
        self.private_key = get_env("PRIVATE_KEY")
        self.sender_address = get_env("SENDER_ADDRESS")


class AddressConfigs:
    """Per-deployment address overrides merged into the static network table."""

    def __init__(self):
        self.dao = get_env("DAO_ADDRESS")
        self.agent = get_env("AGENT_ADDRESS")
        self.voting = get_env("VOTING_ADDRESS")
        self.agreement = get_env("AGREEMENT_ADDRESS")
        self.court = get_env("COURT_ADDRESS")
        self.staking_factory = get_env("STAKING_FACTORY_ADDRESS")

    def as_overrides(self) -> dict:
        return {key: value for key, value in vars(self).items() if value is not None}


class IpfsConfigs:
    def __init__(self):
        self.pinning_api_url = get_env("PINATA_API_URL", "https://api.pinata.cloud")
        self.api_key = get_env("PINATA_API_KEY")
        self.secret_api_key = get_env("PINATA_SECRET_API_KEY")
        self.timeout = get_env("IPFS_TIMEOUT", 120, int)


class SystemConfigs:
    def __init__(self):
        self.app = AppConfigs()
        self.ethereum = EthereumConfigs()
        self.addresses = AddressConfigs()
        self.ipfs = IpfsConfigs()

# Singleton instance
configs = SystemConfigs()
