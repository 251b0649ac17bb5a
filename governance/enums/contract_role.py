from enum import Enum


class ContractRole(str, Enum):
    KERNEL = "kernel"
    AGENT = "agent"
    DISPUTABLE_VOTING = "disputable_voting"
    AGREEMENT = "agreement"
    ARBITRATOR = "arbitrator"
    ERC20 = "erc20"
    STAKING_FACTORY = "staking_factory"
    STAKING = "staking"
    COURT_SUBSCRIPTIONS = "court_subscriptions"
