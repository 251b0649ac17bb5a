from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from config.network_config import NetworkConfig
from governance.allowance_manager import AllowanceManager
from governance.contract_gateway import ContractGateway, ContractHandle
from governance.document_loader import DocumentLoader
from governance.enums.contract_role import ContractRole
from governance.evm_script_encoder import (
    EMPTY_CALLS_SCRIPT,
    encode_agreement_change,
    encode_app_upgrade,
    encode_court_config_change,
    encode_token_transfer,
    encode_voting_support_change,
)
from governance.exceptions import ConfigNotFound
from utils.formatter_utils import is_zero_address, to_normalized_address
from utils.logger_utils import get_logger
from utils.validation_utils import parse_support, validate_amount

logger = get_logger("Governance Orchestrator")

# Unlimited lock allowance granted to the agreement over a signer's stake
MAX_UINT192 = 2 ** 192 - 1
EMPTY_BYTES = b""


@dataclass(frozen=True)
class CollateralRequirement:
    collateral_token: ContractHandle
    action_amount: int
    challenge_amount: int
    challenge_duration: int


@dataclass(frozen=True)
class DisputeFees:
    fee_token: ContractHandle
    fee_amount: int


def owed_subscription_periods(last_payment_period_id: int, new_last_period_id: int) -> int:
    """A subscriber that never paid owes exactly one period."""
    if last_payment_period_id == 0:
        return 1
    return new_last_period_id - last_payment_period_id


class GovernanceOrchestrator(object):
    """
    Runs governance operations against one deployed DAO.

    Every operation is a fixed sequence of reads and transactions. A failing step
    aborts the rest of the operation; transactions already mined are left as they are.
    Contract handles are resolved on first use and reused for the whole session.
    """

    def __init__(
        self,
        network_config: NetworkConfig,
        gateway: ContractGateway,
        allowance_manager: AllowanceManager,
        document_loader: DocumentLoader,
    ):
        self.network_config = network_config
        self._gateway = gateway
        self._allowance_manager = allowance_manager
        self._document_loader = document_loader
        self._handles: Dict[ContractRole, ContractHandle] = {}
        self._staking_pools: Dict[str, ContractHandle] = {}

    # --- Contract handles ---

    async def _cached_handle(self, role: ContractRole, address: Optional[str]) -> ContractHandle:
        if role not in self._handles:
            self._handles[role] = await self._gateway.resolve(role, address)
        return self._handles[role]

    async def dao(self) -> ContractHandle:
        return await self._cached_handle(ContractRole.KERNEL, self.network_config.addresses.dao)

    async def agent(self) -> ContractHandle:
        return await self._cached_handle(ContractRole.AGENT, self.network_config.addresses.agent)

    async def voting(self) -> ContractHandle:
        return await self._cached_handle(ContractRole.DISPUTABLE_VOTING, self.network_config.addresses.voting)

    async def agreement(self) -> ContractHandle:
        return await self._cached_handle(ContractRole.AGREEMENT, self.network_config.addresses.agreement)

    async def staking_factory(self) -> ContractHandle:
        if ContractRole.STAKING_FACTORY not in self._handles:
            address = self.network_config.addresses.staking_factory
            if address is None:
                agreement = await self.agreement()
                address = await self._gateway.call(agreement, "stakingFactory")
            self._handles[ContractRole.STAKING_FACTORY] = await self._gateway.resolve(
                ContractRole.STAKING_FACTORY, address
            )
        return self._handles[ContractRole.STAKING_FACTORY]

    async def staking_pool(self, token: ContractHandle, sender: str) -> ContractHandle:
        """
        Returns the staking pool of `token`, creating it through the factory when none exists yet.
        """
        if token.address not in self._staking_pools:
            staking_factory = await self.staking_factory()
            staking_address = await self._gateway.call(staking_factory, "getInstance", token.address)

            if is_zero_address(staking_address):
                logger.info(f"Creating staking pool for token {token.address}...")
                receipt = await self._gateway.call(
                    staking_factory, "getOrCreateInstance", token.address, sender=sender
                )
                staking_address = self._gateway.get_event_argument(staking_factory, receipt, "NewStaking", "instance")

            self._staking_pools[token.address] = await self._gateway.resolve(ContractRole.STAKING, staking_address)
        return self._staking_pools[token.address]

    async def arbitrator(self) -> ContractHandle:
        setting = await self.setting()
        arbitrator_address = setting["arbitrator"]
        configured_court = self.network_config.addresses.court
        if configured_court and to_normalized_address(arbitrator_address) != configured_court:
            logger.warning(
                f"Agreement arbitrator {arbitrator_address} differs from configured court {configured_court}"
            )
        return await self._gateway.resolve(ContractRole.ARBITRATOR, arbitrator_address)

    # --- Reads ---

    async def setting(self) -> Dict[str, Any]:
        agreement = await self.agreement()
        setting_id = await self._gateway.call(agreement, "getCurrentSettingId")
        return await self._gateway.call(agreement, "getSetting", setting_id)

    async def dispute_fees(self) -> DisputeFees:
        arbitrator = await self.arbitrator()
        fees = await self._gateway.call(arbitrator, "getDisputeFees")
        fee_token = await self._gateway.resolve(ContractRole.ERC20, fees["feeToken"])
        return DisputeFees(fee_token=fee_token, fee_amount=fees["feeAmount"])

    async def collateral_requirement(self) -> CollateralRequirement:
        agreement = await self.agreement()
        voting = await self.voting()
        info = await self._gateway.call(agreement, "getDisputableInfo", voting.address)
        requirement = await self._gateway.call(
            agreement, "getCollateralRequirement", voting.address, info["currentCollateralRequirementId"]
        )
        collateral_token = await self._gateway.resolve(ContractRole.ERC20, requirement["collateralToken"])
        return CollateralRequirement(
            collateral_token=collateral_token,
            action_amount=requirement["actionAmount"],
            challenge_amount=requirement["challengeAmount"],
            challenge_duration=requirement["challengeDuration"],
        )

    async def vote_action_id(self, vote_id: int) -> int:
        voting = await self.voting()
        vote = await self._gateway.call(voting, "getVote", vote_id)
        return vote["actionId"]

    # --- Agreement ---

    async def sign_agreement(self, signer: str) -> None:
        agreement = await self.agreement()
        signer_info = await self._gateway.call(agreement, "getSigner", signer)
        if signer_info["mustSign"]:
            logger.info(f"Signing the agreement for {signer}...")
            current_setting_id = await self._gateway.call(agreement, "getCurrentSettingId")
            await self._gateway.call(agreement, "sign", current_setting_id, sender=signer)
            logger.info("Agreement signed!")
        else:
            logger.info("Signer is up to date!")

        logger.info("Allowing Agreement as a lock manager...")
        requirement = await self.collateral_requirement()
        staking = await self.staking_pool(requirement.collateral_token, signer)
        lock = await self._gateway.call(staking, "getLock", signer, agreement.address)
        if lock["allowance"] == 0:
            await self._gateway.call(
                staking, "allowManager", agreement.address, MAX_UINT192, EMPTY_BYTES, sender=signer
            )
            logger.info("Agreement allowed!")
        else:
            logger.info("Agreement already allowed as a lock manager!")

    # --- Voting ---

    async def cast_vote(self, vote_id: int, support: Union[bool, str], voter: str) -> Any:
        supports = parse_support(support)
        logger.info(f"Voting {'yes' if supports else 'no'} on vote #{vote_id}...")
        voting = await self.voting()
        return await self._gateway.call(voting, "vote", vote_id, supports, sender=voter)

    async def set_representative(self, representative: str, voter: str) -> Any:
        logger.info(f"Setting representative {representative}...")
        voting = await self.voting()
        return await self._gateway.call(voting, "setRepresentative", representative, sender=voter)

    async def delegate_vote(
        self, vote_id: int, support: Union[bool, str], voters: List[str], representative: str
    ) -> Any:
        supports = parse_support(support)
        logger.info(f"Delegate voting on vote #{vote_id} for {len(voters)} voter(s)...")
        voting = await self.voting()
        return await self._gateway.call(
            voting, "voteOnBehalfOf", vote_id, supports, list(voters), sender=representative
        )

    async def execute_vote(self, vote_id: int, script: str, sender: str) -> Any:
        logger.info(f"Executing vote #{vote_id}...")
        voting = await self.voting()
        return await self._gateway.call(voting, "executeVote", vote_id, script, sender=sender)

    # --- Proposals ---

    async def submit_proposal(self, script: str, justification: str, submitter: str) -> int:
        requirement = await self.collateral_requirement()

        if requirement.action_amount > 0:
            logger.info("Staking action collateral...")
            staking = await self.staking_pool(requirement.collateral_token, submitter)
            await self._allowance_manager.ensure_allowance(
                requirement.collateral_token, submitter, staking.address, requirement.action_amount
            )
            await self._gateway.call(staking, "stake", requirement.action_amount, EMPTY_BYTES, sender=submitter)

        logger.info("Creating proposal...")
        voting = await self.voting()
        context = await self._document_loader.resolve_content(justification, submitter)
        receipt = await self._gateway.call(voting, "newVote", script, context, sender=submitter)
        vote_id = self._gateway.get_event_argument(voting, receipt, "StartVote", "voteId")
        logger.info(f"Created vote with proposal ID #{vote_id}!")
        if script != EMPTY_CALLS_SCRIPT:
            logger.info(f"Remember script submitted for future execution: {script}")
        return vote_id

    async def new_poll(self, question: str, submitter: str) -> int:
        logger.info("Creating poll...")
        return await self.submit_proposal(EMPTY_CALLS_SCRIPT, question, submitter)

    async def new_token_transfer(
        self, token: str, recipient: str, amount: int, justification: str, submitter: str
    ) -> int:
        validate_amount(amount)
        logger.info("Creating finance transfer proposal...")
        agent = await self.agent()
        script = encode_token_transfer(agent.address, token, recipient, amount)
        return await self.submit_proposal(script, justification, submitter)

    async def upgrade_app(self, app_id: str, base: str, justification: str, submitter: str) -> int:
        logger.info(f"Creating a proposal to upgrade app {app_id} to base address {base}...")
        dao = await self.dao()
        script = encode_app_upgrade(dao.address, app_id, base)
        return await self.submit_proposal(script, justification, submitter)

    async def change_agreement(self, raw_content: str, justification: str, submitter: str) -> int:
        logger.info("Creating a proposal to change the agreement version...")
        agreement = await self.agreement()
        setting = await self.setting()
        content = await self._document_loader.load_agreement(raw_content, submitter)
        script = encode_agreement_change(
            agreement.address,
            setting["arbitrator"],
            not is_zero_address(setting["aragonAppFeesCashier"]),
            setting["title"],
            content,
        )
        return await self.submit_proposal(script, justification, submitter)

    async def change_voting_support(self, support_required_pct: int, justification: str, submitter: str) -> int:
        validate_amount(support_required_pct, "support")
        logger.info("Creating a proposal to change the voting required support...")
        voting = await self.voting()
        script = encode_voting_support_change(voting.address, support_required_pct)
        return await self.submit_proposal(script, justification, submitter)

    async def change_court_settings(self, from_term_id: int, justification: str, submitter: str) -> int:
        court_config = self.network_config.court
        if court_config is None:
            raise ConfigNotFound(self.network_config.name, "no court config")

        logger.info("Submitting proposal to change Aragon Court config...")
        agent = await self.agent()
        setting = await self.setting()
        script = encode_court_config_change(agent.address, setting["arbitrator"], court_config, from_term_id)
        return await self.submit_proposal(script, justification, submitter)

    # --- Disputes ---

    async def challenge(self, vote_id: int, settlement_offer: int, justification: str, challenger: str) -> int:
        validate_amount(settlement_offer, "settlement offer")
        logger.info("Approving dispute fees and challenge collateral...")
        agreement = await self.agreement()
        fees = await self.dispute_fees()
        requirement = await self.collateral_requirement()
        await self._allowance_manager.ensure_allowance(
            requirement.collateral_token,
            challenger,
            agreement.address,
            requirement.challenge_amount + fees.fee_amount,
        )

        logger.info("Challenging proposal...")
        action_id = await self.vote_action_id(vote_id)
        context = await self._document_loader.resolve_content(justification, challenger)
        receipt = await self._gateway.call(
            agreement, "challengeAction", action_id, settlement_offer, True, context, sender=challenger
        )
        challenge_id = self._gateway.get_event_argument(agreement, receipt, "ActionChallenged", "challengeId")
        logger.info(f"Challenged proposal #{vote_id} (challenge #{challenge_id})")
        return challenge_id

    async def dispute(self, vote_id: int, submitter: str) -> int:
        logger.info("Approving dispute fees...")
        agreement = await self.agreement()
        fees = await self.dispute_fees()
        await self._allowance_manager.ensure_allowance(fees.fee_token, submitter, agreement.address, fees.fee_amount)

        logger.info("Paying subscription fees...")
        await self._pay_subscription_fees(agreement, submitter)

        logger.info("Disputing action...")
        action_id = await self.vote_action_id(vote_id)
        receipt = await self._gateway.call(agreement, "disputeAction", action_id, True, sender=submitter)
        challenge_id = self._gateway.get_event_argument(agreement, receipt, "ActionDisputed", "challengeId")
        challenge = await self._gateway.call(agreement, "getChallenge", challenge_id)
        dispute_id = challenge["disputeId"]
        logger.info(f"Disputed proposal #{vote_id} (dispute #{dispute_id})!")
        return dispute_id

    async def _pay_subscription_fees(self, agreement: ContractHandle, submitter: str) -> None:
        arbitrator = await self.arbitrator()
        subscription_fees = await self._gateway.call(arbitrator, "getSubscriptionFees", agreement.address)
        if subscription_fees["feeAmount"] <= 0:
            logger.info("No subscription fees owed")
            return

        subscriptions_address = subscription_fees["recipient"]
        fee_token = await self._gateway.resolve(ContractRole.ERC20, subscription_fees["feeToken"])
        await self._allowance_manager.ensure_allowance(
            fee_token, submitter, subscriptions_address, subscription_fees["feeAmount"]
        )

        subscriptions = await self._gateway.resolve(ContractRole.COURT_SUBSCRIPTIONS, subscriptions_address)
        subscriber = await self._gateway.call(subscriptions, "getSubscriber", agreement.address)
        owed = await self._gateway.call(subscriptions, "getOwedFeesDetails", agreement.address)
        periods = owed_subscription_periods(subscriber["lastPaymentPeriodId"], owed["newLastPeriodId"])
        logger.info(f"Paying {periods} subscription period(s)...")
        await self._gateway.call(subscriptions, "payFees", agreement.address, periods, sender=submitter)

    async def settle(self, vote_id: int, settler: str) -> Any:
        logger.info("Settling action...")
        action_id = await self.vote_action_id(vote_id)
        agreement = await self.agreement()
        receipt = await self._gateway.call(agreement, "settleAction", action_id, sender=settler)
        logger.info(f"Settled proposal #{vote_id}")
        return receipt
