from dataclasses import dataclass, field
from typing import Any, Optional

from web3 import AsyncWeb3
from web3.exceptions import ContractLogicError, TimeExhausted, Web3Exception
from web3.logs import DISCARD

from abi.agreement_abi import AGREEMENT_ABI
from abi.arbitrator_abi import ARBITRATOR_ABI, COURT_SUBSCRIPTIONS_ABI
from abi.dao_governance_abi import AGENT_ABI, KERNEL_ABI
from abi.disputable_voting_abi import DISPUTABLE_VOTING_ABI
from abi.erc20_abi import ERC20_ABI
from abi.staking_abi import STAKING_ABI, STAKING_FACTORY_ABI
from governance.enums.contract_role import ContractRole
from governance.exceptions import ChainCallError, ContractResolutionError
from utils.formatter_utils import is_zero_address, to_normalized_address
from utils.logger_utils import get_logger

logger = get_logger("Contract Gateway")

CONTRACT_ABIS = {
    ContractRole.KERNEL: KERNEL_ABI,
    ContractRole.AGENT: AGENT_ABI,
    ContractRole.DISPUTABLE_VOTING: DISPUTABLE_VOTING_ABI,
    ContractRole.AGREEMENT: AGREEMENT_ABI,
    ContractRole.ARBITRATOR: ARBITRATOR_ABI,
    ContractRole.ERC20: ERC20_ABI,
    ContractRole.STAKING_FACTORY: STAKING_FACTORY_ABI,
    ContractRole.STAKING: STAKING_ABI,
    ContractRole.COURT_SUBSCRIPTIONS: COURT_SUBSCRIPTIONS_ABI,
}


@dataclass(frozen=True)
class ContractHandle:
    role: ContractRole
    address: str
    contract: Any = field(default=None, compare=False, repr=False)


class ContractGateway(object):
    """
    The only component that talks to the governance contracts.
    Calls without a sender are views; calls with a sender are transactions
    that are awaited until their receipt is available.
    """

    def __init__(self, web3: AsyncWeb3):
        self._web3 = web3

    async def resolve(self, role: ContractRole, address: Optional[str]) -> ContractHandle:
        abi = CONTRACT_ABIS.get(role)
        if abi is None:
            raise ContractResolutionError(f"No ABI known for contract role '{role}'")

        checksum_address = to_normalized_address(address)
        if checksum_address is None or is_zero_address(checksum_address):
            raise ContractResolutionError(f"Invalid {role.value} address: {address}")

        try:
            code = await self._web3.eth.get_code(checksum_address)
        except Web3Exception as e:
            raise ContractResolutionError(f"Could not fetch code for {role.value} at {checksum_address}: {e}") from e

        if not code:
            raise ContractResolutionError(f"No contract deployed for {role.value} at {checksum_address}")

        logger.debug(f"Resolved {role.value} at {checksum_address}")
        contract = self._web3.eth.contract(address=checksum_address, abi=abi)
        return ContractHandle(role=role, address=checksum_address, contract=contract)

    async def call(self, handle: ContractHandle, method: str, *args, sender: Optional[str] = None) -> Any:
        try:
            function = getattr(handle.contract.functions, method)(*args)
        except AttributeError as e:
            raise ContractResolutionError(f"Method '{method}' not found on {handle.role.value}") from e
        except Web3Exception as e:
            raise ChainCallError(method, str(e)) from e

        try:
            if sender is None:
                result = await function.call()
                return self._name_outputs(function, result)

            tx_hash = await function.transact({"from": sender})
            receipt = await self._web3.eth.wait_for_transaction_receipt(tx_hash)
        except ContractLogicError as e:
            raise ChainCallError(method, e.message or str(e)) from e
        except (TimeExhausted, Web3Exception) as e:
            raise ChainCallError(method, str(e)) from e

        if receipt["status"] == 0:
            raise ChainCallError(method, f"transaction {_to_hex(tx_hash)} reverted")
        logger.debug(f"{handle.role.value}.{method} mined in block {receipt.get('blockNumber')}")
        return receipt

    def get_event_argument(self, handle: ContractHandle, receipt: Any, event_name: str, argument: str) -> Any:
        """
        Returns an argument of the first `event_name` log in the receipt, decoded with the handle's ABI.
        """
        event = getattr(handle.contract.events, event_name)()
        logs = event.process_receipt(receipt, errors=DISCARD)
        if not logs:
            raise ChainCallError(event_name, "event not found in transaction receipt")
        return logs[0]["args"][argument]

    @staticmethod
    def _name_outputs(function: Any, result: Any) -> Any:
        # Multi-value returns come back positionally; key them by the ABI output names
        outputs = function.abi.get("outputs", [])
        if len(outputs) <= 1:
            return result
        return {output["name"]: value for output, value in zip(outputs, result)}


def _to_hex(value: Any) -> str:
    return value.hex() if isinstance(value, (bytes, bytearray)) else str(value)
