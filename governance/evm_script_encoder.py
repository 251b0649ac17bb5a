from typing import Iterable, Tuple

from eth_utils import to_bytes
from web3 import Web3

from abi.agreement_abi import AGREEMENT_ABI
from abi.arbitrator_abi import ARBITRATOR_ABI
from abi.dao_governance_abi import AGENT_ABI, KERNEL_ABI
from abi.disputable_voting_abi import DISPUTABLE_VOTING_ABI
from config.network_config import CourtConfig
from governance.exceptions import InvalidArgument
from utils.formatter_utils import to_normalized_address

# Aragon CallsScript executor
CALLS_SCRIPT_ID = "0x00000001"
EMPTY_CALLS_SCRIPT = CALLS_SCRIPT_ID

# keccak256("base"), the kernel namespace holding app base implementations
APP_BASES_NAMESPACE = Web3.keccak(text="base")

_w3 = Web3()
_agent = _w3.eth.contract(abi=AGENT_ABI)
_kernel = _w3.eth.contract(abi=KERNEL_ABI)
_agreement = _w3.eth.contract(abi=AGREEMENT_ABI)
_voting = _w3.eth.contract(abi=DISPUTABLE_VOTING_ABI)
_court = _w3.eth.contract(abi=ARBITRATOR_ABI)


def encode_calls_script(actions: Iterable[Tuple[str, str]]) -> str:
    """
    Encodes (target, calldata) pairs as a CallsScript:
    the executor id, then per call the 20-byte target, the 4-byte calldata length and the calldata.
    """
    script = to_bytes(hexstr=CALLS_SCRIPT_ID)
    for target, calldata in actions:
        data = to_bytes(hexstr=calldata)
        script += to_bytes(hexstr=_checksum(target)) + len(data).to_bytes(4, "big") + data
    return "0x" + script.hex()


def encode_token_transfer(agent: str, token: str, recipient: str, amount: int) -> str:
    calldata = _agent.encode_abi("transfer", args=[_checksum(token), _checksum(recipient), amount])
    return encode_calls_script([(agent, calldata)])


def encode_app_upgrade(dao: str, app_id: str, base: str) -> str:
    calldata = _kernel.encode_abi("setApp", args=[APP_BASES_NAMESPACE, to_bytes(hexstr=app_id), _checksum(base)])
    return encode_calls_script([(dao, calldata)])


def encode_agreement_change(agreement: str, arbitrator: str, set_app_fees_cashier: bool, title: str, content: str) -> str:
    calldata = _agreement.encode_abi(
        "changeSetting", args=[_checksum(arbitrator), set_app_fees_cashier, title, to_bytes(hexstr=content)]
    )
    return encode_calls_script([(agreement, calldata)])


def encode_voting_support_change(voting: str, support_required_pct: int) -> str:
    calldata = _voting.encode_abi("changeSupportRequiredPct", args=[support_required_pct])
    return encode_calls_script([(voting, calldata)])


def encode_court_config_change(agent: str, court: str, court_config: CourtConfig, from_term_id: int) -> str:
    """
    The court config governor is the DAO agent, so the setConfig call is wrapped in Agent.execute.
    """
    set_config = _court.encode_abi(
        "setConfig",
        args=[
            from_term_id,
            _checksum(court_config.fee_token),
            [court_config.juror_fee, court_config.draft_fee, court_config.settle_fee],
            [
                court_config.evidence_terms,
                court_config.commit_terms,
                court_config.reveal_terms,
                court_config.appeal_terms,
                court_config.appeal_confirm_terms,
            ],
            [court_config.penalty_pct, court_config.final_round_reduction],
            [
                court_config.first_round_jurors_number,
                court_config.appeal_step_factor,
                court_config.max_regular_appeal_rounds,
                court_config.final_round_lock_terms,
            ],
            [court_config.appeal_collateral_factor, court_config.appeal_confirm_collateral_factor],
            court_config.min_active_balance,
        ],
    )
    calldata = _agent.encode_abi("execute", args=[_checksum(court), 0, to_bytes(hexstr=set_config)])
    return encode_calls_script([(agent, calldata)])


def _checksum(address: str) -> str:
    checksum_address = to_normalized_address(address)
    if checksum_address is None:
        raise InvalidArgument(f"Invalid address: {address}")
    return checksum_address
