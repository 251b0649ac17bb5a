import pytest
from unittest.mock import AsyncMock, MagicMock
from web3.exceptions import ContractLogicError

from governance.contract_gateway import ContractGateway, ContractHandle
from governance.enums.contract_role import ContractRole
from governance.exceptions import ChainCallError, ContractResolutionError

AGREEMENT_ADDRESS = "0x" + "ab" * 20
SENDER = "0x" + "01" * 20


@pytest.fixture
def mock_web3():
    web3 = MagicMock()
    web3.eth.get_code = AsyncMock(return_value=b"\x60\x80\x60\x40")
    web3.eth.wait_for_transaction_receipt = AsyncMock(return_value={"status": 1, "blockNumber": 10})
    return web3


@pytest.fixture
def contract():
    return MagicMock()


@pytest.fixture
def handle(contract):
    return ContractHandle(ContractRole.AGREEMENT, AGREEMENT_ADDRESS, contract)


def _function(outputs, call_result=None):
    function = MagicMock()
    function.abi = {"outputs": [{"name": name} for name in outputs]}
    function.call = AsyncMock(return_value=call_result)
    function.transact = AsyncMock(return_value=b"\x12\x34")
    return function


@pytest.mark.asyncio
async def test_resolve_binds_checksummed_address(mock_web3):
    gateway = ContractGateway(mock_web3)

    handle = await gateway.resolve(ContractRole.AGREEMENT, AGREEMENT_ADDRESS)

    assert handle.role == ContractRole.AGREEMENT
    assert handle.address.lower() == AGREEMENT_ADDRESS
    mock_web3.eth.get_code.assert_awaited_once_with(handle.address)
    mock_web3.eth.contract.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("address", [None, "not-an-address", "0x" + "00" * 20])
async def test_resolve_rejects_invalid_addresses(mock_web3, address):
    gateway = ContractGateway(mock_web3)

    with pytest.raises(ContractResolutionError):
        await gateway.resolve(ContractRole.DISPUTABLE_VOTING, address)
    mock_web3.eth.get_code.assert_not_called()


@pytest.mark.asyncio
async def test_resolve_rejects_address_without_code(mock_web3):
    mock_web3.eth.get_code.return_value = b""
    gateway = ContractGateway(mock_web3)

    with pytest.raises(ContractResolutionError, match="No contract deployed"):
        await gateway.resolve(ContractRole.AGREEMENT, AGREEMENT_ADDRESS)


@pytest.mark.asyncio
async def test_view_call_names_multiple_outputs(mock_web3, contract, handle):
    contract.functions.getSigner = MagicMock(return_value=_function(["lastSettingIdSigned", "mustSign"], [3, True]))
    gateway = ContractGateway(mock_web3)

    result = await gateway.call(handle, "getSigner", SENDER)

    assert result == {"lastSettingIdSigned": 3, "mustSign": True}
    contract.functions.getSigner.assert_called_once_with(SENDER)


@pytest.mark.asyncio
async def test_view_call_returns_single_output_as_is(mock_web3, contract, handle):
    contract.functions.getCurrentSettingId = MagicMock(return_value=_function([""], 2))
    gateway = ContractGateway(mock_web3)

    assert await gateway.call(handle, "getCurrentSettingId") == 2


@pytest.mark.asyncio
async def test_transaction_waits_for_receipt(mock_web3, contract, handle):
    function = _function([])
    contract.functions.settleAction = MagicMock(return_value=function)
    gateway = ContractGateway(mock_web3)

    receipt = await gateway.call(handle, "settleAction", 7, sender=SENDER)

    assert receipt["status"] == 1
    function.transact.assert_awaited_once_with({"from": SENDER})
    mock_web3.eth.wait_for_transaction_receipt.assert_awaited_once_with(b"\x12\x34")


@pytest.mark.asyncio
async def test_revert_reason_is_wrapped(mock_web3, contract, handle):
    function = _function([])
    function.transact.side_effect = ContractLogicError("execution reverted: AGR_CANNOT_CHALLENGE_ACTION")
    contract.functions.challengeAction = MagicMock(return_value=function)
    gateway = ContractGateway(mock_web3)

    with pytest.raises(ChainCallError) as exc_info:
        await gateway.call(handle, "challengeAction", 1, 0, True, b"", sender=SENDER)

    assert exc_info.value.method == "challengeAction"
    assert "AGR_CANNOT_CHALLENGE_ACTION" in str(exc_info.value)


@pytest.mark.asyncio
async def test_failed_receipt_raises(mock_web3, contract, handle):
    contract.functions.sign = MagicMock(return_value=_function([]))
    mock_web3.eth.wait_for_transaction_receipt.return_value = {"status": 0}
    gateway = ContractGateway(mock_web3)

    with pytest.raises(ChainCallError, match="reverted"):
        await gateway.call(handle, "sign", 1, sender=SENDER)


@pytest.mark.asyncio
async def test_unknown_method_raises_resolution_error(mock_web3, handle):
    handle.contract.functions = MagicMock(spec=[])
    gateway = ContractGateway(mock_web3)

    with pytest.raises(ContractResolutionError):
        await gateway.call(handle, "missingMethod")


def test_event_argument_is_decoded_from_receipt(mock_web3, contract, handle):
    event = MagicMock()
    event.process_receipt.return_value = [{"args": {"actionId": 4, "challengeId": 9}}]
    contract.events.ActionDisputed = MagicMock(return_value=event)
    gateway = ContractGateway(mock_web3)

    assert gateway.get_event_argument(handle, {"logs": []}, "ActionDisputed", "challengeId") == 9


def test_missing_event_raises(mock_web3, contract, handle):
    event = MagicMock()
    event.process_receipt.return_value = []
    contract.events.StartVote = MagicMock(return_value=event)
    gateway = ContractGateway(mock_web3)

    with pytest.raises(ChainCallError, match="event not found"):
        gateway.get_event_argument(handle, {"logs": []}, "StartVote", "voteId")
