import pytest
from unittest.mock import AsyncMock, MagicMock, call

from governance.allowance_manager import AllowanceManager
from governance.contract_gateway import ContractHandle
from governance.enums.contract_role import ContractRole

TOKEN = ContractHandle(ContractRole.ERC20, "0x" + "aa" * 20)
OWNER = "0x" + "01" * 20
SPENDER = "0x" + "02" * 20


def _gateway_with_allowance(current):
    gateway = MagicMock()

    async def fake_call(handle, method, *args, sender=None):
        if method == "allowance":
            return current
        return {"status": 1}

    gateway.call = AsyncMock(side_effect=fake_call)
    return gateway


def _approvals(gateway):
    return [c for c in gateway.call.call_args_list if c.args[1] == "approve"]


@pytest.mark.asyncio
@pytest.mark.parametrize("current,required", [(100, 100), (150, 100), (1, 0)])
async def test_sufficient_allowance_sends_nothing(current, required):
    gateway = _gateway_with_allowance(current)
    manager = AllowanceManager(gateway)

    sent = await manager.ensure_allowance(TOKEN, OWNER, SPENDER, required)

    assert sent == 0
    assert _approvals(gateway) == []
    gateway.call.assert_called_once_with(TOKEN, "allowance", OWNER, SPENDER)


@pytest.mark.asyncio
async def test_partial_allowance_is_reset_then_raised():
    gateway = _gateway_with_allowance(30)
    manager = AllowanceManager(gateway)

    sent = await manager.ensure_allowance(TOKEN, OWNER, SPENDER, 100)

    assert sent == 2
    assert _approvals(gateway) == [
        call(TOKEN, "approve", SPENDER, 0, sender=OWNER),
        call(TOKEN, "approve", SPENDER, 130, sender=OWNER),
    ]


@pytest.mark.asyncio
async def test_zero_allowance_sends_single_approval():
    gateway = _gateway_with_allowance(0)
    manager = AllowanceManager(gateway)

    sent = await manager.ensure_allowance(TOKEN, OWNER, SPENDER, 100)

    assert sent == 1
    assert _approvals(gateway) == [call(TOKEN, "approve", SPENDER, 100, sender=OWNER)]


@pytest.mark.asyncio
async def test_failed_reset_aborts_before_raising():
    gateway = _gateway_with_allowance(30)

    async def failing_call(handle, method, *args, sender=None):
        if method == "allowance":
            return 30
        raise RuntimeError("approve reverted")

    gateway.call = AsyncMock(side_effect=failing_call)
    manager = AllowanceManager(gateway)

    with pytest.raises(RuntimeError):
        await manager.ensure_allowance(TOKEN, OWNER, SPENDER, 100)

    assert len(_approvals(gateway)) == 1
