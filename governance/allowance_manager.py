from governance.contract_gateway import ContractGateway, ContractHandle
from utils.logger_utils import get_logger

logger = get_logger("Allowance Manager")


class AllowanceManager(object):
    def __init__(self, gateway: ContractGateway):
        self._gateway = gateway

    async def ensure_allowance(self, token: ContractHandle, owner: str, spender: str, required: int) -> int:
        """
        Makes sure `spender` may pull at least `required` tokens from `owner`.

        A nonzero allowance is reset to 0 before being raised, since some tokens reject
        changing one nonzero allowance into another. The stale allowance is added back on
        top of `required` rather than discarded.

        Returns:
            The number of approval transactions sent (0, 1 or 2).
        """
        current = await self._gateway.call(token, "allowance", owner, spender)
        if current >= required:
            logger.debug(f"Allowance of {spender} over {token.address} already covers {required}")
            return 0

        transactions = 0
        if current > 0:
            logger.info(f"Resetting allowance of {spender} from {current} to 0...")
            await self._gateway.call(token, "approve", spender, 0, sender=owner)
            transactions += 1

        new_allowance = required + current
        logger.info(f"Approving {new_allowance} tokens of {token.address} for {spender}...")
        await self._gateway.call(token, "approve", spender, new_allowance, sender=owner)
        return transactions + 1
