from typing import Optional


class GovernanceError(Exception):
    """Base class for every failure raised by the governance command layer."""


class ConfigNotFound(GovernanceError, KeyError):
    def __init__(self, network: str, detail: Optional[str] = None):
        self.network = network
        message = f"No configuration found for network '{network}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    def __str__(self):
        return self.args[0]


class ContractResolutionError(GovernanceError):
    pass


class ChainCallError(GovernanceError):
    """Wraps a reverted transaction or a failed RPC call."""

    def __init__(self, method: str, reason: str):
        self.method = method
        self.reason = reason
        super().__init__(f"Call to '{method}' failed: {reason}")


class FileNotFound(GovernanceError, FileNotFoundError):
    pass


class InvalidDocument(GovernanceError, ValueError):
    pass


class UploadFailure(GovernanceError):
    pass


class InvalidSupportValue(GovernanceError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Support value '{value}' not valid, please use \"true\" or \"false\"")


class InvalidArgument(GovernanceError, ValueError):
    """An operator-supplied value such as an amount, address or provider URI is unusable."""
