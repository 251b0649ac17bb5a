from typing import Optional, Tuple
from urllib.parse import urlparse

from eth_account import Account
from web3 import AsyncHTTPProvider, AsyncIPCProvider, AsyncWeb3
from web3.middleware import ExtraDataToPOAMiddleware, SignAndSendRawMiddlewareBuilder
from web3.providers.async_base import AsyncBaseProvider

from governance.exceptions import InvalidArgument
from utils.logger_utils import get_logger

logger = get_logger("RPC Provider Utils")

DEFAULT_TIMEOUT = 60


def get_async_provider_from_uri(uri_string: str, timeout: int = DEFAULT_TIMEOUT) -> AsyncBaseProvider:
    """
    Creates an asynchronous Web3 provider based on the URI scheme.
    Supports HTTP/HTTPS and IPC sockets.
    """
    uri = urlparse(uri_string)

    if uri.scheme == "http" or uri.scheme == "https":
        request_kwargs = {"timeout": timeout}
        return AsyncHTTPProvider(uri_string, request_kwargs=request_kwargs)
    elif uri.scheme == "file" or uri_string.endswith(".ipc"):
        return AsyncIPCProvider(uri.path if uri.scheme == "file" else uri_string, request_timeout=timeout)
    else:
        raise InvalidArgument(f"Unknown uri scheme {uri_string}. Supported: http, https, file (ipc)")


def build_async_web3(
    provider_uri: str, private_key: Optional[str] = None, timeout: int = DEFAULT_TIMEOUT
) -> Tuple[AsyncWeb3, Optional[str]]:
    """
    Builds an AsyncWeb3 client for sending governance transactions.

    Test networks such as Rinkeby are proof-of-authority chains, so the extra-data
    middleware is always injected. With a private key, transactions are signed locally.

    Returns:
        The client and the address of the local signing account (None without a key).
    """
    w3 = AsyncWeb3(get_async_provider_from_uri(provider_uri, timeout=timeout))
    w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

    if not private_key:
        return w3, None

    account = Account.from_key(private_key)
    w3.middleware_onion.inject(SignAndSendRawMiddlewareBuilder.build(account), layer=0)
    w3.eth.default_account = account.address
    logger.info(f"Signing transactions locally as {account.address}")
    return w3, account.address
