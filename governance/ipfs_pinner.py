import json
import os

import aiohttp

from governance.exceptions import UploadFailure
from utils.logger_utils import get_logger

logger = get_logger("IPFS Pinner")

PIN_FILE_ENDPOINT = "pinning/pinFileToIPFS"


class IpfsPinner(object):
    """
    Uploads documents to IPFS through a Pinata-compatible pinning API.
    Each upload opens its own session; there is no retry.
    """

    def __init__(self, api_url: str, api_key: str = None, secret_api_key: str = None, timeout: int = 120):
        self.base_url = api_url.rstrip("/")
        self.api_key = api_key
        self.secret_api_key = secret_api_key
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    async def upload(self, file_path: str, actor_address: str) -> str:
        """
        Pins a file and returns its CID. The uploading address is stored in the pin metadata.
        """
        if not self.api_key or not self.secret_api_key:
            raise UploadFailure("Missing pinning credentials, set PINATA_API_KEY and PINATA_SECRET_API_KEY")

        file_name = os.path.basename(file_path)
        try:
            fh = open(file_path, "rb")
        except OSError as e:
            raise UploadFailure(f"Could not read {file_path}: {e}") from e

        headers = {"pinata_api_key": self.api_key, "pinata_secret_api_key": self.secret_api_key}
        url = f"{self.base_url}/{PIN_FILE_ENDPOINT}"

        # The file object is streamed by aiohttp while the request is sent
        with fh:
            form = aiohttp.FormData()
            form.add_field("file", fh, filename=file_name, content_type="application/octet-stream")
            form.add_field(
                "pinataMetadata",
                json.dumps({"name": file_name, "keyvalues": {"uploader": actor_address}}),
                content_type="application/json",
            )
            body = await self._post(url, headers, form, file_name)

        cid = body.get("IpfsHash")
        if not cid:
            raise UploadFailure(f"Pinning service returned no IPFS hash for {file_name}")

        logger.debug(f"Pinned {file_name} as {cid} ({body.get('PinSize')} bytes)")
        return cid

    async def _post(self, url: str, headers: dict, form: aiohttp.FormData, file_name: str) -> dict:
        try:
            async with aiohttp.ClientSession(timeout=self.timeout, headers=headers) as session:
                async with session.post(url, data=form) as response:
                    if response.status != 200:
                        reason = await response.text()
                        raise UploadFailure(f"Pinning {file_name} failed. Status: {response.status}, Reason: {reason}")
                    body = await response.json()
        except aiohttp.ClientError as e:
            raise UploadFailure(f"Error uploading {file_name}: {e}") from e
        return body
