from typing import Awaitable, Protocol

from governance.exceptions import FileNotFound, GovernanceError, InvalidDocument, UploadFailure
from utils.file_utils import resolve_existing_file
from utils.formatter_utils import utf8_to_hex
from utils.logger_utils import get_logger

logger = get_logger("Document Loader")

DOCUMENT_EXTENSIONS = (".md",)


class ContentUploader(Protocol):
    def upload(self, file_path: str, actor_address: str) -> Awaitable[str]:
        ...


class DocumentLoader(object):
    """
    Turns operator input into the `bytes` content reference stored on chain.

    Inputs naming a markdown document are uploaded and referenced as `ipfs:<CID>`;
    anything else is sent as plain text. Both forms are hex-encoded.
    """

    def __init__(self, uploader: ContentUploader):
        self._uploader = uploader

    async def resolve_content(self, raw_content: str, actor_address: str) -> str:
        if not is_document_path(raw_content):
            logger.info(f"Sending justification as plain text: {raw_content}")
            return utf8_to_hex(raw_content)

        logger.info(f"Uploading justification file to IPFS: {raw_content}")
        cid = await self._upload(raw_content, actor_address, "justification")
        logger.info(f"Uploaded justification to IPFS {cid}")
        return utf8_to_hex(f"ipfs:{cid}")

    async def load_agreement(self, raw_content: str, actor_address: str) -> str:
        if not is_document_path(raw_content):
            raise InvalidDocument(f"Cannot upload a non-markdown agreement file: {raw_content}")

        logger.info(f"Uploading agreement file to IPFS: {raw_content}")
        cid = await self._upload(raw_content, actor_address, "agreement")
        logger.info(f"Uploaded agreement file to IPFS {cid}")
        return utf8_to_hex(f"ipfs:{cid}")

    async def _upload(self, raw_path: str, actor_address: str, kind: str) -> str:
        file_path = resolve_existing_file(raw_path)
        if file_path is None:
            raise FileNotFound(f"Could not load {kind} file path {raw_path}")

        try:
            return await self._uploader.upload(file_path, actor_address)
        except GovernanceError:
            raise
        except Exception as e:
            raise UploadFailure(f"Could not upload {kind} file {file_path}: {e}") from e


def is_document_path(raw_content: str) -> bool:
    return raw_content.lower().endswith(DOCUMENT_EXTENSIONS)
