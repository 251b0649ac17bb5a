import json

import aiohttp
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from governance.exceptions import UploadFailure
from governance.ipfs_pinner import IpfsPinner

SUBMITTER = "0x" + "01" * 20


@pytest.fixture
def document(tmp_path):
    path = tmp_path / "proposal.md"
    path.write_text("# Proposal\n")
    return str(path)


@pytest.fixture
def mock_session():
    with patch("governance.ipfs_pinner.aiohttp.ClientSession") as mock:
        session = mock.return_value
        session.__aenter__.return_value = session
        session.__aexit__.return_value = None

        response = MagicMock()
        response.status = 200
        response.json = AsyncMock(return_value={"IpfsHash": "QmProposal", "PinSize": 12})
        response.text = AsyncMock(return_value="")
        session.post.return_value.__aenter__.return_value = response
        session.post.return_value.__aexit__.return_value = None

        yield mock, session, response


@pytest.fixture
def pinner():
    return IpfsPinner("https://api.pinata.cloud/", api_key="key", secret_api_key="secret")


@pytest.mark.asyncio
async def test_upload_returns_cid(pinner, document, mock_session):
    mock, session, _ = mock_session

    cid = await pinner.upload(document, SUBMITTER)

    assert cid == "QmProposal"
    args, kwargs = session.post.call_args
    assert args[0] == "https://api.pinata.cloud/pinning/pinFileToIPFS"
    assert isinstance(kwargs["data"], aiohttp.FormData)
    headers = mock.call_args.kwargs["headers"]
    assert headers == {"pinata_api_key": "key", "pinata_secret_api_key": "secret"}


@pytest.mark.asyncio
async def test_non_200_response_raises(pinner, document, mock_session):
    _, _, response = mock_session
    response.status = 401
    response.text.return_value = json.dumps({"error": "Invalid API key"})

    with pytest.raises(UploadFailure, match="401"):
        await pinner.upload(document, SUBMITTER)


@pytest.mark.asyncio
async def test_response_without_hash_raises(pinner, document, mock_session):
    _, _, response = mock_session
    response.json.return_value = {}

    with pytest.raises(UploadFailure, match="no IPFS hash"):
        await pinner.upload(document, SUBMITTER)


@pytest.mark.asyncio
async def test_transport_error_raises(pinner, document, mock_session):
    _, session, _ = mock_session
    session.post.side_effect = aiohttp.ClientConnectionError("connection refused")

    with pytest.raises(UploadFailure, match="connection refused"):
        await pinner.upload(document, SUBMITTER)


@pytest.mark.asyncio
async def test_missing_credentials_raise_before_request(document, mock_session):
    mock, _, _ = mock_session
    pinner = IpfsPinner("https://api.pinata.cloud")

    with pytest.raises(UploadFailure, match="credentials"):
        await pinner.upload(document, SUBMITTER)
    mock.assert_not_called()


@pytest.mark.asyncio
async def test_file_is_streamed_and_closed_after_upload(pinner, document, mock_session):
    with patch("governance.ipfs_pinner.aiohttp.FormData") as form_cls:
        await pinner.upload(document, SUBMITTER)

    field_name, file_object = form_cls.return_value.add_field.call_args_list[0].args
    assert field_name == "file"
    assert file_object.name == document
    assert file_object.closed


@pytest.mark.asyncio
async def test_unreadable_file_raises(pinner, tmp_path, mock_session):
    mock, _, _ = mock_session

    with pytest.raises(UploadFailure, match="Could not read"):
        await pinner.upload(str(tmp_path / "missing.md"), SUBMITTER)
    mock.assert_not_called()
