import pytest

from governance.exceptions import InvalidArgument, InvalidSupportValue
from utils.file_utils import resolve_existing_file
from utils.formatter_utils import is_zero_address, to_normalized_address, utf8_to_hex
from utils.rpc_provider_utils import get_async_provider_from_uri
from utils.validation_utils import parse_support, validate_amount


@pytest.mark.parametrize("raw, expected", [("true", True), ("FALSE", False), ("True", True), (True, True), (False, False)])
def test_parse_support(raw, expected):
    assert parse_support(raw) is expected


@pytest.mark.parametrize("raw", ["yes", "1", "", 1, " true ", "true\n"])
def test_parse_support_rejects_other_values(raw):
    with pytest.raises(InvalidSupportValue):
        parse_support(raw)


def test_validate_amount():
    validate_amount(0)
    with pytest.raises(InvalidArgument, match="settlement offer"):
        validate_amount(-1, "settlement offer")


def test_utf8_to_hex():
    assert utf8_to_hex("ipfs:Qm") == "0x697066733a516d"
    assert utf8_to_hex("") == "0x"


def test_to_normalized_address():
    address = "0x52180af656a1923024d1accf1d827ab85ce48878"
    assert to_normalized_address(address).lower() == address
    assert to_normalized_address("0x1234") is None
    assert to_normalized_address(None) is None


def test_is_zero_address():
    assert is_zero_address("0x" + "00" * 20)
    assert is_zero_address(None)
    assert not is_zero_address("0x" + "00" * 19 + "01")


def test_resolve_existing_file_prefers_base_dir(tmp_path):
    (tmp_path / "agreement.md").write_text("# Agreement")

    assert resolve_existing_file("agreement.md", base_dir=str(tmp_path)) == str(tmp_path / "agreement.md")
    assert resolve_existing_file("missing.md", base_dir=str(tmp_path)) is None


@pytest.mark.parametrize("uri", ["ws://localhost:8546", "localhost:8545"])
def test_unsupported_provider_uri_is_rejected(uri):
    with pytest.raises(InvalidArgument, match="Unknown uri scheme"):
        get_async_provider_from_uri(uri)
