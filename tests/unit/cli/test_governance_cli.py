import pytest
from click.testing import CliRunner
from unittest.mock import AsyncMock, MagicMock, patch

from cli import cli
from config.config_store import ConfigStore
from config.configs import configs
from governance.exceptions import InvalidSupportValue
from governance.orchestrator import GovernanceOrchestrator

SENDER = "0x" + "01" * 20


@pytest.fixture
def mock_orchestrator():
    with patch("cli.common_options.build_orchestrator") as mock_build:
        orchestrator = MagicMock()
        orchestrator.cast_vote = AsyncMock(return_value={"status": 1})
        orchestrator.delegate_vote = AsyncMock(return_value={"status": 1})
        orchestrator.dispute = AsyncMock(return_value=42)
        mock_build.return_value = (orchestrator, None)
        yield mock_build, orchestrator


def test_vote_forwards_arguments(mock_orchestrator):
    mock_build, orchestrator = mock_orchestrator

    result = CliRunner().invoke(cli, ["vote", "-v", "3", "-s", "true", "--from", SENDER, "-n", "rinkeby"])

    assert result.exit_code == 0, result.output
    orchestrator.cast_vote.assert_awaited_once_with(3, "true", SENDER)
    assert mock_build.call_args.args[0] == "rinkeby"


def test_delegate_vote_splits_voters(mock_orchestrator):
    _, orchestrator = mock_orchestrator
    voters = "0x" + "02" * 20 + ", 0x" + "03" * 20

    result = CliRunner().invoke(
        cli, ["delegate_vote", "-v", "3", "-s", "false", "--voters", voters, "--from", SENDER]
    )

    assert result.exit_code == 0, result.output
    orchestrator.delegate_vote.assert_awaited_once_with(3, "false", ["0x" + "02" * 20, "0x" + "03" * 20], SENDER)


def test_governance_errors_exit_non_zero(mock_orchestrator):
    _, orchestrator = mock_orchestrator
    orchestrator.cast_vote.side_effect = InvalidSupportValue("yes")

    result = CliRunner().invoke(cli, ["vote", "-v", "3", "-s", "yes", "--from", SENDER])

    assert result.exit_code == 1
    assert "Support value 'yes' not valid" in result.output


def test_missing_sender_is_a_usage_error(mock_orchestrator):
    _, orchestrator = mock_orchestrator

    result = CliRunner().invoke(cli, ["dispute", "-v", "1", "--from", ""])

    assert result.exit_code == 2
    orchestrator.dispute.assert_not_called()


def test_show_network_config_prints_table():
    result = CliRunner().invoke(cli, ["show_network_config", "-n", "rinkeby"])

    assert result.exit_code == 0, result.output
    assert "evidence_terms" in result.output


def test_show_network_config_unknown_network():
    result = CliRunner().invoke(cli, ["show_network_config", "-n", "unknown"])

    assert result.exit_code == 1
    assert "unknown" in result.output


def test_negative_transfer_amount_exits_with_message():
    orchestrator = GovernanceOrchestrator(
        network_config=ConfigStore().get("rinkeby"),
        gateway=MagicMock(),
        allowance_manager=MagicMock(),
        document_loader=MagicMock(),
    )

    with patch("cli.common_options.build_orchestrator", return_value=(orchestrator, SENDER)):
        result = CliRunner().invoke(
            cli,
            ["new_token_transfer", "-t", "0x" + "70" * 20, "-r", SENDER, "-a", "-1", "-j", "Fund grant"],
        )

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "amount must be greater than or equal to 0, got -1" in result.output
    orchestrator._gateway.resolve.assert_not_called()


def test_unsupported_provider_uri_exits_with_message():
    result = CliRunner().invoke(cli, ["vote", "-v", "3", "-s", "true", "--from", SENDER, "-p", "ws://localhost:8546"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Unknown uri scheme ws://localhost:8546" in result.output


def test_version_uses_configured_app_name():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert result.output.startswith(f"{configs.app.name}, version 0.1.0")
