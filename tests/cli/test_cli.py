#
# tests/cli/test_cli.py
#
"""
Tests for the testcommander command line.
"""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from testcommander.cli.main import cli
from testcommander.exceptions import DiscoveryError
from testcommander.protocols import DiscoveryResult


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "solution"
    root.mkdir()
    return root


def _invoke(*args: str, input: str | None = None):
    return CliRunner().invoke(cli, list(args), input=input)


class TestMainCLI:
    def test_cli_help(self) -> None:
        result = _invoke("--help")

        assert result.exit_code == 0
        for command in ("discover", "run", "run-all", "session", "config"):
            assert command in result.output

    def test_cli_version(self) -> None:
        result = _invoke("--version")

        assert result.exit_code == 0
        assert "version" in result.output.lower()

    def test_invalid_log_level(self) -> None:
        result = _invoke("--log-level", "INVALID", "run", "--help")
        assert result.exit_code != 0


class TestRunCommands:
    def test_run_single_test_echo(self, project: Path) -> None:
        result = _invoke(
            "run", "Ns.Tests.Adds(1,2)",
            "--executor", "echo",
            "-w", str(project),
            "-c", str(project / "absent.conf"),
        )

        assert result.exit_code == 0, result.output
        assert "dotnet test --filter FullyQualifiedName~Ns.Tests.Adds\n" in result.output

    def test_run_without_name_runs_all(self, project: Path) -> None:
        result = _invoke("run", "--skip-build", "--executor", "echo", "-w", str(project), "-c", str(project / "x.conf"))

        assert result.exit_code == 0, result.output
        assert "dotnet test --no-build\n" in result.output

    def test_config_file_options_are_applied(self, project: Path) -> None:
        config = project / "testcommander.conf"
        config.write_text('[dotnet]\nbuild = false\nrestore = false\nexecutor = "echo"\n')

        result = _invoke("run-all", "-w", str(project), "-c", str(config))

        assert result.exit_code == 0, result.output
        assert "dotnet test --no-build --no-restore\n" in result.output

    def test_results_integration_adds_logger(self, project: Path) -> None:
        config = project / "testcommander.conf"
        config.write_text("[global]\nresults_integration = true\n")

        result = _invoke("run-all", "--executor", "echo", "-w", str(project), "-c", str(config))

        assert result.exit_code == 0, result.output
        assert '--logger "trx;LogFileName=' in result.output

    def test_invalid_config_exits_with_error(self, project: Path) -> None:
        config = project / "testcommander.conf"
        config.write_text("[dotnet]\nbuild = 'maybe'\n")

        result = _invoke("run-all", "--executor", "echo", "-w", str(project), "-c", str(config))

        assert result.exit_code == 1
        assert "Configuration problem" in result.output


class TestDiscoverCommand:
    @patch("testcommander.cli.utils.DotnetTestDiscoverer")
    def test_discover_prints_names(self, mock_discoverer_cls, project: Path) -> None:
        mock_discoverer_cls.return_value.discover_tests = AsyncMock(
            return_value=DiscoveryResult(test_names=["Ns.A", "Ns.B"])
        )

        result = _invoke("discover", "-w", str(project), "-c", str(project / "x.conf"))

        assert result.exit_code == 0, result.output
        assert "Discovered 2 test(s):" in result.output
        assert "Ns.A" in result.output
        mock_discoverer_cls.return_value.discover_tests.assert_awaited_once_with(str(project), "")

    @patch("testcommander.cli.utils.DotnetTestDiscoverer")
    def test_failed_discovery_shows_empty_list(self, mock_discoverer_cls, project: Path) -> None:
        mock_discoverer_cls.return_value.discover_tests = AsyncMock(side_effect=DiscoveryError("boom"))

        result = _invoke("discover", "-w", str(project), "-c", str(project / "x.conf"))

        assert result.exit_code == 0
        assert "No tests discovered." in result.output


class TestSessionCommand:
    def test_rerun_replays_last_command(self, project: Path) -> None:
        result = _invoke(
            "session", "--executor", "echo", "-w", str(project), "-c", str(project / "x.conf"),
            input="rerun\nrun Ns.A --skip-build\nrerun\nquit\n",
        )

        assert result.exit_code == 0, result.output
        assert "Nothing to rerun yet." in result.output
        assert result.output.count("dotnet test --filter FullyQualifiedName~Ns.A --no-build\n") == 2

    def test_unknown_command(self, project: Path) -> None:
        result = _invoke(
            "session", "--executor", "echo", "-w", str(project), "-c", str(project / "x.conf"),
            input="frobnicate\nquit\n",
        )

        assert result.exit_code == 0
        assert "Unknown command 'frobnicate'" in result.output


class TestConfigCommands:
    def test_config_show(self, project: Path) -> None:
        config = project / "testcommander.conf"
        config.write_text('[dotnet]\ntest_project_path = "tests"\n')

        result = _invoke("config", "show", "-c", str(config))

        assert result.exit_code == 0, result.output
        assert "DotnetConfig" in result.output
        assert "'tests'" in result.output

    def test_config_show_invalid(self, project: Path) -> None:
        config = project / "testcommander.conf"
        config.write_text("[unknown]\n")

        result = _invoke("config", "show", "-c", str(config))

        assert result.exit_code == 1
        assert "Unknown section" in result.output
