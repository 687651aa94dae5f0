import logging
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog

from testcommander.config import MappingConfigurationStore
from testcommander.protocols import DiscoveryResult
from testcommander.runtime import TestOrchestrator
from testcommander.testing import TestResultsFile


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests configure structlog globally; put it back after each test."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)


@pytest.fixture
def store() -> MappingConfigurationStore:
    return MappingConfigurationStore()


@pytest.fixture
def results_file(tmp_path: Path) -> TestResultsFile:
    return TestResultsFile(tmp_path / "Results.trx")


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def mock_executor() -> MagicMock:
    return MagicMock()


@pytest.fixture
def mock_discoverer() -> AsyncMock:
    discoverer = AsyncMock()
    discoverer.discover_tests.return_value = DiscoveryResult(test_names=["T1", "T2"])
    return discoverer


@pytest.fixture
def mock_messages() -> MagicMock:
    return MagicMock()


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def orchestrator(
    store: MappingConfigurationStore,
    workspace: Path,
    mock_executor: MagicMock,
    mock_discoverer: AsyncMock,
    results_file: TestResultsFile,
    mock_messages: MagicMock,
    mock_logger: MagicMock,
) -> TestOrchestrator:
    """Provides a TestOrchestrator wired to mocked collaborators."""
    return TestOrchestrator(
        store=store,
        workspace_root=str(workspace),
        executor=mock_executor,
        discoverer=mock_discoverer,
        results_file=results_file,
        messages=mock_messages,
        usage=MagicMock(),
        logger=mock_logger,
    )
