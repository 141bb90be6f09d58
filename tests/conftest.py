"""Pytest configuration and fixtures."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from dd_logs_import.discovery.client import DatadogApis


def make_pipeline(pipeline_id: str, name: str, is_read_only: bool) -> SimpleNamespace:
    """A stand-in for datadog_api_client's LogsPipeline model."""
    return SimpleNamespace(id=pipeline_id, name=name, is_read_only=is_read_only)


def make_index(name: str) -> SimpleNamespace:
    """A stand-in for datadog_api_client's LogsIndex model."""
    return SimpleNamespace(name=name)


@pytest.fixture
def sample_pipelines() -> list[SimpleNamespace]:
    """A mix of user-defined and integration pipelines."""
    return [
        make_pipeline("abc-123", "Checkout service", False),
        make_pipeline("def-456", "Nginx", True),
        make_pipeline("ghi-789", "Payments", False),
        make_pipeline("jkl-012", "Python", True),
    ]


@pytest.fixture
def sample_indexes() -> list[SimpleNamespace]:
    """Sample logs indexes."""
    return [make_index("main"), make_index("archive"), make_index("debug")]


@pytest.fixture
def mock_pipelines_api(sample_pipelines) -> MagicMock:
    """Mock LogsPipelinesApi backed by sample_pipelines."""
    api = MagicMock()
    by_id = {p.id: p for p in sample_pipelines}
    api.list_logs_pipelines.return_value = sample_pipelines
    api.get_logs_pipeline.side_effect = lambda pipeline_id: by_id[pipeline_id]
    return api


@pytest.fixture
def mock_indexes_api(sample_indexes) -> MagicMock:
    """Mock LogsIndexesApi backed by sample_indexes."""
    api = MagicMock()
    by_name = {i.name: i for i in sample_indexes}
    api.list_log_indexes.return_value = SimpleNamespace(indexes=sample_indexes)
    api.get_logs_index.side_effect = lambda name: by_name[name]
    return api


@pytest.fixture
def mock_apis(mock_pipelines_api: MagicMock, mock_indexes_api: MagicMock) -> DatadogApis:
    """DatadogApis wired to the mock endpoints."""
    return DatadogApis(logs_pipelines=mock_pipelines_api, logs_indexes=mock_indexes_api)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials and harness settings out of the tests."""
    for name in (
        "DD_API_KEY",
        "DD_APP_KEY",
        "DD_SITE",
        "DD_TEST_CLIENT_API_KEY",
        "DD_TEST_CLIENT_APP_KEY",
        "DATADOG_TERRAFORMER_FILTER",
        "DATADOG_TERRAFORMER_SERVICES",
        "LOG_CMD_OUTPUT",
    ):
        monkeypatch.delenv(name, raising=False)
