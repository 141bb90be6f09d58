"""Tests for the per-category service definitions."""

from types import SimpleNamespace

import pytest
from inline_snapshot import snapshot

from dd_logs_import.discovery.client import DatadogApis
from dd_logs_import.discovery.generator import create_resource, discover
from dd_logs_import.discovery.services.logs_custom_pipeline import (
    LOGS_CUSTOM_PIPELINE,
    is_custom_pipeline,
)
from dd_logs_import.discovery.services.logs_index import LOGS_INDEX
from dd_logs_import.discovery.services.logs_integration_pipeline import (
    LOGS_INTEGRATION_PIPELINE,
    is_integration_pipeline,
)


class TestLogsCustomPipeline:
    """Tests for the logs_custom_pipeline service."""

    def test_resource_fields(self):
        """Test the descriptor built for a custom pipeline."""
        pipeline = SimpleNamespace(id="abc-123", name="Checkout", is_read_only=False)

        resource = create_resource(LOGS_CUSTOM_PIPELINE, pipeline)

        assert resource.to_dict() == snapshot(
            {
                "id": "abc-123",
                "name": "logs_custom_pipeline_abc-123",
                "resource_type": "datadog_logs_custom_pipeline",
                "provider": "datadog",
                "allow_empty_values": ["support_rules"],
            }
        )

    @pytest.mark.parametrize(("is_read_only", "expected"), [(False, True), (True, False)])
    def test_predicate(self, is_read_only: bool, expected: bool):
        """Test that the predicate keeps user-defined pipelines only."""
        pipeline = SimpleNamespace(id="p", name="P", is_read_only=is_read_only)
        assert is_custom_pipeline(pipeline) is expected

    def test_lookup_by_id(self, mock_apis: DatadogApis, mock_pipelines_api):
        """Test that point lookups pass the pipeline ID to the SDK."""
        LOGS_CUSTOM_PIPELINE.get_item(mock_apis, "abc-123")
        mock_pipelines_api.get_logs_pipeline.assert_called_once_with(pipeline_id="abc-123")


class TestLogsIntegrationPipeline:
    """Tests for the logs_integration_pipeline service."""

    def test_resource_uses_remote_name(self):
        """Test that integration pipelines keep their Datadog display name."""
        pipeline = SimpleNamespace(id="def-456", name="Nginx", is_read_only=True)

        resource = create_resource(LOGS_INTEGRATION_PIPELINE, pipeline)

        assert (resource.id, resource.name, resource.resource_type) == snapshot(
            ("def-456", "Nginx", "datadog_logs_integration_pipeline")
        )
        assert resource.allow_empty_values == frozenset({"support_rules"})

    @pytest.mark.parametrize(("is_read_only", "expected"), [(True, True), (False, False)])
    def test_predicate(self, is_read_only: bool, expected: bool):
        """Test that the predicate keeps read-only pipelines only."""
        pipeline = SimpleNamespace(id="p", name="P", is_read_only=is_read_only)
        assert is_integration_pipeline(pipeline) is expected

    def test_has_no_point_lookup(self):
        """Test that integration pipelines are discovered by listing only."""
        assert LOGS_INTEGRATION_PIPELINE.get_item is None


class TestLogsIndex:
    """Tests for the logs_index service."""

    def test_name_is_used_as_id(self):
        """Test that the index name becomes the resource ID."""
        resource = create_resource(LOGS_INDEX, SimpleNamespace(name="main"))

        assert resource.to_dict() == snapshot(
            {
                "id": "main",
                "name": "logs_index_main",
                "resource_type": "datadog_logs_index",
                "provider": "datadog",
                "allow_empty_values": ["filter"],
            }
        )

    def test_lists_every_index(self, mock_apis: DatadogApis):
        """Test that indexes have no inclusion predicate."""
        resources = discover(LOGS_INDEX, mock_apis)
        assert [r.id for r in resources] == snapshot(["main", "archive", "debug"])

    def test_list_without_indexes(self, mock_apis: DatadogApis, mock_indexes_api):
        """Test that a list response without indexes yields nothing."""
        mock_indexes_api.list_log_indexes.return_value = SimpleNamespace(indexes=None)
        assert discover(LOGS_INDEX, mock_apis) == []

    def test_lookup_by_name(self, mock_apis: DatadogApis, mock_indexes_api):
        """Test that point lookups pass the index name to the SDK."""
        LOGS_INDEX.get_item(mock_apis, "archive")
        mock_indexes_api.get_logs_index.assert_called_once_with(name="archive")
