"""Logs integration pipeline discovery."""

from dd_logs_import.discovery.client import DatadogApis
from dd_logs_import.discovery.types import RemoteItem, ServiceSpec

LOGS_INTEGRATION_PIPELINE_ALLOW_EMPTY_VALUES = frozenset({"support_rules"})


def _list_pipelines(apis: DatadogApis) -> list[RemoteItem]:
    return apis.logs_pipelines.list_logs_pipelines()


def is_integration_pipeline(pipeline: RemoteItem) -> bool:
    """Integration pipelines are installed by Datadog and flagged read-only."""
    return bool(getattr(pipeline, "is_read_only", False))


# No point lookup: integration pipelines are always listed, ID filters are
# left to the import engine.
LOGS_INTEGRATION_PIPELINE = ServiceSpec(
    name="logs_integration_pipeline",
    resource_type="datadog_logs_integration_pipeline",
    list_items=_list_pipelines,
    include=is_integration_pipeline,
    item_id=lambda pipeline: pipeline.id,
    item_name=lambda pipeline: pipeline.name,
    allow_empty_values=LOGS_INTEGRATION_PIPELINE_ALLOW_EMPTY_VALUES,
)
