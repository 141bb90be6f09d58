"""Logs custom pipeline discovery.

Custom pipelines are the user-defined ones: every pipeline whose
``is_read_only`` flag is false.
"""

from dd_logs_import.discovery.client import DatadogApis
from dd_logs_import.discovery.types import RemoteItem, ServiceSpec

LOGS_CUSTOM_PIPELINE_ALLOW_EMPTY_VALUES = frozenset({"support_rules"})


def _get_pipeline(apis: DatadogApis, pipeline_id: str) -> RemoteItem:
    return apis.logs_pipelines.get_logs_pipeline(pipeline_id=pipeline_id)


def _list_pipelines(apis: DatadogApis) -> list[RemoteItem]:
    return apis.logs_pipelines.list_logs_pipelines()


def is_custom_pipeline(pipeline: RemoteItem) -> bool:
    """Only user-defined pipelines are imported as custom pipelines."""
    return not getattr(pipeline, "is_read_only", False)


LOGS_CUSTOM_PIPELINE = ServiceSpec(
    name="logs_custom_pipeline",
    resource_type="datadog_logs_custom_pipeline",
    get_item=_get_pipeline,
    list_items=_list_pipelines,
    include=is_custom_pipeline,
    item_id=lambda pipeline: pipeline.id,
    item_name=lambda pipeline: f"logs_custom_pipeline_{pipeline.id}",
    allow_empty_values=LOGS_CUSTOM_PIPELINE_ALLOW_EMPTY_VALUES,
)
