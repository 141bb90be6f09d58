"""Logs index discovery.

Indexes have no separate ID; the index name is used as the resource ID.
"""

from dd_logs_import.discovery.client import DatadogApis
from dd_logs_import.discovery.types import RemoteItem, ServiceSpec

LOGS_INDEX_ALLOW_EMPTY_VALUES = frozenset({"filter"})


def _get_index(apis: DatadogApis, name: str) -> RemoteItem:
    return apis.logs_indexes.get_logs_index(name=name)


def _list_indexes(apis: DatadogApis) -> list[RemoteItem]:
    response = apis.logs_indexes.list_log_indexes()
    return getattr(response, "indexes", None) or []


LOGS_INDEX = ServiceSpec(
    name="logs_index",
    resource_type="datadog_logs_index",
    get_item=_get_index,
    list_items=_list_indexes,
    item_id=lambda index: index.name,
    item_name=lambda index: f"logs_index_{index.name}",
    allow_empty_values=LOGS_INDEX_ALLOW_EMPTY_VALUES,
)
