"""Generic discovery loop shared by every service category."""

import logging
from collections.abc import Iterable

from datadog_api_client.exceptions import OpenApiException

from dd_logs_import.discovery.client import DatadogApis
from dd_logs_import.discovery.filters import ID_FIELD
from dd_logs_import.discovery.types import RemoteItem, Resource, ResourceFilter, ServiceSpec
from dd_logs_import.errors import RemoteError

logger = logging.getLogger(__name__)


def create_resource(spec: ServiceSpec, item: RemoteItem) -> Resource:
    """Map a remote item to a Resource using the service's naming rules."""
    return Resource(
        id=spec.item_id(item),
        name=spec.item_name(item),
        resource_type=spec.resource_type,
        provider=spec.provider,
        allow_empty_values=spec.allow_empty_values,
    )


def filtered_ids(spec: ServiceSpec, filters: Iterable[ResourceFilter]) -> list[str]:
    """Collect the IDs requested for this service, in order and without repeats."""
    ids: list[str] = []
    for resource_filter in filters:
        if resource_filter.field_path != ID_FIELD or not resource_filter.is_applicable(spec.name):
            continue
        for value in resource_filter.acceptable_values:
            if value not in ids:
                ids.append(value)
    return ids


def discover(
    spec: ServiceSpec,
    apis: DatadogApis,
    filters: Iterable[ResourceFilter] = (),
) -> list[Resource]:
    """
    Discover resources for one service category.

    When an ID filter applies to the service (and the service supports point
    lookups), only the listed IDs are fetched, one call each. Otherwise the
    whole collection is listed and passed through the service's inclusion
    predicate.

    Raises:
        RemoteError: On the first failed API call. No partial results are returned.
    """
    resources: list[Resource] = []

    if spec.get_item is not None:
        for resource_id in filtered_ids(spec, filters):
            logger.debug("Fetching %s %s", spec.name, resource_id)
            try:
                item = spec.get_item(apis, resource_id)
            except OpenApiException as e:
                raise RemoteError(spec.name, "get", e) from e
            resources.append(create_resource(spec, item))

    if resources:
        return resources

    logger.debug("Listing all %s resources", spec.name)
    try:
        items = list(spec.list_items(apis))
    except OpenApiException as e:
        raise RemoteError(spec.name, "list", e) from e

    seen: set[str] = set()
    for item in items:
        if not spec.include(item):
            continue
        resource = create_resource(spec, item)
        if resource.id in seen:
            continue
        seen.add(resource.id)
        resources.append(resource)

    logger.debug("Discovered %d %s resource(s)", len(resources), spec.name)
    return resources
