"""
Datadog Logs Resource Discovery Module.

Discovers logs pipelines and logs indexes through the Datadog API and turns
them into resource descriptors for the import engine.
"""

from collections.abc import Iterable

from rich.progress import Progress, SpinnerColumn, TextColumn

from .client import DatadogApis, datadog_apis
from .filters import build_filter_expression, parse_filters
from .generator import discover
from .registry import DatadogProvider
from .types import Resource, ResourceFilter, ServiceSpec
from .utils.console import err_console

# Re-export types
__all__ = [
    "DatadogApis",
    "DatadogProvider",
    "Resource",
    "ResourceFilter",
    "ServiceSpec",
    "build_filter_expression",
    "datadog_apis",
    "discover",
    "discover_all",
    "parse_filters",
]


def discover_all(
    apis: DatadogApis,
    services: Iterable[str],
    filters: Iterable[ResourceFilter] = (),
    provider: DatadogProvider | None = None,
    show_progress: bool = True,
) -> dict[str, list[Resource]]:
    """Discover resources for each service, in the order given."""
    if provider is None:
        provider = DatadogProvider()
    filters = list(filters)
    results: dict[str, list[Resource]] = {}

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
        disable=not show_progress,
    ) as progress:
        task = progress.add_task("Discovering resources...", total=None)

        for service in services:
            spec = provider.get_service(service)
            progress.update(task, description=f"Scanning {service}...")
            results[service] = discover(spec, apis, filters)

    return results
