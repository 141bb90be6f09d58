#!/usr/bin/env python3
"""
Datadog Logs Import - resource discovery and end-to-end import harness.

``discover`` lists the logs pipelines and logs indexes that can be imported
into Terraform and prints them as resource descriptors. ``e2e`` creates
fixture resources with Terraform, imports them back with the code generator,
checks that ``terraform plan`` shows no diff and destroys them again.

Usage:
    dd-logs-import discover --service logs_index --format json
    dd-logs-import e2e
"""

import json
import sys

import click
import questionary
from questionary import Choice
from rich import box
from rich.table import Table

from .config import load_datadog_settings, load_harness_settings
from .discovery import DatadogProvider, Resource, datadog_apis, discover_all, parse_filters
from .discovery.utils.console import cancel, configure_logging, console, error, success, warning
from .errors import ConfigError, ImporterError
from .harness.importer import DEFAULT_TERRAFORMER_BIN
from .harness.pipeline import DATADOG_RESOURCES_PATH, run_from_settings


def display_results_table(results: dict[str, list[Resource]]) -> None:
    """Display discovered resources in a rich table."""
    total = sum(len(resources) for resources in results.values())
    table = Table(
        title=f"Discovered {total} Resource(s)",
        box=box.ROUNDED,
        show_lines=True,
    )
    table.add_column("Service", style="cyan", no_wrap=True)
    table.add_column("ID", style="magenta")
    table.add_column("Name", style="green", max_width=50, overflow="ellipsis")
    table.add_column("Type")

    for service, resources in results.items():
        for resource in resources:
            table.add_row(service, resource.id, resource.name, resource.resource_type)

    console.print(table)


def select_services(provider: DatadogProvider) -> list[str] | None:
    """Ask which services to scan. Returns None if the prompt was cancelled."""
    choices = [
        Choice(title=name, value=name, checked=True)
        for name in sorted(provider.supported_services())
    ]
    return questionary.checkbox("Select services to discover:", choices=choices).ask()


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Discover and import Datadog logs resources."""
    configure_logging(verbose)


@main.command()
@click.option(
    "--service",
    "-s",
    "services",
    multiple=True,
    help="Service to discover (repeatable). Defaults to all services.",
)
@click.option(
    "--filter",
    "-f",
    "filters",
    multiple=True,
    help="Filter expression, e.g. logs_index=main:archive (repeatable).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    show_default=True,
)
@click.option("--interactive", "-i", is_flag=True, help="Pick services from a checklist.")
def discover(
    services: tuple[str, ...],
    filters: tuple[str, ...],
    output_format: str,
    interactive: bool,
) -> None:
    """Discover importable logs pipelines and indexes."""
    provider = DatadogProvider()
    selected: list[str] | None = list(services)

    if not selected:
        if interactive:
            selected = select_services(provider)
            if not selected:
                cancel("Operation cancelled.")
                sys.exit(0)
        else:
            selected = sorted(provider.supported_services())

    try:
        for service in selected:
            provider.get_service(service)
        parsed_filters = parse_filters(filters)

        settings = load_datadog_settings()
        if not settings.api_key or not settings.app_key:
            raise ConfigError("DD_API_KEY and DD_APP_KEY must be set")

        with datadog_apis(settings.api_key, settings.app_key, settings.site) as apis:
            results = discover_all(
                apis,
                selected,
                parsed_filters,
                provider,
                show_progress=output_format == "table",
            )
    except ImporterError as e:
        error(f"Error: {e}")
        sys.exit(1)

    if output_format == "json":
        document = [resource.to_dict() for resources in results.values() for resource in resources]
        click.echo(json.dumps(document, indent=2))
    elif not any(results.values()):
        warning("No importable resources found.")
    else:
        display_results_table(results)


@main.command()
@click.option(
    "--resources-path",
    default=DATADOG_RESOURCES_PATH,
    show_default=True,
    type=click.Path(file_okay=False),
    help="Directory holding one Terraform fixture directory per service.",
)
@click.option(
    "--terraformer-bin",
    default=DEFAULT_TERRAFORMER_BIN,
    show_default=True,
    help="Code generator executable.",
)
def e2e(resources_path: str, terraformer_bin: str) -> None:
    """Create, import, plan and destroy fixture resources for each service."""
    try:
        settings = load_harness_settings()
        run_from_settings(settings, resources_path, terraformer_bin)
    except ImporterError as e:
        error(f"Error: {e}")
        sys.exit(1)

    success("Successfully created and imported resources")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        cancel("\nOperation cancelled by user.")
        sys.exit(130)
