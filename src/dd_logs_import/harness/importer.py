"""Import step: in-process discovery followed by the external code generator."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from dd_logs_import.discovery import DatadogApis, DatadogProvider, Resource, discover, parse_filters
from dd_logs_import.harness.runner import CommandRunner

logger = logging.getLogger(__name__)

DEFAULT_PATH_PATTERN = "{output}/{provider}/{service}/"
DEFAULT_PATH_OUTPUT = "generated"
DEFAULT_TERRAFORMER_BIN = "terraformer"


@dataclass
class ImportOptions:
    """Options passed to the code generator for one import."""

    resources: list[str]
    filters: list[str] = field(default_factory=list)
    path_pattern: str = DEFAULT_PATH_PATTERN
    path_output: str = DEFAULT_PATH_OUTPUT
    state: str = "local"
    connect: bool = True
    output: str = "hcl"


def resource_path(pattern: str, provider: str, service: str, output: str) -> str:
    """Expand a path pattern for one provider/service pair."""
    return (
        pattern.replace("{output}", output)
        .replace("{provider}", provider)
        .replace("{service}", service)
    )


def build_import_command(
    provider: str,
    options: ImportOptions,
    api_key: str,
    app_key: str,
    terraformer_bin: str = DEFAULT_TERRAFORMER_BIN,
) -> list[str]:
    """
    Build the code generator command as an argv list.

    Returns a list suitable for CommandRunner.run without a shell.
    """
    command = [
        terraformer_bin,
        "import",
        provider,
        f"--resources={','.join(options.resources)}",
        f"--path-pattern={options.path_pattern}",
        f"--path-output={options.path_output}",
        f"--state={options.state}",
        f"--connect={str(options.connect).lower()}",
        f"--output={options.output}",
    ]
    command.extend(f"--filter={expression}" for expression in options.filters)
    command.extend([f"--api-key={api_key}", f"--app-key={app_key}"])
    return command


def import_resources(
    provider: DatadogProvider,
    apis: DatadogApis,
    options: ImportOptions,
    runner: CommandRunner,
    cwd: Path,
    credentials: tuple[str, str],
    terraformer_bin: str = DEFAULT_TERRAFORMER_BIN,
) -> list[Resource]:
    """
    Resolve the resources to import, then generate configuration for them.

    Discovery runs first so a missing or unreadable resource fails the import
    with a RemoteError before the code generator is started.
    """
    filters = parse_filters(options.filters)
    resources: list[Resource] = []
    for service in options.resources:
        spec = provider.get_service(service)
        discovered = discover(spec, apis, filters)
        logger.info(
            "Discovered %d %s resource(s): %s",
            len(discovered),
            service,
            ", ".join(resource.id for resource in discovered),
        )
        resources.extend(discovered)

    api_key, app_key = credentials
    command = build_import_command(provider.name, options, api_key, app_key, terraformer_bin)
    runner.run(command, cwd=cwd)
    return resources

