"""End-to-end harness: create, import, plan and destroy each service in turn."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from dd_logs_import.config import HarnessSettings
from dd_logs_import.discovery import DatadogApis, DatadogProvider, Resource, datadog_apis
from dd_logs_import.discovery.filters import build_filter_expression
from dd_logs_import.harness import terraform
from dd_logs_import.harness.importer import (
    DEFAULT_TERRAFORMER_BIN,
    ImportOptions,
    import_resources,
    resource_path,
)
from dd_logs_import.harness.runner import CommandRunner, build_command_env
from dd_logs_import.harness.services import get_services

logger = logging.getLogger(__name__)

DATADOG_RESOURCES_PATH = "tests/datadog/resources/"


class Stage(Enum):
    IDLE = "idle"
    PROVISIONED = "provisioned"
    IMPORTED = "imported"
    VERIFIED = "verified"
    DESTROYED = "destroyed"


@dataclass
class ServiceRun:
    """Progress of one service through the harness stages."""

    service: str
    stage: Stage = Stage.IDLE
    resource_ids: list[str] = field(default_factory=list)
    resources: list[Resource] = field(default_factory=list)


@dataclass
class Harness:
    """Everything a harness run needs, passed explicitly to each stage."""

    provider: DatadogProvider
    apis: DatadogApis
    runner: CommandRunner
    resources_path: Path
    credentials: tuple[str, str]
    extra_filter: str = ""
    terraformer_bin: str = DEFAULT_TERRAFORMER_BIN

    def import_options(self, service: str, resource_ids: list[str]) -> ImportOptions:
        filters = [build_filter_expression(service, resource_ids)]
        if self.extra_filter:
            filters.append(self.extra_filter)
        return ImportOptions(resources=[service], filters=filters)

    def run_service(self, service: str) -> ServiceRun:
        """Walk one service through every stage; the first failure propagates."""
        run = ServiceRun(service=service)
        service_dir = self.resources_path / service

        logger.info("Creating %s resources", service)
        terraform.apply(self.runner, service_dir)
        run.resource_ids = terraform.read_output_ids(self.runner, service_dir)
        run.stage = Stage.PROVISIONED
        logger.info("Created %s resources. IDs: %s", service, run.resource_ids)

        options = self.import_options(service, run.resource_ids)
        logger.info("Importing %s resources. IDs: %s", service, run.resource_ids)
        run.resources = import_resources(
            self.provider,
            self.apis,
            options,
            self.runner,
            cwd=self.resources_path,
            credentials=self.credentials,
            terraformer_bin=self.terraformer_bin,
        )
        run.stage = Stage.IMPORTED

        generated_dir = self.resources_path / resource_path(
            options.path_pattern, self.provider.name, service, options.path_output
        )
        logger.info("Running terraform plan against generated %s configuration", service)
        terraform.plan(self.runner, generated_dir)
        run.stage = Stage.VERIFIED
        logger.info("terraform plan did not generate any diffs for %s", service)

        logger.info("Destroying %s resources", service)
        terraform.destroy(self.runner, service_dir)
        run.stage = Stage.DESTROYED

        return run

    def run(self, services: list[str]) -> list[ServiceRun]:
        """Run services strictly one after another."""
        return [self.run_service(service) for service in services]


def run_from_settings(
    settings: HarnessSettings,
    resources_path: str | Path = DATADOG_RESOURCES_PATH,
    terraformer_bin: str = DEFAULT_TERRAFORMER_BIN,
    provider: DatadogProvider | None = None,
) -> list[ServiceRun]:
    """Resolve services from settings and run the whole harness."""
    if provider is None:
        provider = DatadogProvider()
    services = get_services(settings.services, provider.supported_services())
    logger.info("Services to test: %s", ", ".join(services))

    runner = CommandRunner(
        env=build_command_env(settings.api_key, settings.app_key),
        log_output=settings.log_cmd_output,
    )

    with datadog_apis(settings.api_key, settings.app_key) as apis:
        harness = Harness(
            provider=provider,
            apis=apis,
            runner=runner,
            resources_path=Path(resources_path).resolve(),
            credentials=(settings.api_key, settings.app_key),
            extra_filter=settings.extra_filter,
            terraformer_bin=terraformer_bin,
        )
        return harness.run(services)
