"""Provider registry: the service categories this tool can discover."""

from dd_logs_import.discovery.services.logs_custom_pipeline import LOGS_CUSTOM_PIPELINE
from dd_logs_import.discovery.services.logs_index import LOGS_INDEX
from dd_logs_import.discovery.services.logs_integration_pipeline import LOGS_INTEGRATION_PIPELINE
from dd_logs_import.discovery.types import ServiceSpec
from dd_logs_import.errors import UnknownServiceError

SERVICES: tuple[ServiceSpec, ...] = (
    LOGS_CUSTOM_PIPELINE,
    LOGS_INDEX,
    LOGS_INTEGRATION_PIPELINE,
)


class DatadogProvider:
    """Registry of the Datadog service generators."""

    name = "datadog"

    def __init__(self, services: tuple[ServiceSpec, ...] = SERVICES):
        self._services = {spec.name: spec for spec in services}

    def supported_services(self) -> dict[str, ServiceSpec]:
        return dict(self._services)

    def get_service(self, name: str) -> ServiceSpec:
        try:
            return self._services[name]
        except KeyError:
            raise UnknownServiceError(name, sorted(self._services)) from None
