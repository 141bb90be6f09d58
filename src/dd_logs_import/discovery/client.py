"""Datadog API client setup."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from datadog_api_client import ApiClient, Configuration
from datadog_api_client.v1.api.logs_indexes_api import LogsIndexesApi
from datadog_api_client.v1.api.logs_pipelines_api import LogsPipelinesApi


@dataclass
class DatadogApis:
    """The SDK endpoints used by the logs service generators."""

    logs_pipelines: LogsPipelinesApi
    logs_indexes: LogsIndexesApi


def build_configuration(api_key: str, app_key: str, site: str | None = None) -> Configuration:
    """Build an SDK configuration authenticated with the given keys."""
    configuration = Configuration()
    configuration.api_key["apiKeyAuth"] = api_key
    configuration.api_key["appKeyAuth"] = app_key
    if site:
        configuration.server_variables["site"] = site
    return configuration


@contextmanager
def datadog_apis(api_key: str, app_key: str, site: str | None = None) -> Iterator[DatadogApis]:
    """Open an API client and yield the logs endpoints bound to it."""
    configuration = build_configuration(api_key, app_key, site)
    with ApiClient(configuration) as api_client:
        yield DatadogApis(
            logs_pipelines=LogsPipelinesApi(api_client),
            logs_indexes=LogsIndexesApi(api_client),
        )
