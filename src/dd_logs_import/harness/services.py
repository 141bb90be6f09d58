"""Service selection for the end-to-end harness."""

from collections.abc import Iterable

# Deprecated dashboard resources, never exercised end to end
LEGACY_SERVICES = frozenset({"timeboard", "screenboard"})


def get_all_services(registry_services: Iterable[str]) -> list[str]:
    """Every registered service except the legacy dashboard ones."""
    return [service for service in registry_services if service not in LEGACY_SERVICES]


def get_services(raw: str, registry_services: Iterable[str]) -> list[str]:
    """
    Resolve the services to run, in a deterministic order.

    ``raw`` is a comma-separated list; when it names nothing, every
    non-legacy registered service is used.
    """
    services = [service.strip() for service in raw.split(",") if service.strip()]
    if not services:
        services = get_all_services(registry_services)
    return sorted(services)
