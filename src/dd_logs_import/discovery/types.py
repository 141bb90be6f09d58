"""Shared types for Datadog resource discovery."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

# Remote SDK models are only read through attribute access
RemoteItem = Any


@dataclass(frozen=True)
class Resource:
    """A discovered resource, ready to hand to the import engine."""

    id: str  # Pipeline ID or index name
    name: str  # Resource name in the generated configuration
    resource_type: str  # e.g. datadog_logs_index
    provider: str  # Always "datadog" for now
    allow_empty_values: frozenset[str] = field(default_factory=frozenset)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "resource_type": self.resource_type,
            "provider": self.provider,
            "allow_empty_values": sorted(self.allow_empty_values),
        }


@dataclass(frozen=True)
class ResourceFilter:
    """A filter narrowing discovery to specific values of one field."""

    service_name: str  # Empty string applies to every service
    field_path: str  # "id" selects point lookups
    acceptable_values: tuple[str, ...] = ()

    def is_applicable(self, service: str) -> bool:
        return self.service_name == "" or self.service_name == service


@dataclass(frozen=True)
class ServiceSpec:
    """
    How to discover one service category.

    Every category goes through the same discovery loop; only the SDK calls,
    the inclusion predicate and the naming rules differ.
    """

    name: str  # Service name used in filters, e.g. logs_index
    resource_type: str
    list_items: Callable[[Any], Iterable[RemoteItem]]
    item_id: Callable[[RemoteItem], str]
    item_name: Callable[[RemoteItem], str]
    allow_empty_values: frozenset[str] = field(default_factory=frozenset)
    get_item: Callable[[Any, str], RemoteItem] | None = None
    include: Callable[[RemoteItem], bool] = lambda item: True
    provider: str = "datadog"
