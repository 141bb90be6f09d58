"""Filter expression parsing.

Two forms are accepted:

    logs_index=main:archive
    Type=logs_index;Name=id;Value=main:archive

The short form always filters on the ``id`` field. In the long form ``Type``
may be omitted, in which case the filter applies to every service.
"""

from collections.abc import Iterable

from dd_logs_import.discovery.types import ResourceFilter
from dd_logs_import.errors import FilterError

ID_FIELD = "id"


def parse_filter_values(raw: str) -> list[str]:
    """
    Split a colon-separated value list.

    Colons inside single quotes are kept: ``'a:b':c`` -> ``["a:b", "c"]``.
    """
    values: list[str] = []
    current: list[str] = []
    quoted = False
    for char in raw:
        if char == "'":
            quoted = not quoted
        elif char == ":" and not quoted:
            values.append("".join(current))
            current = []
        else:
            current.append(char)
    if quoted:
        raise FilterError(f"Unterminated quote in filter values: {raw}")
    values.append("".join(current))
    return values


def _parse_long_form(raw: str) -> ResourceFilter:
    parts: dict[str, str] = {}
    for part in raw.split(";"):
        key, sep, value = part.partition("=")
        if not sep:
            raise FilterError(f"Invalid filter segment '{part}' in '{raw}'")
        parts[key.strip()] = value

    if "Name" not in parts or "Value" not in parts:
        raise FilterError(f"Filter '{raw}' must define both Name and Value")

    return ResourceFilter(
        service_name=parts.get("Type", ""),
        field_path=parts["Name"],
        acceptable_values=tuple(parse_filter_values(parts["Value"])),
    )


def parse_filter(raw: str) -> ResourceFilter:
    """Parse a single filter expression."""
    raw = raw.strip()
    if raw.startswith(("Type=", "Name=")):
        return _parse_long_form(raw)

    service, sep, values = raw.partition("=")
    if not sep or not service:
        raise FilterError(f"Invalid filter '{raw}', expected <service>=<id1>:<id2>")

    return ResourceFilter(
        service_name=service,
        field_path=ID_FIELD,
        acceptable_values=tuple(parse_filter_values(values)),
    )


def parse_filters(raw_filters: Iterable[str]) -> list[ResourceFilter]:
    """Parse filter expressions, skipping blank entries."""
    return [parse_filter(raw) for raw in raw_filters if raw.strip()]


def build_filter_expression(service: str, ids: Iterable[str]) -> str:
    """Render the short filter form for a service and its resource IDs."""
    return f"{service}={':'.join(ids)}"
