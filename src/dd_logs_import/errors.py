"""Error types shared by discovery and the end-to-end harness."""

from typing import Any


class ImporterError(Exception):
    """Base error for the importer."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class RemoteError(ImporterError):
    """A Datadog API call failed."""

    def __init__(self, service: str, operation: str, cause: Exception):
        self.service = service
        self.operation = operation
        self.cause = cause
        super().__init__(
            f"{operation} failed for {service}: {cause}",
            {"service": service, "operation": operation},
        )


class CommandError(ImporterError):
    """An external command exited with a non-zero status."""

    def __init__(self, command: str, returncode: int, output: str = ""):
        self.command = command
        self.returncode = returncode
        self.output = output
        super().__init__(
            f"Command '{command}' exited with status {returncode}",
            {"returncode": returncode},
        )


class ConfigError(ImporterError):
    """Raised when configuration read from the environment is invalid."""


class FilterError(ImporterError):
    """Raised when a filter expression cannot be parsed."""


class UnknownServiceError(ImporterError):
    """Raised when a service name is not in the provider registry."""

    def __init__(self, service: str, supported: list[str]):
        self.service = service
        super().__init__(
            f"Unsupported service '{service}'. Supported services: {', '.join(supported)}",
            {"service": service},
        )
