"""End-to-end import harness driven by the Terraform and code generator CLIs."""

from .pipeline import Harness, ServiceRun, Stage, run_from_settings
from .runner import CommandRunner
from .services import get_all_services, get_services
from .terraform import parse_terraform_output

__all__ = [
    "CommandRunner",
    "Harness",
    "ServiceRun",
    "Stage",
    "get_all_services",
    "get_services",
    "parse_terraform_output",
    "run_from_settings",
]
