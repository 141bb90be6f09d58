"""Terraform CLI steps used by the end-to-end harness."""

import logging
from pathlib import Path

from dd_logs_import.harness.runner import CommandRunner

logger = logging.getLogger(__name__)

COMMAND_TERRAFORM_INIT = "terraform init"
COMMAND_TERRAFORM_PLAN = "terraform plan -detailed-exitcode"
COMMAND_TERRAFORM_APPLY = "terraform apply -auto-approve"
COMMAND_TERRAFORM_DESTROY = "terraform destroy -auto-approve"
COMMAND_TERRAFORM_OUTPUT = "terraform output"

OUTPUT_SEPARATOR = " = "


def chain(*commands: str) -> str:
    """Join commands so each runs only if the previous one succeeded."""
    return " && ".join(commands)


def parse_terraform_output(output: str) -> list[str]:
    """
    Extract resource IDs from ``terraform output`` text.

    Each line is ``name = value``; the last `` = ``-separated field is kept,
    minus the double quotes Terraform 0.14+ prints around string values.
    Lines without a separator are kept whole, so a blank line yields "".
    """
    return [_unquote(line.split(OUTPUT_SEPARATOR)[-1]) for line in output.splitlines()]


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def apply(runner: CommandRunner, service_dir: Path) -> None:
    """Create the fixture resources defined in a service directory."""
    runner.run(chain(COMMAND_TERRAFORM_INIT, COMMAND_TERRAFORM_APPLY), cwd=service_dir)


def read_output_ids(runner: CommandRunner, service_dir: Path) -> list[str]:
    """Read the IDs of the created resources from the Terraform outputs."""
    output = runner.run(COMMAND_TERRAFORM_OUTPUT, cwd=service_dir, capture=True)
    return parse_terraform_output(output)


def plan(runner: CommandRunner, config_dir: Path) -> None:
    """
    Plan against generated configuration.

    ``-detailed-exitcode`` exits with 2 when the plan has changes, so any diff
    surfaces as a CommandError.
    """
    runner.run(chain(COMMAND_TERRAFORM_INIT, COMMAND_TERRAFORM_PLAN), cwd=config_dir)


def destroy(runner: CommandRunner, service_dir: Path) -> None:
    """Destroy the fixture resources created by apply."""
    runner.run(COMMAND_TERRAFORM_DESTROY, cwd=service_dir)
