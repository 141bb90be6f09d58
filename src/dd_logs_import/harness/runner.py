"""External process runner."""

import logging
import os
import re
import shlex
import subprocess
import sys
from collections.abc import Mapping
from pathlib import Path

from dd_logs_import.errors import CommandError

logger = logging.getLogger(__name__)

SECRET_PATTERNS = (
    re.compile(r"(--(?:api|app)-key[= ])\S+"),
    re.compile(r"\b((?:DATADOG|DD)_(?:API|APP)_KEY=)\S+"),
)


def redact_command_for_display(command: str | list[str]) -> str:
    """
    Convert a command to a display string with credentials redacted.

    Redacts:
    - --api-key / --app-key flag values
    - DATADOG_API_KEY=... style environment assignments
    """
    text = command if isinstance(command, str) else shlex.join(command)
    for pattern in SECRET_PATTERNS:
        text = pattern.sub(r"\1<REDACTED>", text)
    return text


def build_command_env(
    api_key: str, app_key: str, base: Mapping[str, str] | None = None
) -> dict[str, str]:
    """The parent environment plus the Datadog keys the Terraform provider reads."""
    env = dict(os.environ if base is None else base)
    env["DATADOG_API_KEY"] = api_key
    env["DATADOG_APP_KEY"] = app_key
    return env


class CommandRunner:
    """
    Runs external commands in an explicit working directory.

    A string command runs through ``sh -c`` so ``&&`` chains work; a list runs
    as argv without a shell. The process-wide working directory is never
    changed.
    """

    def __init__(self, env: Mapping[str, str] | None = None, log_output: bool = False):
        self.env = dict(env) if env is not None else None
        self.log_output = log_output

    def run(self, command: str | list[str], cwd: str | Path, capture: bool = False) -> str:
        """
        Run a command and return its captured stdout ("" when not capturing).

        Raises:
            CommandError: If the command exits with a non-zero status.
        """
        display = redact_command_for_display(command)
        logger.debug("Running '%s' in %s", display, cwd)

        argv = ["sh", "-c", command] if isinstance(command, str) else command
        if capture:
            stdout = subprocess.PIPE
            stderr = subprocess.PIPE
        elif self.log_output:
            stdout = None
            stderr = None
        else:
            stdout = subprocess.DEVNULL
            stderr = subprocess.PIPE

        result = subprocess.run(
            argv,
            cwd=cwd,
            env=self.env,
            stdout=stdout,
            stderr=stderr,
            text=True,
            check=False,
        )

        output = result.stdout or ""
        if capture and self.log_output:
            sys.stdout.write(output)
            sys.stderr.write(result.stderr or "")

        if result.returncode != 0:
            logger.error("'%s' exited with status %d", display, result.returncode)
            raise CommandError(display, result.returncode, result.stderr or output)

        return output
