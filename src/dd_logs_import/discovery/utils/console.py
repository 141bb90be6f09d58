"""Rich consoles for command results and for diagnostics."""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Results (tables, JSON) go to stdout; logs, progress and errors to stderr
console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Route library logging through a rich handler writing to stderr."""
    handler = RichHandler(console=err_console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        handlers=[handler],
        force=True,
    )


def success(message: str) -> None:
    console.print(f"[green]{message}[/green]")


def error(message: str) -> None:
    """Report a failure on stderr so it never mixes with command results."""
    err_console.print(f"[bold red]{message}[/bold red]")


def warning(message: str) -> None:
    err_console.print(f"[yellow]{message}[/yellow]")


def cancel(message: str) -> None:
    """Note that the user aborted an interactive prompt."""
    err_console.print(f"[yellow]{message}[/yellow]")
