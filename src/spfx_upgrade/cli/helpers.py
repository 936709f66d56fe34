"""Console and logging helpers shared by CLI commands."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def print_error(message: object) -> None:
    """Print a user-facing error on stderr."""
    err_console.print(f"[red]Error:[/red] {escape(str(message))}", soft_wrap=True)


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    """Route log records to stderr so stdout only ever carries the report."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=debug)],
        force=True,
    )


__all__ = ["configure_logging", "console", "err_console", "print_error"]
