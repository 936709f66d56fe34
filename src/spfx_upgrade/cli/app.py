"""Typer application for spfx-upgrade."""

from __future__ import annotations

from typing import Optional

import typer

from spfx_upgrade import __version__
from spfx_upgrade.cli.commands.upgrade import upgrade
from spfx_upgrade.cli.commands.versions import versions
from spfx_upgrade.cli.helpers import configure_logging, console

app = typer.Typer(
    name="spfx-upgrade",
    help=(
        "Report the steps required to upgrade a SharePoint Framework project. "
        "Project files are never changed."
    ),
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"spfx-upgrade version {__version__}", highlight=False)
        raise typer.Exit()


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
    debug: bool = typer.Option(False, "--debug", help="Log debug details, including the collected project"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Report the steps required to upgrade a SharePoint Framework project."""
    configure_logging(verbose=verbose, debug=debug)


app.command("upgrade")(upgrade)
app.command("versions")(versions)


def main() -> None:
    app()


__all__ = ["app", "main"]
