"""Upgrade command implementation for spfx-upgrade."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
import typer

from spfx_upgrade.cli.helpers import print_error
from spfx_upgrade.core.paths import locate_project_root
from spfx_upgrade.core.settings import OUTPUT_CHOICES, load_settings
from spfx_upgrade.errors import ProjectRootNotFoundError, SpfxUpgradeError
from spfx_upgrade.report.renderer import render_report
from spfx_upgrade.upgrade.runner import UpgradeRunner


def upgrade(
    to_version: Optional[str] = typer.Option(
        None,
        "--to-version",
        "-t",
        help="SharePoint Framework version to upgrade to (defaults to the newest supported)",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output type: json, text or md. Default text",
        click_type=click.Choice(list(OUTPUT_CHOICES)),
    ),
) -> None:
    """Report the steps to upgrade the project in the current directory.

    This command doesn't change your project files. It prints a report with
    every step necessary to upgrade the project to the specified version.

    Examples:
        spfx-upgrade upgrade                                 # Summary for the newest version
        spfx-upgrade upgrade --to-version 1.5.0 -o md > upgrade-report.md
    """
    cwd = Path.cwd()
    try:
        if output is None:
            output = load_settings().output
        project_root = locate_project_root(cwd)
        if project_root is None:
            raise ProjectRootNotFoundError(cwd)

        result = UpgradeRunner(project_root).analyze(to_version)
    except SpfxUpgradeError as exc:
        print_error(exc)
        raise typer.Exit(1) from None

    report = render_report(
        result.findings,
        output,
        result.to_version,
        result.project.name,
    )
    typer.echo(report)


__all__ = ["upgrade"]
