"""List the SharePoint Framework versions spfx-upgrade can plan between."""

from __future__ import annotations

import json

import typer
from rich.table import Table

from spfx_upgrade.cli.helpers import console
from spfx_upgrade.core.constants import SUPPORTED_VERSIONS
from spfx_upgrade.errors import RuleCatalogNotFoundError
from spfx_upgrade.upgrade.registry import RuleRegistry


def _rule_count(version: str) -> int | None:
    try:
        return len(RuleRegistry.get_catalog(version))
    except RuleCatalogNotFoundError:
        return None


def versions(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show supported versions, oldest first, with the size of each rule catalog."""
    rows = [(version, _rule_count(version)) for version in SUPPORTED_VERSIONS]

    if json_output:
        payload = [{"version": version, "rules": count} for version, count in rows]
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(title="Supported SharePoint Framework versions", header_style="bold cyan")
    table.add_column("Version", style="bright_white")
    table.add_column("Rules", justify="right")
    table.add_column("Note", style="dim")

    for version, count in rows:
        if count is None:
            table.add_row(version, "-", "baseline, upgrade from only")
        else:
            table.add_row(version, str(count), "")

    console.print(table)


__all__ = ["versions"]
