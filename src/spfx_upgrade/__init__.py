"""spfx-upgrade - report the steps to upgrade a SharePoint Framework project.

Usage:
    spfx-upgrade upgrade
    spfx-upgrade upgrade --to-version 1.5.0 --output md > upgrade-report.md
    spfx-upgrade versions
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("spfx-upgrade")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0-dev"


def main() -> None:
    """Console entry point."""
    from spfx_upgrade.cli.app import main as _main

    _main()


__all__ = ["__version__", "main"]
