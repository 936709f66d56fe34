"""Project root discovery."""

from __future__ import annotations

from pathlib import Path

from spfx_upgrade.core.constants import PACKAGE_JSON


def locate_project_root(start: Path | None = None) -> Path | None:
    """Return the nearest directory at or above *start* holding a package.json.

    Returns ``None`` when the filesystem root is reached without a match.
    """
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / PACKAGE_JSON).is_file():
            return candidate
    return None


__all__ = ["locate_project_root"]
