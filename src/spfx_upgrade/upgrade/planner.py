"""Plan the ordered list of version increments for an upgrade."""

from __future__ import annotations

from typing import Sequence

from spfx_upgrade.errors import (
    AlreadyUpToDateError,
    DowngradeError,
    UnsupportedProjectVersionError,
    UnsupportedTargetVersionError,
)


def validate_target(catalog: Sequence[str], requested: str) -> None:
    """Raise :class:`UnsupportedTargetVersionError` unless *requested* is known."""
    if requested not in catalog:
        raise UnsupportedTargetVersionError(requested, catalog)


def plan_upgrade(catalog: Sequence[str], current: str, requested: str) -> list[str]:
    """Return the versions to upgrade through, most recent first.

    Versions are compared by their position in *catalog*, never by parsing
    them. The result is ``catalog`` strictly after *current* up to and
    including *requested*, reversed, so that later rule catalogs run first
    and their findings win deduplication.

    Raises:
        UnsupportedTargetVersionError: *requested* is not in the catalog.
        UnsupportedProjectVersionError: *current* is not in the catalog.
        DowngradeError: *current* comes after *requested*.
        AlreadyUpToDateError: *current* equals *requested*.
    """
    validate_target(catalog, requested)
    if current not in catalog:
        raise UnsupportedProjectVersionError(current, catalog)

    versions = list(catalog)
    current_pos = versions.index(current)
    requested_pos = versions.index(requested)

    if current_pos > requested_pos:
        raise DowngradeError(current, requested)
    if current_pos == requested_pos:
        raise AlreadyUpToDateError(current)

    return list(reversed(versions[current_pos + 1 : requested_pos + 1]))


__all__ = ["plan_upgrade", "validate_target"]
