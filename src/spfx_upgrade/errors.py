"""Exceptions raised by spfx-upgrade.

Environment, planning and rule-catalog errors stop the command and surface
to the user. Unreadable or malformed project documents never raise; the
project model records them as absent instead.
"""

from __future__ import annotations

from typing import Sequence


class SpfxUpgradeError(Exception):
    """Base class for every user-facing spfx-upgrade failure."""


class ProjectRootNotFoundError(SpfxUpgradeError):
    """No directory containing package.json was found above the start path."""

    def __init__(self, start: object) -> None:
        super().__init__(f"Couldn't find project root folder (searched upward from {start})")
        self.start = start


class ProjectVersionNotFoundError(SpfxUpgradeError):
    """The SharePoint Framework version of the project could not be determined."""

    def __init__(self) -> None:
        super().__init__(
            "Unable to determine the version of the current SharePoint Framework project"
        )


class PlanError(SpfxUpgradeError):
    """The requested upgrade path cannot be planned."""


class UnsupportedTargetVersionError(PlanError):
    def __init__(self, version: str, supported: Sequence[str]) -> None:
        super().__init__(
            f"spfx-upgrade doesn't support upgrading SharePoint Framework projects "
            f"to version {version}. Supported versions are {', '.join(supported)}"
        )
        self.version = version
        self.supported = tuple(supported)


class UnsupportedProjectVersionError(PlanError):
    def __init__(self, version: str, supported: Sequence[str]) -> None:
        super().__init__(
            f"spfx-upgrade doesn't support upgrading projects built on "
            f"SharePoint Framework v{version}. Supported versions are {', '.join(supported)}"
        )
        self.version = version
        self.supported = tuple(supported)


class DowngradeError(PlanError):
    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            f"You cannot downgrade a project (project is on v{current}, requested v{requested})"
        )
        self.current = current
        self.requested = requested


class AlreadyUpToDateError(PlanError):
    def __init__(self, version: str) -> None:
        super().__init__(f"Project doesn't need to be upgraded (already on v{version})")
        self.version = version


class RuleCatalogNotFoundError(SpfxUpgradeError):
    """No rule catalog is registered for a version on the upgrade path."""

    def __init__(self, version: str) -> None:
        super().__init__(f"No upgrade rules are available for version {version}")
        self.version = version


class SettingsError(SpfxUpgradeError):
    """The user configuration file exists but cannot be parsed."""


__all__ = [
    "AlreadyUpToDateError",
    "DowngradeError",
    "PlanError",
    "ProjectRootNotFoundError",
    "ProjectVersionNotFoundError",
    "RuleCatalogNotFoundError",
    "SettingsError",
    "SpfxUpgradeError",
    "UnsupportedProjectVersionError",
    "UnsupportedTargetVersionError",
]
