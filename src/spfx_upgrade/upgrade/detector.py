"""Detect the SharePoint Framework version a project was built with."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path

from spfx_upgrade.core.constants import (
    CORE_LIBRARY_PACKAGE,
    GENERATOR_KEY,
    PACKAGE_JSON,
    YO_RC_JSON,
)
from spfx_upgrade.project.reader import read_document

logger = logging.getLogger(__name__)

_NON_VERSION_CHARS = re.compile(r"[^0-9.]")


class VersionDetector:
    """Probe generator metadata, then the core library dependency."""

    def __init__(self, project_path: Path):
        self.project_path = project_path

    def detect_version(self) -> str | None:
        """Return the detected version, or ``None`` when no source has one."""
        version = self._from_generator_metadata()
        if version:
            logger.debug("Version %s detected from %s", version, YO_RC_JSON)
            return version

        version = self._from_core_library()
        if version:
            logger.debug("Version %s detected from %s dependency", version, CORE_LIBRARY_PACKAGE)
            return version

        return None

    def _from_generator_metadata(self) -> str | None:
        yo_rc = read_document(self.project_path / YO_RC_JSON)
        if not isinstance(yo_rc, Mapping):
            return None
        generator = yo_rc.get(GENERATOR_KEY)
        if not isinstance(generator, Mapping):
            return None
        version = generator.get("version")
        return version if isinstance(version, str) and version else None

    def _from_core_library(self) -> str | None:
        package_json = read_document(self.project_path / PACKAGE_JSON)
        if not isinstance(package_json, Mapping):
            return None
        dependencies = package_json.get("dependencies")
        if not isinstance(dependencies, Mapping):
            return None
        spec = dependencies.get(CORE_LIBRARY_PACKAGE)
        if not isinstance(spec, str):
            return None
        return _NON_VERSION_CHARS.sub("", spec) or None


__all__ = ["VersionDetector"]
