"""Upgrade analysis pipeline: detect, plan, collect, visit, dedupe."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from spfx_upgrade.core.constants import SUPPORTED_VERSIONS
from spfx_upgrade.errors import ProjectVersionNotFoundError
from spfx_upgrade.project.builder import build_project
from spfx_upgrade.project.model import Project
from spfx_upgrade.upgrade.detector import VersionDetector
from spfx_upgrade.upgrade.engine import CatalogResolver, dedupe_findings, run_rules
from spfx_upgrade.upgrade.models import Finding
from spfx_upgrade.upgrade.planner import plan_upgrade, validate_target

logger = logging.getLogger(__name__)


@dataclass
class UpgradeResult:
    """Outcome of analyzing one project."""

    project: Project
    from_version: str
    to_version: str
    versions: list[str] = field(default_factory=list)
    findings: list[Finding] = field(default_factory=list)


class UpgradeRunner:
    """Analyze a project against the rule catalogs of a version catalog.

    The runner reads the project but never writes to it.
    """

    def __init__(
        self,
        project_path: Path,
        catalog: Sequence[str] = SUPPORTED_VERSIONS,
        resolve_catalog: CatalogResolver | None = None,
    ):
        self.project_path = project_path
        self.catalog = tuple(catalog)
        self.resolve_catalog = resolve_catalog

    @property
    def latest_version(self) -> str:
        return self.catalog[-1]

    def analyze(self, to_version: str | None = None) -> UpgradeResult:
        """Report the findings for upgrading to *to_version* (default: newest).

        Raises:
            UnsupportedTargetVersionError: *to_version* is not in the catalog.
            ProjectVersionNotFoundError: The project version cannot be detected.
            PlanError: Any other planning failure.
            RuleCatalogNotFoundError: A required rule catalog is missing.
        """
        target = to_version or self.latest_version
        validate_target(self.catalog, target)

        current = VersionDetector(self.project_path).detect_version()
        if current is None:
            raise ProjectVersionNotFoundError()

        versions = plan_upgrade(self.catalog, current, target)
        logger.info("Upgrading from %s to %s via %s", current, target, ", ".join(versions))

        logger.info("Collecting project...")
        project = build_project(self.project_path)
        logger.info("Collected project")
        if logger.isEnabledFor(logging.DEBUG):
            try:
                logger.debug("%s", json.dumps(project.to_dict(), indent=2, default=str))
            except RecursionError:
                logger.debug("Project documents are nested too deeply to dump")

        all_findings = run_rules(project, versions, self.resolve_catalog)
        findings = dedupe_findings(all_findings)
        logger.info("%d finding(s), %d after deduplication", len(all_findings), len(findings))

        return UpgradeResult(
            project=project,
            from_version=current,
            to_version=target,
            versions=versions,
            findings=findings,
        )


__all__ = ["UpgradeResult", "UpgradeRunner"]
