"""Run rule catalogs against a project and aggregate their findings."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from spfx_upgrade.project.model import Project
from spfx_upgrade.upgrade.models import Finding
from spfx_upgrade.upgrade.registry import RuleRegistry
from spfx_upgrade.upgrade.rules.base import Rule

logger = logging.getLogger(__name__)

CatalogResolver = Callable[[str], Sequence[Rule]]


def run_rules(
    project: Project,
    versions: Sequence[str],
    resolve_catalog: CatalogResolver | None = None,
) -> list[Finding]:
    """Visit every rule of every version's catalog, in *versions* order.

    All catalogs are resolved before any rule runs, so a missing catalog
    aborts the run without producing a partial list of findings.

    Raises:
        RuleCatalogNotFoundError: A catalog for one of *versions* is missing.
    """
    resolver = resolve_catalog or RuleRegistry.get_catalog
    catalogs = [(version, resolver(version)) for version in versions]

    findings: list[Finding] = []
    for version, rules in catalogs:
        before = len(findings)
        for rule in rules:
            rule.visit(project, findings)
        logger.info(
            "Version %s: %d rule(s) raised %d finding(s)",
            version,
            len(rules),
            len(findings) - before,
        )
    return findings


def dedupe_findings(findings: Iterable[Finding]) -> list[Finding]:
    """Keep the first finding for each id, preserving input order."""
    seen: set[str] = set()
    unique: list[Finding] = []
    for finding in findings:
        if finding.id in seen:
            continue
        seen.add(finding.id)
        unique.append(finding)
    return unique


__all__ = ["CatalogResolver", "dedupe_findings", "run_rules"]
