"""spfx-upgrade analysis: version planning, rule catalogs and findings."""

from __future__ import annotations

from .detector import VersionDetector
from .engine import dedupe_findings, run_rules
from .models import Finding, ResolutionType, Severity
from .planner import plan_upgrade
from .registry import RuleRegistry
from .runner import UpgradeResult, UpgradeRunner

__all__ = [
    "Finding",
    "ResolutionType",
    "RuleRegistry",
    "Severity",
    "UpgradeResult",
    "UpgradeRunner",
    "VersionDetector",
    "dedupe_findings",
    "plan_upgrade",
    "run_rules",
]
