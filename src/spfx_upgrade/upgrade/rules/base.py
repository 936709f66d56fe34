"""Base class for upgrade rules.

A rule inspects a :class:`Project` and appends zero or more findings to the
list it is given. Rules never modify the project and keep no state beyond
the parameters they were constructed with, so one instance can be visited
any number of times.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from spfx_upgrade.project.model import Project
from spfx_upgrade.upgrade.models import Finding, ResolutionType, Severity


class Rule(ABC):
    """Abstract base for a single detectable upgrade condition."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Stable identifier, also the deduplication key of the findings."""

    @property
    @abstractmethod
    def title(self) -> str: ...

    @property
    @abstractmethod
    def description(self) -> str: ...

    @property
    @abstractmethod
    def resolution_type(self) -> ResolutionType: ...

    @property
    def severity(self) -> Severity:
        return Severity.REQUIRED

    @property
    @abstractmethod
    def file(self) -> str:
        """Project-relative path the rule reports against."""

    @abstractmethod
    def visit(self, project: Project, findings: List[Finding]) -> None:
        """Inspect *project* and append any findings to *findings*."""

    def _add_finding(
        self,
        findings: List[Finding],
        resolution: str,
        file: str | None = None,
    ) -> None:
        findings.append(
            Finding(
                id=self.id,
                title=self.title,
                description=self.description,
                severity=self.severity,
                file=file or self.file,
                resolution_type=self.resolution_type,
                resolution=resolution,
            )
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"


__all__ = ["Rule"]
