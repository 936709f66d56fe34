"""Reusable rule families.

Each version catalog instantiates these with the package versions and
schema URLs of that SharePoint Framework release.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, List, Sequence

from spfx_upgrade.core.constants import DOCUMENT_PATHS, PACKAGE_JSON
from spfx_upgrade.project.model import Project
from spfx_upgrade.upgrade.models import Finding, ResolutionType, Severity
from spfx_upgrade.upgrade.rules.base import Rule

_MISSING = object()


def json_fragment(path: Sequence[str], value: Any) -> str:
    """Render ``value`` nested under *path* as an indented JSON fragment."""
    payload: Any = value
    for key in reversed(path):
        payload = {key: payload}
    return json.dumps(payload, indent=2)


def _lookup(document: Any, path: Sequence[str]) -> Any:
    current = document
    for key in path:
        if not isinstance(current, Mapping) or key not in current:
            return _MISSING
        current = current[key]
    return current


class DependencyRule(Rule):
    """A package.json dependency that must be at an exact version.

    When *optional* is True, projects that do not use the package are left
    alone; otherwise a missing package is reported too.
    """

    section = "dependencies"
    install_flag = "-SE"

    def __init__(self, rule_id: str, package_name: str, package_version: str, optional: bool = True):
        self._id = rule_id
        self.package_name = package_name
        self.package_version = package_version
        self.optional = optional

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return f"{self.package_name} {self.package_version}"

    @property
    def description(self) -> str:
        kind = "dev dependency" if self.section == "devDependencies" else "dependency"
        return f"Upgrade SharePoint Framework {kind} package {self.package_name}"

    @property
    def resolution_type(self) -> ResolutionType:
        return ResolutionType.CMD

    @property
    def file(self) -> str:
        return PACKAGE_JSON

    def visit(self, project: Project, findings: List[Finding]) -> None:
        if not isinstance(project.package_json, Mapping):
            return

        installed = _lookup(project.package_json, (self.section, self.package_name))
        if installed is _MISSING and self.optional:
            return
        if installed == self.package_version:
            return

        self._add_finding(
            findings,
            f"npm i {self.package_name}@{self.package_version} {self.install_flag}",
        )


class DevDependencyRule(DependencyRule):
    section = "devDependencies"
    install_flag = "-DE"


class JsonPropertyRule(Rule):
    """A property of a configuration document that must hold a given value.

    With *only_if_missing* the rule fires only when the property is absent,
    leaving values the user deliberately changed untouched. Nothing is
    reported for a document that does not exist.
    """

    def __init__(
        self,
        rule_id: str,
        slot: str,
        property_path: Sequence[str],
        expected: Any,
        title: str,
        description: str,
        severity: Severity = Severity.REQUIRED,
        only_if_missing: bool = False,
    ):
        if slot not in DOCUMENT_PATHS:
            raise ValueError(f"Unknown project document slot: {slot}")
        self._id = rule_id
        self.slot = slot
        self.property_path = tuple(property_path)
        self.expected = expected
        self._title = title
        self._description = description
        self._severity = severity
        self.only_if_missing = only_if_missing

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def severity(self) -> Severity:
        return self._severity

    @property
    def resolution_type(self) -> ResolutionType:
        return ResolutionType.JSON

    @property
    def file(self) -> str:
        return DOCUMENT_PATHS[self.slot]

    def visit(self, project: Project, findings: List[Finding]) -> None:
        document = getattr(project, self.slot)
        if not isinstance(document, Mapping):
            return

        current = _lookup(document, self.property_path)
        if self.only_if_missing:
            if current is not _MISSING:
                return
        elif current == self.expected:
            return

        self._add_finding(findings, json_fragment(self.property_path, self.expected))


class JsonSchemaRule(JsonPropertyRule):
    """A configuration document must reference the release's ``$schema``."""

    def __init__(self, rule_id: str, slot: str, schema_url: str):
        file = DOCUMENT_PATHS.get(slot, slot)
        super().__init__(
            rule_id,
            slot,
            ("$schema",),
            schema_url,
            title=f"{file} schema",
            description=f"Update {file} schema URL",
        )


class ManifestSchemaRule(Rule):
    """Component manifests of one type must reference the release's schema.

    One finding is raised per non-conforming manifest, each against that
    manifest's own path.
    """

    def __init__(self, rule_id: str, component_type: str, schema_url: str):
        self._id = rule_id
        self.component_type = component_type
        self.schema_url = schema_url

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return f"{self.component_type} manifest schema"

    @property
    def description(self) -> str:
        return f"Update schema in {self.component_type} manifest"

    @property
    def resolution_type(self) -> ResolutionType:
        return ResolutionType.JSON

    @property
    def file(self) -> str:
        return "src"

    def visit(self, project: Project, findings: List[Finding]) -> None:
        for manifest in project.manifests:
            if manifest.component_type != self.component_type:
                continue
            if manifest.get("$schema") == self.schema_url:
                continue
            self._add_finding(
                findings,
                json_fragment(("$schema",), self.schema_url),
                file=project.relative_path(manifest.path),
            )


__all__ = [
    "DependencyRule",
    "DevDependencyRule",
    "JsonPropertyRule",
    "JsonSchemaRule",
    "ManifestSchemaRule",
    "json_fragment",
]
