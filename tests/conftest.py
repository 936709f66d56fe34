from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest

from spfx_upgrade.upgrade.models import Finding, ResolutionType, Severity
from spfx_upgrade.upgrade.registry import RuleRegistry

ProjectFactory = Callable[..., Path]


def write_json(path: Path, payload: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(payload, str):
        path.write_text(payload, encoding="utf-8")
    else:
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


@pytest.fixture()
def make_project(tmp_path: Path) -> ProjectFactory:
    """Create an SPFx project tree.

    ``files`` maps project-relative paths to a JSON-serializable payload or
    raw text (used as-is, so malformed content can be written).
    """

    def _make(files: dict[str, Any] | None = None, name: str = "spfx-app") -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for relative, payload in (files or {}).items():
            write_json(root / relative, payload)
        return root

    return _make


@pytest.fixture()
def project_141(make_project: ProjectFactory) -> Path:
    """A project generated with SPFx 1.4.1."""
    return make_project(
        {
            "package.json": {
                "name": "spfx-app",
                "dependencies": {
                    "@microsoft/sp-core-library": "~1.4.1",
                    "@microsoft/sp-lodash-subset": "~1.4.1",
                    "@microsoft/sp-office-ui-fabric-core": "~1.4.1",
                    "@microsoft/sp-webpart-base": "~1.4.1",
                },
                "devDependencies": {
                    "@microsoft/sp-build-web": "~1.4.1",
                    "@microsoft/sp-module-interfaces": "~1.4.1",
                    "@microsoft/sp-webpart-workbench": "~1.4.1",
                    "gulp": "~3.9.1",
                },
            },
            ".yo-rc.json": {
                "@microsoft/generator-sharepoint": {
                    "version": "1.4.1",
                    "libraryName": "spfx-app",
                    "environment": "spo",
                }
            },
            "config/config.json": (
                "{\n"
                '  "$schema": "https://dev.office.com/json-schemas/spfx-build/config.2.0.schema.json",\n'
                '  // bundles are generated by yeoman\n'
                '  "version": "2.0",\n'
                '  "bundles": {}\n'
                "}\n"
            ),
            "config/package-solution.json": {
                "$schema": "https://dev.office.com/json-schemas/spfx-build/package-solution.schema.json",
                "solution": {"name": "spfx-app-client-side-solution"},
            },
            "src/webparts/helloWorld/HelloWorldWebPart.manifest.json": (
                "{\n"
                '  "$schema": "https://dev.office.com/json-schemas/spfx/client-side-web-part-manifest.schema.json",\n'
                '  "id": "0d6e6a1c-41d7-4c1e-9f1c-4a0b1b1f0d0a",\n'
                '  "componentType": "WebPart",\n'
                '  // The "*" signifies that the version should be taken from the package.json\n'
                '  "version": "*"\n'
                "}\n"
            ),
        }
    )


def make_finding(
    finding_id: str,
    resolution: str = "npm i pkg@1.0.0 -SE",
    *,
    resolution_type: ResolutionType = ResolutionType.CMD,
    file: str = "package.json",
    title: str = "title",
    severity: Severity = Severity.REQUIRED,
) -> Finding:
    return Finding(
        id=finding_id,
        title=title,
        description=f"description of {finding_id}",
        severity=severity,
        file=file,
        resolution_type=resolution_type,
        resolution=resolution,
    )


@pytest.fixture()
def finding_factory() -> Callable[..., Finding]:
    return make_finding


@pytest.fixture()
def clean_registry() -> Iterator[type[RuleRegistry]]:
    """Empty the rule registry for the test and restore defaults afterwards."""
    RuleRegistry.clear()
    yield RuleRegistry
    RuleRegistry.clear()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user settings directory at an empty temp location."""
    home = tmp_path / "settings-home"
    monkeypatch.setenv("SPFX_UPGRADE_HOME", str(home))
    return home
