"""Rules for upgrading a project to SharePoint Framework 1.5.0."""

from __future__ import annotations

from typing import List

from spfx_upgrade.upgrade.models import Severity
from spfx_upgrade.upgrade.rules.base import Rule
from spfx_upgrade.upgrade.rules.families import (
    DependencyRule,
    DevDependencyRule,
    JsonPropertyRule,
    JsonSchemaRule,
    ManifestSchemaRule,
)

VERSION = "1.5.0"

SCHEMA_ROOT = "https://developer.microsoft.com/json-schemas"

RULES: List[Rule] = [
    DependencyRule("FN001001", "@microsoft/sp-core-library", VERSION, optional=False),
    DependencyRule("FN001002", "@microsoft/sp-lodash-subset", VERSION, optional=False),
    DependencyRule("FN001003", "@microsoft/sp-office-ui-fabric-core", VERSION, optional=False),
    DependencyRule("FN001004", "@microsoft/sp-webpart-base", VERSION),
    DependencyRule("FN001005", "@types/react", "15.6.6"),
    DependencyRule("FN001006", "@types/react-dom", "15.5.6"),
    DependencyRule("FN001007", "@types/webpack-env", "1.13.1"),
    DependencyRule("FN001008", "react", "15.6.2"),
    DependencyRule("FN001009", "react-dom", "15.6.2"),
    DependencyRule("FN001010", "@types/es6-promise", "0.0.33"),
    DependencyRule("FN001011", "@microsoft/sp-dialog", VERSION),
    DependencyRule("FN001012", "@microsoft/sp-application-base", VERSION),
    DependencyRule("FN001013", "@microsoft/decorators", VERSION),
    DevDependencyRule("FN002001", "@microsoft/sp-build-web", VERSION, optional=False),
    DevDependencyRule("FN002002", "@microsoft/sp-module-interfaces", VERSION, optional=False),
    DevDependencyRule("FN002003", "@microsoft/sp-webpart-workbench", VERSION, optional=False),
    DevDependencyRule("FN002004", "gulp", "~3.9.1"),
    DevDependencyRule("FN002005", "@types/chai", "3.4.34"),
    DevDependencyRule("FN002006", "@types/mocha", "2.2.38"),
    DevDependencyRule("FN002007", "ajv", "~5.2.2"),
    JsonSchemaRule("FN003001", "config_json", f"{SCHEMA_ROOT}/spfx-build/config.2.0.schema.json"),
    JsonPropertyRule(
        "FN003002",
        "config_json",
        ("version",),
        "2.0",
        title="config.json version",
        description="Update config.json version number",
    ),
    JsonSchemaRule("FN004001", "copy_assets_json", f"{SCHEMA_ROOT}/spfx-build/copy-assets.schema.json"),
    JsonSchemaRule(
        "FN005001",
        "deploy_azure_storage_json",
        f"{SCHEMA_ROOT}/spfx-build/deploy-azure-storage.schema.json",
    ),
    JsonSchemaRule(
        "FN006001",
        "package_solution_json",
        f"{SCHEMA_ROOT}/spfx-build/package-solution.schema.json",
    ),
    JsonPropertyRule(
        "FN006002",
        "package_solution_json",
        ("solution", "includeClientSideAssets"),
        True,
        title="package-solution.json includeClientSideAssets",
        description=(
            "Package client-side assets with the solution so that they can be "
            "deployed to the tenant app catalog"
        ),
        severity=Severity.RECOMMENDED,
        only_if_missing=True,
    ),
    JsonSchemaRule("FN007001", "serve_json", f"{SCHEMA_ROOT}/core-build/serve.schema.json"),
    JsonSchemaRule(
        "FN009001",
        "write_manifests_json",
        f"{SCHEMA_ROOT}/spfx-build/write-manifests.schema.json",
    ),
    JsonPropertyRule(
        "FN010001",
        "yo_rc_json",
        ("@microsoft/generator-sharepoint", "version"),
        VERSION,
        title=".yo-rc.json version",
        description="Update version in .yo-rc.json",
        severity=Severity.RECOMMENDED,
    ),
    ManifestSchemaRule(
        "FN011001",
        "WebPart",
        f"{SCHEMA_ROOT}/spfx/client-side-web-part-manifest.schema.json",
    ),
    ManifestSchemaRule(
        "FN011002",
        "Extension",
        f"{SCHEMA_ROOT}/spfx/client-side-extension-manifest.schema.json",
    ),
]

__all__ = ["RULES", "VERSION"]
