"""Shared constants for SharePoint Framework project layout."""

from __future__ import annotations

# Ascending. Ordering is list position, never semantic-version comparison.
SUPPORTED_VERSIONS: tuple[str, ...] = (
    "1.4.1",
    "1.5.0",
)

PACKAGE_JSON = "package.json"
YO_RC_JSON = ".yo-rc.json"
SRC_DIR = "src"
MANIFEST_SUFFIX = ".manifest.json"

GENERATOR_KEY = "@microsoft/generator-sharepoint"
CORE_LIBRARY_PACKAGE = "@microsoft/sp-core-library"

# Project slot name -> path relative to the project root.
DOCUMENT_PATHS: dict[str, str] = {
    "config_json": "config/config.json",
    "copy_assets_json": "config/copy-assets.json",
    "deploy_azure_storage_json": "config/deploy-azure-storage.json",
    "package_json": PACKAGE_JSON,
    "package_solution_json": "config/package-solution.json",
    "serve_json": "config/serve.json",
    "tsconfig_json": "tsconfig.json",
    "tslint_json": "config/tslint.json",
    "write_manifests_json": "config/write-manifests.json",
    "yo_rc_json": YO_RC_JSON,
}

__all__ = [
    "CORE_LIBRARY_PACKAGE",
    "DOCUMENT_PATHS",
    "GENERATOR_KEY",
    "MANIFEST_SUFFIX",
    "PACKAGE_JSON",
    "SRC_DIR",
    "SUPPORTED_VERSIONS",
    "YO_RC_JSON",
]
