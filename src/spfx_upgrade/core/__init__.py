"""Core constants, path discovery and settings."""

from .constants import DOCUMENT_PATHS, MANIFEST_SUFFIX, SUPPORTED_VERSIONS
from .paths import locate_project_root

__all__ = [
    "DOCUMENT_PATHS",
    "MANIFEST_SUFFIX",
    "SUPPORTED_VERSIONS",
    "locate_project_root",
]
