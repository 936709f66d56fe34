"""Assemble a :class:`Project` from the files under a project root."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from spfx_upgrade.core.constants import DOCUMENT_PATHS, MANIFEST_SUFFIX, SRC_DIR
from spfx_upgrade.project.model import Document, Manifest, Project, is_present
from spfx_upgrade.project.reader import read_document

logger = logging.getLogger(__name__)


def find_manifest_files(src_dir: Path) -> list[Path]:
    """Return every manifest file below *src_dir* in a stable order.

    Directories are visited depth-first with entries sorted by name, so the
    result does not depend on filesystem enumeration order. A missing
    directory yields an empty list.
    """
    if not src_dir.is_dir():
        return []

    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(src_dir):
        dirnames.sort()
        for filename in sorted(filenames):
            if filename.endswith(MANIFEST_SUFFIX):
                found.append(Path(dirpath) / filename)
    return found


def read_manifests(project_root: Path) -> list[Manifest]:
    manifests: list[Manifest] = []
    for manifest_path in find_manifest_files(project_root / SRC_DIR):
        document = read_document(manifest_path)
        if not is_present(document):
            continue
        manifests.append(Manifest(path=manifest_path, data=document))
    return manifests


def build_project(project_root: Path) -> Project:
    """Read every known configuration document below *project_root*.

    This never fails: documents that cannot be read are left absent.
    """
    root = project_root.resolve()
    documents: dict[str, Document] = {}
    for slot, relative in DOCUMENT_PATHS.items():
        document = read_document(root / relative)
        if is_present(document):
            documents[slot] = document
        else:
            logger.debug("Document %s not available", relative)

    manifests = read_manifests(root)
    logger.debug("Collected %d document(s) and %d manifest(s)", len(documents), len(manifests))
    return Project(path=root, manifests=tuple(manifests), **documents)


__all__ = ["build_project", "find_manifest_files", "read_manifests"]
