"""Project model, document reader and builder."""

from __future__ import annotations

from .builder import build_project
from .model import ABSENT, Manifest, Project, is_present
from .reader import read_document, strip_single_line_comments

__all__ = [
    "ABSENT",
    "Manifest",
    "Project",
    "build_project",
    "is_present",
    "read_document",
    "strip_single_line_comments",
]
