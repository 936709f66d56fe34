"""Tolerant reader for JSON configuration documents.

Several SharePoint Framework configuration files allow ``//`` comments,
which the JSON parser rejects, so comments are stripped before parsing.
A document that is missing, unreadable or malformed is reported as
``ABSENT``; it is never an error.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from spfx_upgrade.project.model import ABSENT, Document

logger = logging.getLogger(__name__)


def strip_single_line_comments(text: str) -> str:
    """Remove ``//`` comments that are outside JSON string literals.

    Line breaks are kept so parser error positions still point at the
    original line.
    """
    out: list[str] = []
    in_string = False
    escaped = False
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if in_string:
            out.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            i += 1
            continue

        if char == '"':
            in_string = True
            out.append(char)
            i += 1
            continue

        if char == "/" and i + 1 < length and text[i + 1] == "/":
            newline = text.find("\n", i)
            if newline == -1:
                break
            i = newline
            continue

        out.append(char)
        i += 1

    return "".join(out)


def read_document(path: Path) -> Document:
    """Parse the JSON document at *path* or return ``ABSENT``."""
    try:
        if not path.is_file():
            return ABSENT
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Skipping unreadable document %s: %s", path, exc)
        return ABSENT

    try:
        return json.loads(strip_single_line_comments(text))
    except (ValueError, RecursionError) as exc:
        logger.debug("Skipping malformed document %s: %s", path, exc)
        return ABSENT


__all__ = ["read_document", "strip_single_line_comments"]
