"""Immutable in-memory model of one SharePoint Framework project.

Every optional configuration document is either a parsed JSON value or the
``ABSENT`` marker. ``ABSENT`` is distinct from JSON ``null``, ``{}`` and
``[]`` so rules can tell a missing file from an empty one.

Documents are deep-frozen when the model is constructed: objects become
read-only mappings and arrays become tuples. Rules only ever read a
``Project``; changes are reported as findings.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Final, Iterator, Literal, Union


class _AbsentType(Enum):
    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Final = _AbsentType.ABSENT
Absent = Literal[_AbsentType.ABSENT]
Document = Union[Any, Absent]


def is_present(document: Document) -> bool:
    """Return True unless *document* is the ``ABSENT`` marker."""
    return document is not ABSENT


def _rebuild(
    value: Any,
    sequence_types: tuple[type, ...],
    make_mapping: Callable[[dict[Any, Any]], Any],
    make_sequence: Callable[[list[Any]], Any],
) -> Any:
    """Rebuild nested containers bottom-up with an explicit stack.

    Documents may nest deeper than the interpreter recursion limit, so no
    call recurses per level.
    """

    def is_container(node: Any) -> bool:
        return isinstance(node, Mapping) or isinstance(node, sequence_types)

    def children(node: Any) -> Iterator[tuple[Any, Any]]:
        if isinstance(node, Mapping):
            return iter(list(node.items()))
        return ((None, item) for item in node)

    if not is_container(value):
        return value

    result: list[Any] = []
    # Frames are (key in parent, node, pending children, rebuilt children).
    stack: list[tuple[Any, Any, Iterator[tuple[Any, Any]], list[tuple[Any, Any]]]] = [
        (None, value, children(value), [])
    ]
    while stack:
        key, node, pending, built = stack[-1]
        for child_key, child in pending:
            if is_container(child):
                stack.append((child_key, child, children(child), []))
                break
            built.append((child_key, child))
        else:
            stack.pop()
            if isinstance(node, Mapping):
                finished = make_mapping(dict(built))
            else:
                finished = make_sequence([item for _, item in built])
            if stack:
                stack[-1][3].append((key, finished))
            else:
                result.append(finished)
    return result[0]


def freeze(value: Any) -> Any:
    """Return a recursively read-only copy of a parsed JSON value."""
    return _rebuild(value, (list, tuple), MappingProxyType, tuple)


def thaw(value: Any) -> Any:
    """Inverse of :func:`freeze`, producing plain dicts and lists."""
    return _rebuild(value, (tuple,), dict, list)


@dataclass(frozen=True)
class Manifest:
    """A parsed component manifest and the absolute path it was read from."""

    path: Path
    data: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", freeze(self.data))

    def get(self, key: str, default: Any = None) -> Any:
        if isinstance(self.data, Mapping):
            return self.data.get(key, default)
        return default

    @property
    def component_type(self) -> str | None:
        value = self.get("componentType")
        return value if isinstance(value, str) else None


@dataclass(frozen=True)
class Project:
    """Snapshot of the configuration documents of one project."""

    path: Path
    config_json: Document = ABSENT
    copy_assets_json: Document = ABSENT
    deploy_azure_storage_json: Document = ABSENT
    package_json: Document = ABSENT
    package_solution_json: Document = ABSENT
    serve_json: Document = ABSENT
    tsconfig_json: Document = ABSENT
    tslint_json: Document = ABSENT
    write_manifests_json: Document = ABSENT
    yo_rc_json: Document = ABSENT
    manifests: tuple[Manifest, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for name in DOCUMENT_SLOTS:
            value = getattr(self, name)
            if is_present(value):
                object.__setattr__(self, name, freeze(value))
        object.__setattr__(self, "manifests", tuple(self.manifests))

    @property
    def name(self) -> str:
        return self.path.name

    def relative_path(self, path: Path) -> str:
        """Return *path* relative to the project root using forward slashes."""
        try:
            return path.relative_to(self.path).as_posix()
        except ValueError:
            return path.as_posix()

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view of the snapshot, used for debug output."""
        payload: dict[str, Any] = {"path": str(self.path)}
        for name in DOCUMENT_SLOTS:
            value = getattr(self, name)
            if is_present(value):
                payload[name] = thaw(value)
        payload["manifests"] = [
            {"path": str(manifest.path), "data": thaw(manifest.data)}
            for manifest in self.manifests
        ]
        return payload


DOCUMENT_SLOTS: tuple[str, ...] = (
    "config_json",
    "copy_assets_json",
    "deploy_azure_storage_json",
    "package_json",
    "package_solution_json",
    "serve_json",
    "tsconfig_json",
    "tslint_json",
    "write_manifests_json",
    "yo_rc_json",
)


__all__ = [
    "ABSENT",
    "Absent",
    "DOCUMENT_SLOTS",
    "Document",
    "Manifest",
    "Project",
    "freeze",
    "is_present",
    "thaw",
]
