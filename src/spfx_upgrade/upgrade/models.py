"""Finding model shared by rules, the aggregator and the report renderer."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResolutionType(str, Enum):
    """How a finding's resolution is meant to be applied."""

    CMD = "cmd"    # a command line to run
    JSON = "json"  # a JSON fragment to merge into ``file``


class Severity(str, Enum):
    REQUIRED = "Required"
    RECOMMENDED = "Recommended"
    OPTIONAL = "Optional"


class Finding(BaseModel):
    """One change required to upgrade the project.

    ``id`` identifies the rule that raised the finding and is the
    deduplication key.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    id: str = Field(..., min_length=1, description="Rule identifier, e.g. FN001001")
    title: str = Field(..., description="Short human-readable title")
    description: str = Field(..., description="What needs to change and why")
    severity: Severity = Field(..., description="Required | Recommended | Optional")
    file: str = Field(..., description="Project-relative path the finding applies to")
    resolution_type: ResolutionType = Field(..., alias="resolutionType")
    resolution: str = Field(..., description="Command line or JSON fragment")

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the public camelCase field names."""
        return self.model_dump(by_alias=True, mode="json")

    def to_summary(self) -> dict[str, str]:
        return {"id": self.id, "resolution": self.resolution}


__all__ = ["Finding", "ResolutionType", "Severity"]
