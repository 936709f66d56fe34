"""Render upgrade findings as JSON, a summary list or a Markdown report.

Rendering is a pure function of its arguments. The Markdown report embeds a
generation date, which callers can pin through ``generated_at``.
"""

from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from typing import Sequence

from spfx_upgrade.upgrade.models import Finding, ResolutionType

EOL = "\n"


class OutputFormat(str, Enum):
    JSON = "json"  # full finding records
    TEXT = "text"  # id and resolution only
    MD = "md"      # narrative Markdown report


def render_report(
    findings: Sequence[Finding],
    output_format: OutputFormat | str,
    to_version: str,
    project_name: str,
    generated_at: datetime | None = None,
) -> str:
    """Serialize *findings* in *output_format*."""
    fmt = OutputFormat(output_format)
    if fmt is OutputFormat.JSON:
        return json.dumps([finding.to_dict() for finding in findings], indent=2)
    if fmt is OutputFormat.TEXT:
        return json.dumps([finding.to_summary() for finding in findings], indent=2)
    return render_markdown(findings, to_version, project_name, generated_at)


def _resolution_block(finding: Finding) -> str:
    if finding.resolution_type == ResolutionType.CMD:
        return f"Execute the following command:{EOL}{EOL}```sh{EOL}{finding.resolution}{EOL}```{EOL}"
    return (
        f"In file [{finding.file}]({finding.file}) update the code as follows:{EOL}{EOL}"
        f"```{finding.resolution_type}{EOL}{finding.resolution}{EOL}```{EOL}"
    )


def render_markdown(
    findings: Sequence[Finding],
    to_version: str,
    project_name: str,
    generated_at: datetime | None = None,
) -> str:
    """Build the narrative report: per-finding steps, then a summary.

    The summary concatenates every command into one script and groups edits
    per file, files in order of first appearance, edits in finding order.
    """
    generated = generated_at or datetime.now().astimezone()

    commands: list[str] = []
    steps: list[str] = []
    edits_per_file: dict[str, list[str]] = {}
    edit_type_per_file: dict[str, str] = {}

    for finding in findings:
        if finding.resolution_type == ResolutionType.CMD:
            commands.append(finding.resolution)
        else:
            edits_per_file.setdefault(finding.file, []).append(finding.resolution)
            edit_type_per_file.setdefault(finding.file, str(finding.resolution_type))

        steps.append(
            "".join(
                [
                    f"### {finding.id} {finding.title} | {finding.severity}{EOL}",
                    EOL,
                    f"{finding.description}{EOL}",
                    EOL,
                    _resolution_block(finding),
                    EOL,
                    f"File: [{finding.file}]({finding.file}){EOL}",
                    EOL,
                ]
            )
        )

    modified_files = EOL.join(
        "".join(
            [
                f"#### [{file}]({file}){EOL}",
                EOL,
                (EOL + EOL).join(
                    f"```{edit_type_per_file[file]}{EOL}{edit}{EOL}```" for edit in edits
                ),
                EOL,
            ]
        )
        for file, edits in edits_per_file.items()
    )

    parts = [
        f"# Upgrade project {project_name} to v{to_version}{EOL}",
        EOL,
        f"Date: {generated.strftime('%Y-%m-%d')}{EOL}",
        EOL,
        f"## Findings{EOL}",
        EOL,
        "Following is the list of steps required to upgrade your project to "
        f"SharePoint Framework version {to_version}.{EOL}",
        EOL,
        "".join(steps),
        f"## Summary{EOL}",
        EOL,
        f"### Execute script{EOL}",
        EOL,
        f"```sh{EOL}",
        EOL.join(commands),
        EOL,
        f"```{EOL}",
        EOL,
        f"### Modify files{EOL}",
        EOL,
        modified_files,
        EOL,
    ]
    return "".join(parts).strip()


__all__ = ["OutputFormat", "render_markdown", "render_report"]
