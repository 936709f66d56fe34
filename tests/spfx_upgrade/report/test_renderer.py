"""Tests for report rendering."""

from __future__ import annotations

import json
from datetime import datetime

import pytest

from spfx_upgrade.report.renderer import OutputFormat, render_report
from spfx_upgrade.upgrade.models import ResolutionType

GENERATED = datetime(2018, 7, 26, 10, 30)


@pytest.fixture()
def findings(finding_factory):
    return [
        finding_factory("FN001001", "npm i @microsoft/sp-core-library@1.5.0 -SE", title="core"),
        finding_factory(
            "FN003001",
            '{\n  "$schema": "config.2.0"\n}',
            resolution_type=ResolutionType.JSON,
            file="config/config.json",
            title="config schema",
        ),
        finding_factory(
            "FN006001",
            '{\n  "$schema": "package-solution"\n}',
            resolution_type=ResolutionType.JSON,
            file="config/package-solution.json",
        ),
        finding_factory("FN002001", "npm i @microsoft/sp-build-web@1.5.0 -DE"),
        finding_factory(
            "FN003002",
            '{\n  "version": "2.0"\n}',
            resolution_type=ResolutionType.JSON,
            file="config/config.json",
        ),
    ]


def md(findings) -> str:
    return render_report(findings, OutputFormat.MD, "1.5.0", "spfx-app", generated_at=GENERATED)


class TestJsonFormats:
    def test_machine_format_lists_full_records(self, findings) -> None:
        payload = json.loads(render_report(findings, "json", "1.5.0", "spfx-app"))
        assert len(payload) == 5
        assert payload[0] == {
            "id": "FN001001",
            "title": "core",
            "description": "description of FN001001",
            "severity": "Required",
            "file": "package.json",
            "resolutionType": "cmd",
            "resolution": "npm i @microsoft/sp-core-library@1.5.0 -SE",
        }

    def test_summary_format_lists_id_and_resolution(self, findings) -> None:
        payload = json.loads(render_report(findings, OutputFormat.TEXT, "1.5.0", "spfx-app"))
        assert payload[0] == {"id": "FN001001", "resolution": "npm i @microsoft/sp-core-library@1.5.0 -SE"}
        assert [item["id"] for item in payload] == [f.id for f in findings]

    @pytest.mark.parametrize("fmt", ["json", "text"])
    def test_empty_findings_render_empty_list(self, fmt: str) -> None:
        output = render_report([], fmt, "1.5.0", "spfx-app")
        assert output == "[]"
        assert json.loads(output) == []

    def test_unknown_format(self, findings) -> None:
        with pytest.raises(ValueError):
            render_report(findings, "xml", "1.5.0", "spfx-app")

    @pytest.mark.parametrize("fmt", list(OutputFormat))
    def test_rendering_is_deterministic(self, findings, fmt: OutputFormat) -> None:
        first = render_report(findings, fmt, "1.5.0", "spfx-app", generated_at=GENERATED)
        second = render_report(findings, fmt, "1.5.0", "spfx-app", generated_at=GENERATED)
        assert first == second


class TestMarkdown:
    def test_header(self, findings) -> None:
        lines = md(findings).splitlines()
        assert lines[0] == "# Upgrade project spfx-app to v1.5.0"
        assert lines[2] == "Date: 2018-07-26"
        assert lines[4] == "## Findings"

    def test_finding_sections(self, findings) -> None:
        report = md(findings)
        assert "### FN001001 core | Required\n\ndescription of FN001001\n\n" in report
        assert (
            "Execute the following command:\n\n"
            "```sh\nnpm i @microsoft/sp-core-library@1.5.0 -SE\n```\n\n"
            "File: [package.json](package.json)"
        ) in report
        assert (
            "In file [config/config.json](config/config.json) update the code as follows:\n\n"
            '```json\n{\n  "$schema": "config.2.0"\n}\n```\n'
        ) in report

    def test_findings_keep_input_order(self, findings) -> None:
        report = md(findings)
        positions = [report.index(f"### {f.id} ") for f in findings]
        assert positions == sorted(positions)

    def test_summary_script_concatenates_commands(self, findings) -> None:
        report = md(findings)
        assert (
            "### Execute script\n\n```sh\n"
            "npm i @microsoft/sp-core-library@1.5.0 -SE\n"
            "npm i @microsoft/sp-build-web@1.5.0 -DE\n```"
        ) in report

    def test_summary_groups_edits_per_file_in_first_seen_order(self, findings) -> None:
        summary = md(findings).split("### Modify files", 1)[1]
        config_pos = summary.index("#### [config/config.json](config/config.json)")
        solution_pos = summary.index("#### [config/package-solution.json](config/package-solution.json)")
        assert config_pos < solution_pos

        config_section = summary[config_pos:solution_pos]
        assert config_section == (
            "#### [config/config.json](config/config.json)\n\n"
            '```json\n{\n  "$schema": "config.2.0"\n}\n```\n\n'
            '```json\n{\n  "version": "2.0"\n}\n```\n\n'
        )

    def test_report_ends_with_last_edit_block(self, findings) -> None:
        assert md(findings).endswith('```json\n{\n  "$schema": "package-solution"\n}\n```')

    def test_empty_report(self) -> None:
        report = md([])
        assert "## Findings" in report
        assert "### Execute script\n\n```sh\n\n```" in report
        assert report.endswith("### Modify files")
