"""Markdown report for confirmed issues."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from ai_linter.lint.models import Severity, VerifiedIssue

_SECTION_TITLES: dict[Severity, str] = {
    "error": "Errors",
    "warning": "Warnings",
}


def generate_report(
    issues: Sequence[VerifiedIssue],
    project_path: Path | str,
    *,
    generated_at: datetime | None = None,
) -> str:
    """Render confirmed issues grouped by severity, then by file."""

    timestamp = (generated_at or datetime.now().astimezone()).strftime("%Y-%m-%d %H:%M:%S")
    errors = sum(1 for issue in issues if issue.severity == "error")
    warnings = len(issues) - errors

    lines = [
        "# AI Linter Report",
        "",
        f"**Project:** {project_path}",
        f"**Date:** {timestamp}",
        f"**Found:** {_plural(errors, 'error')}, {_plural(warnings, 'warning')}",
        "",
    ]
    for severity, title in _SECTION_TITLES.items():
        section = [issue for issue in issues if issue.severity == severity]
        if section:
            lines.extend(_render_section(title, section))
    return "\n".join(lines)


def _render_section(title: str, issues: list[VerifiedIssue]) -> list[str]:
    by_file: dict[str, list[VerifiedIssue]] = {}
    for issue in issues:
        by_file.setdefault(issue.file, []).append(issue)

    lines = [f"## {title}", ""]
    for file in sorted(by_file):
        lines.extend([f"### `{file}`", ""])
        for issue in by_file[file]:
            lines.append(f"- {_format_line(issue.line)} [{issue.rule}]: {issue.explanation}")
        lines.append("")
    return lines


def _format_line(line: str) -> str:
    if "-" in line:
        return f"**Lines {line}**"
    return f"**Line {line}**"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"
