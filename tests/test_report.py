from __future__ import annotations

from datetime import datetime

import allure

from ai_linter.lint.models import VerifiedIssue
from ai_linter.lint.report import generate_report

pytestmark = [
    allure.epic("Lint Pipeline"),
    allure.feature("Report"),
]

_GENERATED_AT = datetime(2026, 3, 1, 12, 30, 0)


def _verified(file: str, line: str, severity: str, rule: str = "no-eval") -> VerifiedIssue:
    return VerifiedIssue(
        file=file,
        line=line,
        severity=severity,  # type: ignore[arg-type]
        rule=rule,
        explanation=f"Fix {rule} in {file}.",
    )


def test_report_header_and_counts() -> None:
    report = generate_report(
        [_verified("a.ts", "10", "error"), _verified("b.ts", "20-30", "warning")],
        "/work/project",
        generated_at=_GENERATED_AT,
    )

    lines = report.splitlines()
    assert lines[0] == "# AI Linter Report"
    assert "**Project:** /work/project" in lines
    assert "**Date:** 2026-03-01 12:30:00" in lines
    assert "**Found:** 1 error, 1 warning" in lines


def test_report_groups_by_severity_then_file() -> None:
    report = generate_report(
        [
            _verified("src/z.ts", "3", "error", rule="no-any"),
            _verified("src/a.ts", "10", "error"),
            _verified("src/a.ts", "20-30", "warning", rule="small functions"),
            _verified("src/z.ts", "1", "error"),
        ],
        "/work/project",
        generated_at=_GENERATED_AT,
    )

    assert "**Found:** 3 errors, 1 warning" in report
    assert report.index("## Errors") < report.index("## Warnings")
    errors, warnings = report.split("## Warnings")
    assert errors.index("### `src/a.ts`") < errors.index("### `src/z.ts`")
    assert "- **Line 10** [no-eval]: Fix no-eval in src/a.ts." in errors
    assert (
        "### `src/z.ts`\n\n"
        "- **Line 3** [no-any]: Fix no-any in src/z.ts.\n"
        "- **Line 1** [no-eval]: Fix no-eval in src/z.ts."
    ) in errors
    assert "- **Lines 20-30** [small functions]: Fix small functions in src/a.ts." in warnings


def test_empty_report_has_no_sections() -> None:
    report = generate_report([], "/work/project", generated_at=_GENERATED_AT)

    assert "**Found:** 0 errors, 0 warnings" in report
    assert "## Errors" not in report
    assert "## Warnings" not in report


def test_warnings_only_report_omits_errors_section() -> None:
    report = generate_report(
        [_verified("a.ts", "5", "warning")],
        "/work/project",
        generated_at=_GENERATED_AT,
    )

    assert "**Found:** 0 errors, 1 warning" in report
    assert "## Errors" not in report
    assert "## Warnings" in report
