"""Structural validation of pass payloads."""

from __future__ import annotations

import logging
from typing import Any

from ai_linter.lint.models import SEVERITIES, RawIssue, VerifiedIssue
from ai_linter.orchestrator.retry import ValidationResult

logger = logging.getLogger(__name__)


def validate_first_pass_payload(payload: Any) -> ValidationResult[list[RawIssue]]:
    """Require ``{"issues": [...]}``; drop items that are not well-formed issues."""

    if not isinstance(payload, dict):
        return ValidationResult.invalid("First pass output must be a JSON object.")
    raw_issues = payload.get("issues")
    if not isinstance(raw_issues, list):
        return ValidationResult.invalid("First pass output must contain issues array.")

    issues: list[RawIssue] = []
    for index, item in enumerate(raw_issues):
        issue = _parse_raw_issue(item)
        if issue is None:
            logger.warning("Skipping malformed issues[%d]: %r", index, item)
            continue
        issues.append(issue)
    return ValidationResult.ok(issues)


def validate_second_pass_payload(payload: Any) -> ValidationResult[VerifiedIssue | None]:  # noqa: PLR0911
    """Require ``{"confirmed": bool, ...}``; a false positive validates to ``None``."""

    if not isinstance(payload, dict):
        return ValidationResult.invalid("Second pass output must be a JSON object.")
    confirmed = payload.get("confirmed")
    if not isinstance(confirmed, bool):
        return ValidationResult.invalid("Second pass output must contain boolean 'confirmed'.")
    if not confirmed:
        return ValidationResult.ok(None)

    severity = payload.get("severity")
    if severity not in SEVERITIES:
        return ValidationResult.invalid(
            f"Confirmed issue severity must be 'error' or 'warning', got {severity!r}.",
        )
    line = _normalize_line(payload.get("line"))
    if line is None:
        return ValidationResult.invalid("Confirmed issue must contain 'line'.")
    for key in ("file", "rule", "explanation"):
        if not isinstance(payload.get(key), str) or not payload[key].strip():
            return ValidationResult.invalid(f"Confirmed issue must contain string '{key}'.")

    return ValidationResult.ok(
        VerifiedIssue(
            file=payload["file"].strip(),
            line=line,
            severity=severity,
            rule=payload["rule"].strip(),
            explanation=payload["explanation"].strip(),
        ),
    )


def _parse_raw_issue(item: object) -> RawIssue | None:
    if not isinstance(item, dict):
        return None
    line = _normalize_line(item.get("line"))
    severity = item.get("severity")
    if line is None or severity not in SEVERITIES:
        return None
    if not all(isinstance(item.get(key), str) for key in ("file", "rule", "description")):
        return None
    return RawIssue(
        file=item["file"],
        line=line,
        severity=severity,
        rule=item["rule"],
        description=item["description"],
    )


def _normalize_line(value: object) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None
