"""Domain records shared by the lint passes and the report."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

Severity = Literal["error", "warning"]
SEVERITIES: tuple[Severity, ...] = ("error", "warning")


@dataclass(slots=True)
class RuleFile:
    """One discovered rule file and the directory it governs."""

    path: Path
    directory: Path
    content: str


@dataclass(slots=True)
class RawIssue:
    """Unverified violation reported by the first pass."""

    file: str
    line: str
    severity: Severity
    rule: str
    description: str


@dataclass(slots=True)
class FirstPassResult:
    """Issues found for one rule file."""

    rule_file: RuleFile
    issues: list[RawIssue] = field(default_factory=list)


@dataclass(slots=True)
class VerifiedIssue:
    """Violation confirmed by the second pass."""

    file: str
    line: str
    severity: Severity
    rule: str
    explanation: str
