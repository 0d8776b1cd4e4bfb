"""Prompt templates for the scan and verification passes."""

from __future__ import annotations

from ai_linter.lint.models import RawIssue

FIRST_PASS_OUTPUT_SCHEMA = """\
{
  "issues": [
    {
      "file": "path/to/file.ts",
      "line": "42",
      "severity": "error",
      "rule": "short rule name",
      "description": "what is wrong (1 sentence)"
    }
  ]
}"""

SECOND_PASS_OUTPUT_SCHEMA = """\
{
  "confirmed": true,
  "severity": "error",
  "file": "path/to/file.ts",
  "line": "42",
  "rule": "short rule name",
  "explanation": "detailed explanation of the violation and how to fix it (2-3 sentences)"
}"""

FIRST_PASS_PROMPT = """\
You are an AI linter. Your task is to check the code in the current directory \
against the rules described below.

RULES:
---
{rules}
---

Instructions:
1. Examine files in the current directory and subdirectories
2. Check the code against each rule
3. For each violation, determine the severity:
   - "error" - explicit violation of a prohibition or mandatory requirement
   - "warning" - violation of a recommendation or potential issue

Return ONLY valid JSON (no markdown):
{schema}

The "line" field can be a single line ("42") or a range ("20-45").

If there are no violations, return: {{"issues": []}}"""

SECOND_PASS_PROMPT = """\
You are an experienced code reviewer. Your task is to verify the rule violation \
found in the code against the rules described below.
Rules that have "Must" or "Have to" in it considered mandatory.
Rules with "Should" are recommendations.

RULES:
---
{rules}
---

REPORTED ISSUE:
---
File: {file}
Line: {line}
Severity: {severity}
Rule: {rule}
Description: {description}
---

Instructions:
1. Read the file mentioned in the reported issue
2. Analyze whether the described violation actually exists

If the violation IS confirmed, return ONLY valid JSON (no markdown):
{schema}

Use "error" for a violated mandatory rule and "warning" for a recommendation.
The "line" field can be a single line ("42") or a range ("20-45").

If the violation is NOT confirmed (false positive), return: {{"confirmed": false}}"""


def build_first_pass_prompt(rules_content: str) -> str:
    """Render the scan prompt for one rule file."""

    return FIRST_PASS_PROMPT.format(rules=rules_content, schema=FIRST_PASS_OUTPUT_SCHEMA)


def build_second_pass_prompt(issue: RawIssue, rules_content: str) -> str:
    """Render the verification prompt for one reported issue."""

    return SECOND_PASS_PROMPT.format(
        rules=rules_content,
        file=issue.file,
        line=issue.line,
        severity=issue.severity,
        rule=issue.rule,
        description=issue.description,
        schema=SECOND_PASS_OUTPUT_SCHEMA,
    )
