"""Test doubles for agent execution."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from ai_linter.orchestrator.backend import AgentAdapter, AgentRunRequest
from ai_linter.orchestrator.errors import ProcessExitError

_ISSUE_FILE = re.compile(r"^File: (?P<file>.+)$", re.MULTILINE)


class FakeAgentExecutor:
    """Scripted stand-in for the subprocess runner.

    First-pass answers are keyed by the rule directory name, verification
    answers by the reported file. Directories listed in ``failing_dirs``
    always fail as a crashed agent would.
    """

    def __init__(
        self,
        *,
        first_pass: dict[str, Any] | None = None,
        verdicts: dict[str, Any] | None = None,
        failing_dirs: tuple[str, ...] = (),
    ) -> None:
        self.first_pass = first_pass or {}
        self.verdicts = verdicts or {}
        self.failing_dirs = failing_dirs
        self.requests: list[AgentRunRequest] = []

    @property
    def scan_requests(self) -> list[AgentRunRequest]:
        return [request for request in self.requests if "REPORTED ISSUE" not in request.prompt]

    @property
    def verify_requests(self) -> list[AgentRunRequest]:
        return [request for request in self.requests if "REPORTED ISSUE" in request.prompt]

    async def __call__(self, adapter: AgentAdapter, request: AgentRunRequest) -> Any:
        self.requests.append(request)
        if request.cwd.name in self.failing_dirs:
            raise ProcessExitError(command=adapter.command, exit_code=1, stderr="agent crashed")
        if "REPORTED ISSUE" in request.prompt:
            match = _ISSUE_FILE.search(request.prompt)
            assert match is not None
            verdict = self.verdicts.get(match.group("file"), {"confirmed": False})
            return verdict
        return json.dumps(self.first_pass.get(request.cwd.name, {"issues": []}))


def write_rule_file(directory: Path, content: str = "Must not use eval.") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / ".ai-linter.md"
    path.write_text(content, "utf-8")
    return path


def issue(file: str, line: str = "1", severity: str = "error", rule: str = "no-eval") -> dict:
    return {
        "file": file,
        "line": line,
        "severity": severity,
        "rule": rule,
        "description": f"{rule} violated in {file}",
    }


def confirmed(file: str, line: str = "1", severity: str = "error", rule: str = "no-eval") -> dict:
    return {
        "confirmed": True,
        "file": file,
        "line": line,
        "severity": severity,
        "rule": rule,
        "explanation": f"{file} breaks {rule}.",
    }
