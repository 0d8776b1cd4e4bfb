"""Adapter interface for CLI agent execution."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from ai_linter.orchestrator.envelope import Extracted


@dataclass(slots=True)
class AgentRunRequest:
    """Inputs required to execute one agent attempt."""

    prompt: str
    cwd: Path
    model: str | None = None
    verbose: bool = False


@dataclass(slots=True)
class ProcessOutcome:
    """Raw outcome of one agent process."""

    exit_code: int
    stdout: str
    stderr: str


class AgentAdapter(Protocol):
    """Per-agent knowledge of the command line and the stdout envelope."""

    name: str
    command: str
    default_fast_model: str | None
    default_review_model: str | None

    def build_args(self, prompt: str, model: str | None = None) -> list[str]:
        """Build the argument vector for a one-shot prompt in JSON output mode."""

    def extract(self, stdout: str) -> Extracted:
        """Extract the answer text or already-structured value from stdout."""
