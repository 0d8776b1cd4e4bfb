"""Runtime configuration for agent execution and rule scanning."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from ai_linter.orchestrator.routing import SUPPORTED_AGENTS

DEFAULT_RULE_FILE_NAME = ".ai-linter.md"
DEFAULT_EXCLUDED_DIRS: tuple[str, ...] = ("node_modules",)
DEFAULT_OUTPUT_PATH = Path("ai-linter-report.md")


@dataclass(slots=True)
class AgentSettings:
    """Agent selection, models and execution limits."""

    name: str = "claude"
    model_fast: str | None = None
    model_review: str | None = None
    max_retries: int = 3
    concurrency: int = 5
    verbose: bool = False


@dataclass(slots=True)
class ScanSettings:
    """Rule-file discovery and report output settings."""

    rule_file_name: str = DEFAULT_RULE_FILE_NAME
    excluded_dirs: tuple[str, ...] = DEFAULT_EXCLUDED_DIRS
    output_path: Path = DEFAULT_OUTPUT_PATH


@dataclass(slots=True)
class Settings:
    """Application settings grouped by concern."""

    project_path: Path = Path()
    agent: AgentSettings = field(default_factory=AgentSettings)
    scan: ScanSettings = field(default_factory=ScanSettings)

    @classmethod
    def from_env(cls, project_path: Path | None = None) -> Settings:
        """Load settings from ``AI_LINTER_*`` environment variables with defaults."""

        return cls(
            project_path=project_path or Path(os.getenv("AI_LINTER_PROJECT_PATH", ".")),
            agent=AgentSettings(
                name=os.getenv("AI_LINTER_AGENT", "claude").strip().lower(),
                model_fast=_env_optional("AI_LINTER_MODEL_FAST"),
                model_review=_env_optional("AI_LINTER_MODEL_REVIEW"),
                max_retries=_env_int("AI_LINTER_MAX_RETRIES", 3),
                concurrency=_env_int("AI_LINTER_CONCURRENCY", 5),
                verbose=_env_bool("AI_LINTER_VERBOSE", default=False),
            ),
            scan=ScanSettings(
                rule_file_name=os.getenv("AI_LINTER_RULE_FILE_NAME", DEFAULT_RULE_FILE_NAME),
                excluded_dirs=_collect_excluded_dirs(),
                output_path=Path(os.getenv("AI_LINTER_OUTPUT", str(DEFAULT_OUTPUT_PATH))),
            ),
        )

    def validate(self) -> None:
        """Raise configuration error for values the pipeline cannot run with."""

        if self.agent.name not in SUPPORTED_AGENTS:
            raise ValueError(
                f"Unsupported agent {self.agent.name!r}. Set AI_LINTER_AGENT or pass "
                f"--agent with one of: {', '.join(SUPPORTED_AGENTS)}.",
            )
        if self.agent.concurrency < 1:
            raise ValueError(
                f"Concurrency must be a positive integer, got: {self.agent.concurrency}",
            )
        if self.agent.max_retries < 1:
            raise ValueError(
                f"Max retries must be a positive integer, got: {self.agent.max_retries}",
            )
        if not self.scan.rule_file_name.strip():
            raise ValueError("AI_LINTER_RULE_FILE_NAME must not be empty.")


def _collect_excluded_dirs() -> tuple[str, ...]:
    raw = os.getenv("AI_LINTER_EXCLUDED_DIRS")
    if raw is None:
        return DEFAULT_EXCLUDED_DIRS
    values: list[str] = []
    for part in raw.split(","):
        name = part.strip()
        if name and name not in values:
            values.append(name)
    return tuple(values)


def _env_optional(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value or None


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as error:
        raise ValueError(f"Invalid integer value for {name}: {value!r}") from error


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {value!r}")
