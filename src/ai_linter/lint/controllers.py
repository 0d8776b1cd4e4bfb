"""CLI controller for the lint command."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ai_linter.agent_runtime import AgentExecutor
from ai_linter.config import Settings
from ai_linter.lint.runner import LintPipelineRunner, LintRunResult
from ai_linter.orchestrator.backend import run_agent


@dataclass(slots=True)
class LintRunCommand:
    """CLI input for one lint run; ``None`` falls back to the environment."""

    project_path: Path
    concurrency: int | None = None
    max_retries: int | None = None
    model_fast: str | None = None
    model_review: str | None = None
    agent: str | None = None
    output_path: Path | None = None
    verbose: bool | None = None


class LintCliController:
    """Builds settings from CLI input and runs the pipeline to completion."""

    def __init__(self, executor: AgentExecutor = run_agent) -> None:
        self._executor = executor

    def build_settings(self, command: LintRunCommand) -> Settings:
        """Overlay explicit CLI values on env settings and validate them."""

        settings = Settings.from_env(project_path=command.project_path)
        if command.concurrency is not None:
            settings.agent.concurrency = command.concurrency
        if command.max_retries is not None:
            settings.agent.max_retries = command.max_retries
        if command.model_fast is not None:
            settings.agent.model_fast = command.model_fast
        if command.model_review is not None:
            settings.agent.model_review = command.model_review
        if command.agent is not None:
            settings.agent.name = command.agent.strip().lower()
        if command.output_path is not None:
            settings.scan.output_path = command.output_path
        if command.verbose is not None:
            settings.agent.verbose = command.verbose
        settings.validate()
        return settings

    def run(
        self,
        settings: Settings,
        *,
        on_progress: Callable[[str], None] | None = None,
    ) -> LintRunResult:
        """Run scan, verification and report writing for one project."""

        runner = LintPipelineRunner(
            settings=settings,
            executor=self._executor,
            on_progress=on_progress,
        )
        return asyncio.run(runner.run())
