"""End-to-end lint pipeline: discover, scan, verify, report."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ai_linter.agent_runtime import AgentExecutor
from ai_linter.config import Settings
from ai_linter.lint.models import FirstPassResult, RawIssue, RuleFile, VerifiedIssue
from ai_linter.lint.passes import execute_first_pass, execute_second_pass
from ai_linter.lint.report import generate_report
from ai_linter.lint.scanner import scan_for_rule_files
from ai_linter.orchestrator.backend import AgentAdapter, run_agent
from ai_linter.orchestrator.concurrency import run_with_concurrency
from ai_linter.orchestrator.routing import create_agent

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERRORS_FOUND = 1


@dataclass(slots=True)
class PendingIssue:
    """Raw issue paired with the rule file that produced it."""

    issue: RawIssue
    rule_file: RuleFile


@dataclass(slots=True)
class LintRunResult:
    """Outcome of one pipeline run."""

    rule_files: list[RuleFile] = field(default_factory=list)
    raw_issues: list[PendingIssue] = field(default_factory=list)
    confirmed: list[VerifiedIssue] = field(default_factory=list)
    report_path: Path | None = None

    @property
    def exit_code(self) -> int:
        if any(issue.severity == "error" for issue in self.confirmed):
            return EXIT_ERRORS_FOUND
        return EXIT_OK


class LintPipelineRunner:
    """Coordinates the scan and verification passes over a project.

    Both passes run under the same concurrency bound. Any item whose agent
    call exhausts its retries aborts the run: a partial report is never
    written.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        adapter: AgentAdapter | None = None,
        executor: AgentExecutor = run_agent,
        on_progress: Callable[[str], None] | None = None,
    ) -> None:
        self._settings = settings
        self._adapter = adapter or create_agent(settings.agent.name)
        self._executor = executor
        self._on_progress = on_progress or (lambda _msg: None)

    async def run(self) -> LintRunResult:
        settings = self._settings
        project_path = settings.project_path.resolve()
        result = LintRunResult()

        self._on_progress(f"Scanning for {settings.scan.rule_file_name} files in {project_path}...")
        result.rule_files = scan_for_rule_files(
            project_path,
            file_name=settings.scan.rule_file_name,
            excluded_dirs=settings.scan.excluded_dirs,
        )
        if not result.rule_files:
            self._on_progress(f"No {settings.scan.rule_file_name} files found. Nothing to check.")
            return result

        self._on_progress(
            f"Found {len(result.rule_files)} rule file(s). Starting first pass...",
        )
        first_pass = await run_with_concurrency(
            result.rule_files,
            settings.agent.concurrency,
            self._scan_rule_file,
        )
        result.raw_issues = _collect_issues(first_pass)
        self._on_progress(
            f"First pass complete. Found {len(result.raw_issues)} potential issue(s).",
        )

        if result.raw_issues:
            self._on_progress("Starting second pass (verification)...")
            verified = await run_with_concurrency(
                result.raw_issues,
                settings.agent.concurrency,
                self._verify_issue,
            )
            result.confirmed = [issue for issue in verified if issue is not None]
            self._on_progress(
                f"Second pass complete. {len(result.confirmed)} issue(s) confirmed.",
            )
        else:
            self._on_progress("No issues found. Code looks clean!")

        output_path = settings.scan.output_path.resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(generate_report(result.confirmed, project_path), "utf-8")
        result.report_path = output_path
        self._on_progress(f"Report saved to {output_path}")
        return result

    async def _scan_rule_file(self, rule_file: RuleFile) -> FirstPassResult:
        if self._settings.agent.verbose:
            self._on_progress(f"  Scanning: {rule_file.directory}")
        return await execute_first_pass(
            rule_file,
            adapter=self._adapter,
            settings=self._settings,
            executor=self._executor,
        )

    async def _verify_issue(self, pending: PendingIssue) -> VerifiedIssue | None:
        if self._settings.agent.verbose:
            self._on_progress(f"  Verifying: {pending.issue.file}:{pending.issue.line}")
        return await execute_second_pass(
            pending.issue,
            pending.rule_file,
            adapter=self._adapter,
            settings=self._settings,
            executor=self._executor,
        )


def _collect_issues(results: list[FirstPassResult]) -> list[PendingIssue]:
    pending: list[PendingIssue] = []
    for first_pass in results:
        logger.info(
            "First pass for %s reported %d issue(s)",
            first_pass.rule_file.directory,
            len(first_pass.issues),
        )
        pending.extend(
            PendingIssue(issue=issue, rule_file=first_pass.rule_file)
            for issue in first_pass.issues
        )
    return pending
