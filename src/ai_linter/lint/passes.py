"""First (scan) and second (verification) pass for a single work item."""

from __future__ import annotations

from ai_linter.agent_runtime import AgentExecutor, run_agent_task
from ai_linter.config import Settings
from ai_linter.lint.models import FirstPassResult, RawIssue, RuleFile, VerifiedIssue
from ai_linter.lint.prompts import build_first_pass_prompt, build_second_pass_prompt
from ai_linter.lint.validator import validate_first_pass_payload, validate_second_pass_payload
from ai_linter.orchestrator.backend import AgentAdapter, AgentRunRequest, run_agent
from ai_linter.orchestrator.routing import resolve_model


async def execute_first_pass(
    rule_file: RuleFile,
    *,
    adapter: AgentAdapter,
    settings: Settings,
    executor: AgentExecutor = run_agent,
) -> FirstPassResult:
    """Ask the fast model for rule violations in the rule file's directory."""

    request = AgentRunRequest(
        prompt=build_first_pass_prompt(rule_file.content),
        cwd=rule_file.directory,
        model=resolve_model(adapter, profile="fast", model_override=settings.agent.model_fast),
        verbose=settings.agent.verbose,
    )
    issues = await run_agent_task(
        adapter=adapter,
        request=request,
        validate=validate_first_pass_payload,
        max_attempts=settings.agent.max_retries,
        executor=executor,
        label=f"First pass for {rule_file.directory}",
    )
    return FirstPassResult(rule_file=rule_file, issues=issues or [])


async def execute_second_pass(
    issue: RawIssue,
    rule_file: RuleFile,
    *,
    adapter: AgentAdapter,
    settings: Settings,
    executor: AgentExecutor = run_agent,
) -> VerifiedIssue | None:
    """Ask the review model to confirm one issue; ``None`` marks a false positive."""

    request = AgentRunRequest(
        prompt=build_second_pass_prompt(issue, rule_file.content),
        cwd=rule_file.directory,
        model=resolve_model(adapter, profile="review", model_override=settings.agent.model_review),
        verbose=settings.agent.verbose,
    )
    return await run_agent_task(
        adapter=adapter,
        request=request,
        validate=validate_second_pass_payload,
        max_attempts=settings.agent.max_retries,
        executor=executor,
        label=f"Verification of {issue.file}:{issue.line}",
    )
