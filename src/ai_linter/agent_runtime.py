"""Validated, retried CLI agent calls.

Neutral module imported by both lint passes: one call here is one
``run_with_validation`` loop whose attempts each spawn a fresh agent process.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from ai_linter.orchestrator.backend import AgentAdapter, AgentRunRequest, run_agent
from ai_linter.orchestrator.envelope import Extracted, parse_payload
from ai_linter.orchestrator.retry import ValidationResult, run_with_validation

logger = logging.getLogger(__name__)

T = TypeVar("T")

AgentExecutor = Callable[[AgentAdapter, AgentRunRequest], Awaitable[Extracted]]


async def run_agent_task(  # noqa: PLR0913
    *,
    adapter: AgentAdapter,
    request: AgentRunRequest,
    validate: Callable[[Any], ValidationResult[T]],
    max_attempts: int,
    executor: AgentExecutor = run_agent,
    label: str | None = None,
) -> T | None:
    """Run one agent prompt until its JSON answer passes ``validate``.

    ``executor`` performs a single attempt and defaults to spawning the
    adapter's command; tests pass a coroutine returning canned answers.
    """

    task_label = label or f"{adapter.name} in {request.cwd}"

    async def _attempt() -> Any:
        return parse_payload(await executor(adapter, request))

    payload = await run_with_validation(
        _attempt,
        validate,
        max_attempts=max_attempts,
        label=task_label,
    )
    logger.debug("Agent task completed: %s", task_label)
    return payload
