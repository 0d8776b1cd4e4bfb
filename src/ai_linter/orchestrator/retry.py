"""Validating retry loop for agent calls."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ai_linter.orchestrator.errors import AgentError, RetryExhaustedError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(slots=True)
class ValidationResult(Generic[T]):
    """Result of payload validation."""

    is_valid: bool
    error_summary: str | None
    payload: T | None

    @classmethod
    def ok(cls, payload: T | None) -> ValidationResult[T]:
        return cls(is_valid=True, error_summary=None, payload=payload)

    @classmethod
    def invalid(cls, error_summary: str) -> ValidationResult[T]:
        return cls(is_valid=False, error_summary=error_summary, payload=None)


async def run_with_validation(
    invoke: Callable[[], Awaitable[Any]],
    validate: Callable[[Any], ValidationResult[T]],
    *,
    max_attempts: int,
    label: str = "agent call",
) -> T | None:
    """Call ``invoke`` until its payload validates or the attempt budget runs out.

    Attempts run one after another with no delay. Every ``AgentError`` is
    recorded and retried, whether the process failed or its answer did not
    match the schema. Exhausting the budget raises ``RetryExhaustedError``
    carrying all recorded errors.
    """

    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    errors: list[AgentError] = []
    for attempt in range(max_attempts):
        try:
            payload = await invoke()
            result = validate(payload)
            if not result.is_valid:
                raise ValidationError(result.error_summary or "Payload failed validation.")
        except AgentError as error:
            errors.append(error)
            logger.warning(
                "%s failed (attempt %d/%d): %s",
                label,
                attempt + 1,
                max_attempts,
                error,
            )
            continue
        if attempt:
            logger.info("%s succeeded on attempt %d/%d", label, attempt + 1, max_attempts)
        return result.payload

    raise RetryExhaustedError(attempts=max_attempts, errors=errors)
