"""Error taxonomy for CLI agent calls.

Process-level failures (``SpawnError``, ``ProcessExitError``) and payload-level
failures (``EnvelopeError``, ``ExtractionError``, ``ValidationError``) are kept
apart so diagnostics can tell a broken agent binary from an agent that answered
with prose. The retry loop treats all of them as retryable and reports the
exhausted budget as ``RetryExhaustedError``.
"""

from __future__ import annotations

from collections.abc import Sequence


class AgentError(RuntimeError):
    """Base class for every failure of a single agent call."""


class SpawnError(AgentError):
    """The OS could not start the agent process."""

    def __init__(self, message: str, *, command: str) -> None:
        super().__init__(message)
        self.command = command


class ProcessExitError(AgentError):
    """Agent process ran but exited with a nonzero code."""

    def __init__(self, *, command: str, exit_code: int, stderr: str) -> None:
        super().__init__(f"{command} exited with code {exit_code}: {stderr}")
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr


class EnvelopeError(AgentError):
    """Agent exited 0 but stdout holds no usable ``result`` envelope."""


class ExtractionError(AgentError):
    """``result`` is present but has the wrong type or is not valid JSON."""


class ValidationError(AgentError):
    """Payload parsed but does not match the schema expected by the caller."""


class RetryExhaustedError(RuntimeError):
    """Every attempt of a validated agent call failed.

    Not an ``AgentError``: an enclosing retry loop must not treat it as one
    more failed attempt.
    """

    def __init__(self, *, attempts: int, errors: Sequence[BaseException]) -> None:
        details = "; ".join(
            f"attempt {index}: {type(error).__name__}: {error}"
            for index, error in enumerate(errors, start=1)
        )
        super().__init__(
            f"Agent returned invalid response after {attempts} attempts. {details}",
        )
        self.attempts = attempts
        self.errors = list(errors)
