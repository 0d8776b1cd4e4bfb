"""Subprocess runner for CLI agents."""

from __future__ import annotations

import asyncio
import logging
import shlex
from collections.abc import Awaitable, Callable
from pathlib import Path

from ai_linter.orchestrator.backend.base import AgentAdapter, AgentRunRequest, ProcessOutcome
from ai_linter.orchestrator.envelope import Extracted
from ai_linter.orchestrator.errors import ProcessExitError, SpawnError

logger = logging.getLogger(__name__)

SpawnFn = Callable[[str, list[str], Path], Awaitable[ProcessOutcome]]


async def spawn_process(command: str, args: list[str], cwd: Path) -> ProcessOutcome:
    """Start ``command`` with stdin closed and wait for it, buffering both streams.

    There is no deadline: a hung agent blocks the caller until it exits.
    """

    process = await asyncio.create_subprocess_exec(
        command,
        *args,
        cwd=cwd,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()
    return ProcessOutcome(
        exit_code=process.returncode if process.returncode is not None else -1,
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
    )


async def run_agent(
    adapter: AgentAdapter,
    request: AgentRunRequest,
    *,
    spawn: SpawnFn = spawn_process,
) -> Extracted:
    """Run one agent attempt and return the answer extracted from its envelope."""

    args = adapter.build_args(request.prompt, request.model)
    if request.verbose:
        logger.info("Running %s in %s", shlex.join([adapter.command, *args]), request.cwd)

    try:
        outcome = await spawn(adapter.command, args, request.cwd)
    except FileNotFoundError as error:
        if request.cwd.is_dir():
            message = f"Agent command not found: {adapter.command} in {request.cwd} ({error})"
        else:
            message = f"Working directory not found for {adapter.command}: {request.cwd}"
        raise SpawnError(message, command=adapter.command) from error
    except OSError as error:
        raise SpawnError(
            f"Failed to spawn {adapter.command}: {error}",
            command=adapter.command,
        ) from error

    if request.verbose:
        logger.info(
            "%s exited with code %d, stdout:\n%s",
            adapter.command,
            outcome.exit_code,
            outcome.stdout,
        )

    if outcome.exit_code != 0:
        raise ProcessExitError(
            command=adapter.command,
            exit_code=outcome.exit_code,
            stderr=outcome.stderr,
        )
    return adapter.extract(outcome.stdout)
