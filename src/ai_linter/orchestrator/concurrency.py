"""Bounded worker pool preserving input order."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


async def run_with_concurrency(
    items: Sequence[T],
    concurrency: int,
    fn: Callable[[T], Awaitable[R]],
) -> list[R]:
    """Run ``fn`` over ``items`` with at most ``concurrency`` calls in flight.

    ``result[i]`` always belongs to ``items[i]`` regardless of completion
    order. The first failure propagates to the caller; calls already running
    are left to finish and their results are discarded, and no new item is
    claimed afterwards. Later failures of those calls are logged, not raised.
    """

    if concurrency < 1:
        raise ValueError(f"concurrency must be >= 1, got {concurrency}")

    results: list[Any] = [None] * len(items)
    cursor = 0
    failed = False

    async def worker() -> None:
        nonlocal cursor, failed
        # Claim and advance with no await in between: indices are never shared.
        while not failed and cursor < len(items):
            index = cursor
            cursor += 1
            try:
                results[index] = await fn(items[index])
            except BaseException:
                failed = True
                raise

    workers = [asyncio.create_task(worker()) for _ in range(min(concurrency, len(items)))]
    for task in workers:
        task.add_done_callback(_retrieve_worker_exception)
    if workers:
        await asyncio.gather(*workers)
    return results


def _retrieve_worker_exception(task: asyncio.Task[None]) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.debug("Worker stopped: %s: %s", type(error).__name__, error)
