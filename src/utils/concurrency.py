"""All-or-nothing fan-out for concurrent provider calls."""

import asyncio
from collections.abc import Awaitable, Iterable
from typing import TypeVar

from src.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


async def join_all(awaitables: Iterable[Awaitable[T]], label: str = "batch") -> list[T]:
    """Run a batch of awaitables together and return results in input order.

    Every member is scheduled before any is awaited. The first failure
    propagates and fails the whole batch; siblings still in flight are not
    cancelled, they run to completion or timeout and their results are
    dropped.

    Args:
        awaitables: Independent coroutines or futures.
        label: Batch name used in log messages.

    Returns:
        Results ordered by position in ``awaitables``, not by arrival.
    """
    tasks = [asyncio.ensure_future(aw) for aw in awaitables]
    logger.debug(f"Fan-out '{label}': {len(tasks)} calls in flight")

    try:
        results = await asyncio.gather(*tasks)
    except Exception as e:
        logger.debug(f"Fan-out '{label}' failed: {e}")
        raise

    return list(results)
