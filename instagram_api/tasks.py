"""Run client coroutines as independent tasks with completion callbacks."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# The loop only keeps weak references to tasks
_pending: set[asyncio.Task] = set()


def submit(
    request: Awaitable[T],
    completion: Callable[[T | Any], None],
    *,
    default: Any = None,
) -> asyncio.Task:
    """Schedule ``request`` on its own task and report the outcome once.

    ``completion`` is called exactly once: with the request's result, or with
    ``default`` if the task was cancelled or raised. Use ``default=False`` for
    the boolean endpoints. Must be called from a running event loop. Tasks
    complete in whatever order their responses arrive.
    """
    task = asyncio.ensure_future(request)
    _pending.add(task)

    def _on_done(finished: asyncio.Task) -> None:
        _pending.discard(finished)
        if finished.cancelled():
            result = default
        elif finished.exception() is not None:
            logger.error(
                "Request task failed unexpectedly: %s",
                finished.exception(),
                exc_info=finished.exception(),
            )
            result = default
        else:
            result = finished.result()

        try:
            completion(result)
        except Exception:
            logger.exception("Completion callback raised")

    task.add_done_callback(_on_done)
    return task
