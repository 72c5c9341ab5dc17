"""Fire-and-forget execution of scoring calls.

The submission controller never awaits a scoring call itself. It hands the
call to a dispatcher together with two callbacks and returns immediately.
The dispatcher decides where the coroutine runs and on which thread the
callbacks fire.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Protocol

logger = logging.getLogger(__name__)

ResultCallback = Callable[[Any], None]
ErrorCallback = Callable[[BaseException], None]


class Dispatcher(Protocol):
    def dispatch(
        self,
        call: Callable[[], Awaitable[Any]],
        on_result: ResultCallback,
        on_error: ErrorCallback,
    ) -> None: ...


class AsyncioDispatcher:
    """Runs calls as tasks on the currently running asyncio loop."""

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task] = set()

    def dispatch(
        self,
        call: Callable[[], Awaitable[Any]],
        on_result: ResultCallback,
        on_error: ErrorCallback,
    ) -> None:
        loop = asyncio.get_running_loop()
        task = loop.create_task(run_call(call))
        self._tasks.add(task)

        def _done(finished: asyncio.Task) -> None:
            self._tasks.discard(finished)
            deliver_outcome(finished, on_result, on_error)

        task.add_done_callback(_done)

    def pending_count(self) -> int:
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait until every dispatched call has completed and been delivered."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
            # Done callbacks are scheduled with call_soon; let them run.
            await asyncio.sleep(0)


async def run_call(call: Callable[[], Awaitable[Any]]) -> Any:
    return await call()


def deliver_outcome(future: Any, on_result: ResultCallback, on_error: ErrorCallback) -> None:
    """Route a finished future to the matching callback."""
    if future.cancelled():
        logger.debug("Scoring call cancelled before completion")
        on_error(asyncio.CancelledError())
        return
    error = future.exception()
    if error is not None:
        on_error(error)
        return
    on_result(future.result())
