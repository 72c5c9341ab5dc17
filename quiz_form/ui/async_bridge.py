"""Runs scoring coroutines off the Qt thread and reports back on it."""

from __future__ import annotations

import asyncio
import logging
from threading import Thread
from typing import Any, Awaitable, Callable

from PySide6.QtCore import QObject, Signal

from quiz_form.core.dispatch import ErrorCallback, ResultCallback, deliver_outcome, run_call

logger = logging.getLogger(__name__)


class QtAsyncDispatcher(QObject):
    """Dispatcher backed by a private asyncio loop on a daemon thread.

    Completion is signalled back to the thread this object lives on (the
    Qt main thread), so callbacks never touch widgets from the worker.
    """

    _completed = Signal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._loop = asyncio.new_event_loop()
        self._thread = Thread(target=self._run_loop, name="ScoringLoop", daemon=True)
        self._completed.connect(self._deliver)
        self._thread.start()

    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    def dispatch(
        self,
        call: Callable[[], Awaitable[Any]],
        on_result: ResultCallback,
        on_error: ErrorCallback,
    ) -> None:
        future = asyncio.run_coroutine_threadsafe(run_call(call), self._loop)
        future.add_done_callback(lambda finished: self._completed.emit((finished, on_result, on_error)))

    def _deliver(self, outcome: tuple) -> None:
        future, on_result, on_error = outcome
        deliver_outcome(future, on_result, on_error)

    def shutdown(self) -> None:
        if not self._loop.is_running():
            return
        logger.debug("Stopping scoring loop")
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=2)
