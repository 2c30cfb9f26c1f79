"""
Dispatchers - Hand results back to the context that owns UI state.

The search pipeline computes on worker threads and publishes through a
dispatcher. A GTK session uses panels.gtk.GLibDispatcher; headless
sessions and tests use the dispatchers below.
"""

import threading
from typing import Any, Callable, Protocol


class Dispatcher(Protocol):
    def dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        ...


class ImmediateDispatcher:
    """
    Run callbacks inline on the calling thread.

    For the search pipeline that is a worker thread; the pipeline
    serializes its own publications.
    """

    def dispatch(self, callback, *args):
        callback(*args)


class QueueDispatcher:
    """
    Queue callbacks until the owning thread drains them.

    Any thread may dispatch. drain() must be called from the thread that
    owns UI state; callbacks run there in arrival order.
    """

    def __init__(self):
        self._pending: list[tuple[Callable[..., Any], tuple]] = []
        self._condition = threading.Condition()

    def dispatch(self, callback, *args):
        with self._condition:
            self._pending.append((callback, args))
            self._condition.notify_all()

    def wait(self, count: int = 1, timeout: float = 5.0) -> bool:
        """Block until at least count callbacks are queued. Returns False on timeout."""
        with self._condition:
            return self._condition.wait_for(lambda: len(self._pending) >= count, timeout)

    def drain(self) -> int:
        """Run every queued callback. Returns how many ran."""
        with self._condition:
            pending, self._pending = self._pending, []
        for callback, args in pending:
            callback(*args)
        return len(pending)

    @property
    def pending(self) -> int:
        """Number of queued callbacks."""
        with self._condition:
            return len(self._pending)
