"""Run a computation with an optional time limit."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


class ExecutionCanceled(Exception):
    """Raised when a computation does not finish before its time limit."""

    def __init__(self, message: str = "execution canceled") -> None:
        super().__init__(message)


def run_with_timeout(func: Callable[[], T], timeout: float | None) -> T:
    """Run ``func`` and return its result.

    With a ``timeout`` in seconds, the call runs on a background thread and
    :class:`ExecutionCanceled` is raised if it has not finished in time.
    Exceptions raised by ``func`` propagate to the caller.
    """
    if timeout is None:
        return func()

    outcome: dict[str, Any] = {}

    def target() -> None:
        try:
            outcome["result"] = func()
        except BaseException as exc:  # re-raised in the caller's thread
            outcome["error"] = exc

    worker = threading.Thread(target=target, daemon=True)
    worker.start()
    worker.join(max(timeout, 0.0))
    if worker.is_alive():
        raise ExecutionCanceled()
    if "error" in outcome:
        raise outcome["error"]
    return outcome["result"]