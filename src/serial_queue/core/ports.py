# src/serial_queue/core/ports.py

from __future__ import annotations

"""
Ports (callable shapes) used by the queue.

The queue only depends on these Protocols, so callers can pass plain functions,
lambdas, bound methods or callable objects.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import TaskFailure


class Task(Protocol):
    """Deferred unit of work: no arguments, return value ignored."""
    def __call__(self) -> object: ...


class FailureHandler(Protocol):
    """
    Receives task failures caught by the worker.

    Called on the worker thread, right after the failing task returned control.
    """

    def __call__(self, failure: TaskFailure) -> None: ...
