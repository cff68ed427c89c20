# src/serial_queue/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from functools import partial

from ..core.ports import Task


class WorkerState(StrEnum):
    """
    Worker lifecycle.

    Notes:
    - IDLE: waiting for work or for the shutdown signal.
    - RUNNING: executing a dequeued task (outside the lock).
    - SHUTTING_DOWN: shutdown requested; no further dequeues.
    - TERMINATED: the worker thread has exited.
    """

    IDLE = "idle"
    RUNNING = "running"
    SHUTTING_DOWN = "shutting_down"
    TERMINATED = "terminated"


class PostShutdownPolicy(StrEnum):
    """What push_task does once the queue no longer accepts work."""

    REJECT = "reject"
    DROP = "drop"

    @classmethod
    def from_raw(cls, raw: str | None) -> PostShutdownPolicy:
        if not raw:
            return cls.REJECT
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.REJECT


def task_name(fn: Task) -> str:
    if isinstance(fn, partial):
        return f"partial({task_name(fn.func)})"
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    return str(name) if name else repr(fn)


@dataclass(slots=True, frozen=True)
class QueuedTask:
    seq: int
    fn: Task

    @property
    def name(self) -> str:
        return task_name(self.fn)


@dataclass(slots=True, frozen=True)
class TaskFailure:
    """A task that raised while the worker was running it."""

    seq: int
    task_name: str
    error: BaseException


@dataclass(slots=True, frozen=True)
class QueueStats:
    """
    Point-in-time counters, read under the queue lock.

    executed counts every task whose body ran, including the ones that failed.
    """

    pending: int
    executed: int
    failed: int
    cleared: int
    discarded: int
    state: WorkerState
