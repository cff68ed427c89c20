# src/serial_queue/tasks/task_queue.py

from __future__ import annotations

"""
Single-worker FIFO task queue.

Producers push zero-argument callables; one background thread runs them in the
order they were appended, one at a time. Producers never wait for a task to run.

Synchronization:
- one lock guards the pending deque, the shutdown flag and the counters,
- the worker sleeps on a condition ("pending non-empty OR shutdown"),
- tasks always run outside the lock.

Shutdown lets the in-flight task finish and discards everything still pending.
Callers that want the backlog to run first call wait_all() before shutdown().
"""

import logging
import threading
from collections import deque
from typing import Any

from ..core.ports import FailureHandler, Task
from ..errors import QueueShutdownError
from .task_models import (
    PostShutdownPolicy,
    QueuedTask,
    QueueStats,
    TaskFailure,
    WorkerState,
    task_name,
)

logger = logging.getLogger(__name__)

DEFAULT_WORKER_NAME = "serial-queue-worker"


class TaskQueue:
    """
    FIFO queue drained by exactly one worker thread.

    Failure handling:
    - isolate_failures=True (default): any exception a task raises, SystemExit
      included, is logged, counted and handed to on_error; the worker keeps going.
    - isolate_failures=False: the exception escapes the worker thread, which
      dies. The queue then behaves as if shut down for further pushes.

    Pushing after shutdown raises QueueShutdownError (post_shutdown=REJECT) or
    is logged and ignored (post_shutdown=DROP).

    The worker is a daemon thread: call shutdown() (or use the queue as a
    context manager) to wait for the in-flight task.
    """

    def __init__(
        self,
        *,
        name: str = DEFAULT_WORKER_NAME,
        isolate_failures: bool = True,
        on_error: FailureHandler | None = None,
        post_shutdown: PostShutdownPolicy | str = PostShutdownPolicy.REJECT,
    ) -> None:
        self._isolate_failures = bool(isolate_failures)
        self._on_error = on_error
        self._post_shutdown = PostShutdownPolicy(str(post_shutdown).strip().lower())

        self._lock = threading.Lock()
        # Both conditions share the lock: the worker waits for work, wait_all() waits for idle.
        self._work_available = threading.Condition(self._lock)
        self._idle = threading.Condition(self._lock)

        self._tasks: deque[QueuedTask] = deque()
        self._current: QueuedTask | None = None
        self._shutdown = False
        self._terminated = False

        self._next_seq = 0
        self._executed = 0
        self._failed = 0
        self._cleared = 0
        self._discarded = 0

        self._worker = threading.Thread(target=self._process_tasks, name=name, daemon=True)
        self._worker.start()

    @classmethod
    def from_settings(cls, settings: Any, *, on_error: FailureHandler | None = None) -> TaskQueue:
        """Build a queue from Settings (or any object with the same attributes)."""
        return cls(
            name=getattr(settings, "worker_name", DEFAULT_WORKER_NAME),
            isolate_failures=getattr(settings, "isolate_failures", True),
            on_error=on_error,
            post_shutdown=getattr(settings, "post_shutdown", PostShutdownPolicy.REJECT),
        )

    # ---- producer API ----

    def push_task(self, task: Task) -> int | None:
        """
        Append a task to the tail of the queue and wake the worker.

        Returns the task's sequence number, or None if the task was dropped
        because the queue is shut down (DROP policy).
        """
        if not callable(task):
            raise TypeError(f"task must be callable, got {type(task).__name__}")

        seq = -1
        with self._lock:
            accepting = not (self._shutdown or self._terminated)
            if accepting:
                seq = self._next_seq
                self._next_seq += 1
                self._tasks.append(QueuedTask(seq=seq, fn=task))
                self._work_available.notify()

        if accepting:
            logger.debug("Queued task #%d (%s)", seq, task_name(task))
            return seq

        if self._post_shutdown is PostShutdownPolicy.DROP:
            logger.warning("Task queue is shut down; dropping task %s", task_name(task))
            return None
        raise QueueShutdownError(f"task queue is shut down; cannot push {task_name(task)}")

    def clear(self) -> int:
        """Drop every pending task. The in-flight task (if any) is not affected."""
        with self._lock:
            removed = len(self._tasks)
            self._tasks.clear()
            self._cleared += removed
            if removed:
                self._idle.notify_all()

        if removed:
            logger.info("Clearing task queue: %d pending task(s) removed.", removed)
        else:
            logger.debug("Clearing task queue: nothing pending.")
        return removed

    def wait_all(self, timeout: float | None = None) -> bool:
        """
        Block until nothing is pending or running.

        Returns False if timeout expired first. Also returns True once the worker
        has terminated, since nothing will run after that.

        Raises RuntimeError when called from a task: the caller is itself the
        running task, so the queue can never become idle while it waits.
        """
        if threading.current_thread() is self._worker:
            raise RuntimeError("wait_all() cannot be called from a task running on this queue")
        with self._idle:
            return self._idle.wait_for(
                lambda: self._terminated or (not self._tasks and self._current is None),
                timeout=timeout,
            )

    def shutdown(self) -> None:
        """
        Stop the worker and wait for it to exit.

        The in-flight task runs to completion; pending tasks are discarded.
        Safe to call more than once. From inside a task it only signals the
        worker (a thread cannot join itself).
        """
        with self._lock:
            first = not self._shutdown
            self._shutdown = True
            self._work_available.notify_all()

        if first:
            logger.info("Task queue shutdown requested.")

        if threading.current_thread() is self._worker:
            return
        self._worker.join()

    close = shutdown

    # ---- introspection ----

    @property
    def name(self) -> str:
        return self._worker.name

    @property
    def state(self) -> WorkerState:
        with self._lock:
            return self._state_locked()

    @property
    def is_shutdown(self) -> bool:
        with self._lock:
            # A worker killed by an unisolated failure closes the queue just like shutdown().
            return self._shutdown or self._terminated

    def stats(self) -> QueueStats:
        with self._lock:
            return QueueStats(
                pending=len(self._tasks),
                executed=self._executed,
                failed=self._failed,
                cleared=self._cleared,
                discarded=self._discarded,
                state=self._state_locked(),
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __enter__(self) -> TaskQueue:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def __repr__(self) -> str:
        s = self.stats()
        return f"<TaskQueue name={self.name!r} state={s.state.value} pending={s.pending}>"

    # ---- worker ----

    def _state_locked(self) -> WorkerState:
        if self._terminated:
            return WorkerState.TERMINATED
        if self._shutdown:
            return WorkerState.SHUTTING_DOWN
        if self._current is not None:
            return WorkerState.RUNNING
        return WorkerState.IDLE

    def _process_tasks(self) -> None:
        logger.debug("Worker thread %s started.", threading.current_thread().name)
        clean_exit = False
        try:
            while True:
                with self._work_available:
                    self._work_available.wait_for(lambda: bool(self._tasks) or self._shutdown)

                    if self._shutdown:
                        clean_exit = True
                        break

                    item = self._tasks.popleft()
                    self._current = item

                self._run(item)
        finally:
            # Whatever is still pending will never run: the backlog is discarded, not drained.
            with self._lock:
                discarded = len(self._tasks)
                self._tasks.clear()
                self._discarded += discarded
                self._current = None
                self._terminated = True
                self._idle.notify_all()

            if clean_exit:
                logger.info("Worker thread shutting down (%d pending task(s) discarded).", discarded)
            else:
                logger.error(
                    "Worker thread terminated by a task failure; the queue is closed "
                    "(%d pending task(s) discarded).",
                    discarded,
                )

    def _run(self, item: QueuedTask) -> None:
        logger.debug("Start running task #%d (%s)", item.seq, item.name)
        failed = False
        try:
            item.fn()
        except BaseException as e:
            # Isolation covers SystemExit and KeyboardInterrupt raised inside a task too.
            failed = True
            if not self._isolate_failures:
                raise
            logger.exception("Task #%d (%s) failed.", item.seq, item.name)
            self._report_failure(TaskFailure(seq=item.seq, task_name=item.name, error=e))
        finally:
            with self._lock:
                self._executed += 1
                if failed:
                    self._failed += 1
                self._current = None
                self._idle.notify_all()

    def _report_failure(self, failure: TaskFailure) -> None:
        if self._on_error is None:
            return
        try:
            self._on_error(failure)
        except BaseException:
            logger.exception("on_error handler failed for task #%d (%s).", failure.seq, failure.task_name)
