# src/serial_queue/__init__.py

"""Single-worker FIFO task queue."""

from .errors import QueueShutdownError, TaskQueueError
from .logging_setup import setup_logging
from .tasks import PostShutdownPolicy, QueueStats, TaskFailure, TaskQueue, WorkerState

__all__ = [
    "PostShutdownPolicy",
    "QueueShutdownError",
    "QueueStats",
    "TaskFailure",
    "TaskQueue",
    "TaskQueueError",
    "WorkerState",
    "setup_logging",
]

__version__ = "0.1.0"
