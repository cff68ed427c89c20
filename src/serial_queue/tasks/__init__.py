# src/serial_queue/tasks/__init__.py

"""
Task subsystem.

Components:
- task_models.py: data structures (WorkerState, TaskFailure, QueueStats, ...)
- task_queue.py: the single-worker FIFO queue
"""

from .task_models import PostShutdownPolicy, QueueStats, TaskFailure, WorkerState
from .task_queue import TaskQueue

__all__ = ["PostShutdownPolicy", "QueueStats", "TaskFailure", "TaskQueue", "WorkerState"]
