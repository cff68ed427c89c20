# src/serial_queue/errors.py

"""Exceptions raised by the task queue."""

from __future__ import annotations


class TaskQueueError(Exception):
    """Base class for task queue errors."""


class QueueShutdownError(TaskQueueError):
    """
    Raised when a task is pushed after shutdown was requested.

    Also raised after the worker thread died from an unisolated task failure:
    such a queue can never run anything again, so accepting work would only
    hide the problem.
    """
