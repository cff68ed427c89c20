# src/serial_queue/cli/demo.py

"""
Demo driver.

Pushes a fixed sequence of greeting tasks with pauses in between, clears the
queue halfway through, then waits a while before returning. With the default
timing the clear lands while the first named greeting is running, so the
remaining greetings of that batch never run.

All pauses (driver and task bodies) are multiplied by time_scale.
"""

from __future__ import annotations

import logging
import threading
import time
from functools import partial

from ..core.ports import Task
from ..tasks.task_queue import TaskQueue

logger = logging.getLogger(__name__)

FIRST_BATCH = ("Alice", "Bob", "Charlie")
SECOND_BATCH = ("David", "Edward", "Frank")


def greet(pause: float = 3.0) -> None:
    logger.info("Starting greet...")
    time.sleep(pause)
    logger.info("Hello (no arg)")


def greet_with_name(name: str, pause: float = 4.0) -> None:
    logger.info("Starting greet with %s...", name)
    time.sleep(pause)
    logger.info("Hello, %s", name)


def do_some_work(pause: float = 6.0) -> None:
    logger.info("Starting doing some work...")
    time.sleep(pause)
    logger.info("Completed the work")


def run_demo(
    queue: TaskQueue,
    *,
    time_scale: float = 1.0,
    stop: threading.Event | None = None,
) -> int:
    """
    Run the demo sequence against queue and return how many tasks were pushed.

    Setting stop ends the sequence early (checked at every pause). The queue is
    not shut down here; the caller owns it.
    """
    scale = max(0.0, float(time_scale))
    stop = stop or threading.Event()
    pushed = 0

    def push(task: Task) -> None:
        nonlocal pushed
        pushed += 1
        logger.info("Pushing task %d", pushed)
        queue.push_task(task)

    def stopped_during(seconds: float) -> bool:
        return stop.wait(seconds * scale)

    push(partial(greet, 3.0 * scale))

    if stopped_during(1.0):
        return pushed
    push(lambda: logger.info("Lambda (no arg)"))

    for name in FIRST_BATCH:
        if stopped_during(1.0):
            return pushed
        push(partial(greet_with_name, name, 4.0 * scale))

    queue.clear()

    push(partial(do_some_work, 6.0 * scale))

    for name in SECOND_BATCH:
        if stopped_during(1.0):
            return pushed
        push(partial(greet_with_name, name, 4.0 * scale))

    stopped_during(10.0)
    return pushed
