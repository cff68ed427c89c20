# src/serial_queue/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds a TaskQueue from settings, runs the demo driver in
the main thread, then shuts the queue down (waiting for the in-flight task).
"""

from __future__ import annotations

import logging
import signal
import threading

from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.task_queue import TaskQueue
from .demo import run_demo

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = settings.log_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s demo (time scale %.2f)...", settings.app_name, settings.demo_time_scale)

    # The driver pauses on this Event, so a signal interrupts the sequence right away.
    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            signal.signal(sig, _handle_signal)
        except (ValueError, OSError):
            # Not in the main thread, or unsupported on this platform.
            logger.debug("Could not install handler for signal %s", sig, exc_info=True)

    queue = TaskQueue.from_settings(settings)
    try:
        pushed = run_demo(queue, time_scale=settings.demo_time_scale, stop=stop_main)
        logger.info("Demo finished after pushing %d task(s).", pushed)
    finally:
        queue.shutdown()
        stats = queue.stats()
        logger.info(
            "Queue stats: executed=%d failed=%d cleared=%d discarded=%d",
            stats.executed,
            stats.failed,
            stats.cleared,
            stats.discarded,
        )
        logger.info("Bye.")


if __name__ == "__main__":
    main()
