# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from serial_queue.tasks.task_models import PostShutdownPolicy
from serial_queue.tasks.task_queue import TaskQueue

from .fakes import Recorder


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with TaskQueue.from_settings and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests independent of the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="serial-queue-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        log_to_file=False,
        worker_name="test-worker",
        isolate_failures=True,
        post_shutdown=PostShutdownPolicy.REJECT,
        demo_time_scale=0.0,
    )


@pytest.fixture()
def queue(settings: SimpleNamespace) -> Iterator[TaskQueue]:
    """A running queue; shut down (and joined) after the test."""
    q = TaskQueue.from_settings(settings)
    yield q
    q.shutdown()


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()
