# src/serial_queue/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Bad values fall back to defaults instead of failing at import time.
- The queue itself never reads the environment; callers pass Settings in.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.task_models import PostShutdownPolicy

ENV_PREFIX = "SERIAL_QUEUE"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Queue ----
    worker_name: str
    isolate_failures: bool
    post_shutdown: PostShutdownPolicy

    # ---- Demo driver ----
    demo_time_scale: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "serial-queue").strip() or "serial-queue"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/serial_queue"))
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        worker_name = _env(_k("WORKER_NAME"), "serial-queue-worker").strip() or "serial-queue-worker"
        isolate_failures = _env_bool(_k("ISOLATE_FAILURES"), True)
        post_shutdown = PostShutdownPolicy.from_raw(os.getenv(_k("POST_SHUTDOWN")))

        # Negative scales make no sense for sleeps; 0 runs the demo without waiting.
        demo_time_scale = max(0.0, _env_float(_k("DEMO_TIME_SCALE"), 1.0))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            log_to_file=log_to_file,
            worker_name=worker_name,
            isolate_failures=isolate_failures,
            post_shutdown=post_shutdown,
            demo_time_scale=demo_time_scale,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
