# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
See src/serial_queue/config.py for parsing rules and defaults.

This file exists to make the repo self-documenting even without opening config.py.
"""

ENV_VARS = {
    # App / logging
    "SERIAL_QUEUE_APP_NAME": "App display name used in log lines (default: serial-queue).",
    "SERIAL_QUEUE_LOG_LEVEL": "Console logging level (default: INFO).",
    "SERIAL_QUEUE_LOG_DIR": "Directory for serial_queue.log (default: .local/serial_queue).",
    "SERIAL_QUEUE_LOG_TO_FILE": "Write the debug log file (true/false, default: true).",
    # Queue
    "SERIAL_QUEUE_WORKER_NAME": "Worker thread name (default: serial-queue-worker).",
    "SERIAL_QUEUE_ISOLATE_FAILURES": (
        "Keep the worker alive when a task raises (true/false, default: true). "
        "When false, a failing task terminates the worker and closes the queue."
    ),
    "SERIAL_QUEUE_POST_SHUTDOWN": "Pushes after shutdown: reject (raise) or drop (log). Default: reject.",
    # Demo
    "SERIAL_QUEUE_DEMO_TIME_SCALE": "Multiplier for every pause in the demo (default: 1.0, 0 = no waiting).",
}
