# src/serial_queue/cli/__init__.py

from .demo import run_demo

__all__ = ["run_demo"]
