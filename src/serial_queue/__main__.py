# src/serial_queue/__main__.py

from .cli.main import main

main()
