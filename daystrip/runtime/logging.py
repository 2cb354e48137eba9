"""Strip logging implementation."""

from __future__ import annotations

import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from daystrip.api.logging import JsonFormatter, StripLoggingConfig

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_listener: QueueListener | None = None


def configure_strip_logging(config: StripLoggingConfig) -> None:
    """Replace root handlers; a run log file is written off-thread."""
    global _listener

    stop_strip_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.getLevelNamesMapping().get(config.level_name.upper(), logging.INFO))

    console = _with_format(logging.StreamHandler(), config.console_format)
    if not config.file_path:
        root.addHandler(console)
        return

    path = Path(config.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    run_file = _with_format(logging.FileHandler(path, encoding="utf-8", delay=True), config.file_format)
    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _listener = QueueListener(records, console, run_file, respect_handler_level=True)
    _listener.start()


def stop_strip_logging() -> None:
    """Flush pending records to the run log file and stop its listener."""
    global _listener

    if _listener is not None:
        _listener.stop()
        _listener = None


def _with_format(handler: logging.Handler, kind: str) -> logging.Handler:
    if kind.strip().lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    return handler
