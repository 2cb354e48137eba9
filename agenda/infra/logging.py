"""App-level logging policy over the strip logging API."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from daystrip.api import JsonFormatter, StripLoggingConfig, configure_logging
from daystrip.runtime.config import debug_strip_enabled, resolve_log_level_name

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]


def build_logging_config() -> StripLoggingConfig:
    """Resolve logging configuration from environment."""
    level_name = (os.getenv("AGENDA_LOG_LEVEL") or resolve_log_level_name(default="INFO")).strip().upper()
    if debug_strip_enabled():
        level_name = "DEBUG"
    return StripLoggingConfig(
        level_name=level_name,
        console_format=os.getenv("LOG_FORMAT", "json").lower(),
        file_path=_resolve_run_log_file_path(),
        file_format="json",
    )


def setup_logging() -> None:
    """Configure application logging via the strip logging API."""
    config = build_logging_config()
    configure_logging(config)
    if config.file_path:
        logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str | None:
    configured = os.getenv("AGENDA_LOG_DIR", "").strip()
    if not configured:
        return None
    base_dir = Path(configured)
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"agenda_run_{stamp}.jsonl")
