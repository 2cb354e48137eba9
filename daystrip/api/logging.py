"""Public strip logging API."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

# Messages read ``day_strip_scroll_to index=5 x=180.0``; values may contain spaces.
_EVENT_NAME = re.compile(r"^[a-z][a-z0-9]*(?:_[a-z0-9]+)+$")
_FIELD_KEY = re.compile(r"(?:^|\s)([a-z_][a-z0-9_]*)=")


@dataclass(frozen=True, slots=True)
class StripLoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def split_event_message(message: str) -> tuple[str | None, dict[str, str]]:
    """Split ``name key=value ...`` into the event name and its fields."""
    head, _, rest = message.partition(" ")
    if not _EVENT_NAME.match(head):
        return None, {}
    keys = list(_FIELD_KEY.finditer(rest))
    fields: dict[str, str] = {}
    for position, match in enumerate(keys):
        end = keys[position + 1].start() if position + 1 < len(keys) else len(rest)
        fields[match.group(1)] = rest[match.end() : end].strip()
    return head, fields


class JsonFormatter(logging.Formatter):
    """One JSON object per strip log record, with event fields lifted out."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        event, fields = split_event_message(message)
        fields.update((k, v) for k, v in vars(record).items() if k not in _RECORD_ATTRS)
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": message,
        }
        if event is not None:
            payload["event"] = event
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_logging(config: StripLoggingConfig) -> None:
    """Configure root logging through the runtime implementation."""
    from daystrip.runtime.logging import configure_strip_logging

    configure_strip_logging(config)
