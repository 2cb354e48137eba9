"""JSON file source for agenda events."""

from __future__ import annotations

import json
from pathlib import Path

from agenda.core.models import EventRecord
from daystrip.api import Day


def load_events_file(path: Path) -> tuple[EventRecord, ...]:
    """Load events from a JSON list of ``{date, title, description, image}`` objects."""
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, list):
        raise ValueError(f"events file must hold a JSON list: {path}")
    return tuple(_event_from_payload(item) for item in payload)


def _event_from_payload(item: object) -> EventRecord:
    if not isinstance(item, dict):
        raise ValueError(f"event entry must be an object, got {item!r}")
    date = item.get("date")
    title = item.get("title")
    if not isinstance(date, str) or not isinstance(title, str):
        raise ValueError(f"event entry needs string date and title: {item!r}")
    return EventRecord(
        date=Day.of(date),
        title=title,
        description=str(item.get("description", "")),
        image=str(item.get("image", "")),
    )
