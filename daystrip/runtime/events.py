"""Per-strip notification fan-out."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from daystrip.api.events import STRIP_EVENT_TYPES, Detach, StripEvent

logger = logging.getLogger(__name__)


class StripNotifier:
    """Delivers strip events to listeners registered for that exact event type.

    Listeners run synchronously in registration order. Only the strip event
    types are accepted, so a notifier cannot be reused as a general bus.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable[[Any], None]]] = {
            event_type: [] for event_type in STRIP_EVENT_TYPES
        }

    def listen(self, event_type: type, handler: Callable[[Any], None]) -> Detach:
        listeners = self._listeners_for(event_type)
        listeners.append(handler)

        def detach() -> None:
            if handler in listeners:
                listeners.remove(handler)

        return detach

    def emit(self, event: StripEvent) -> int:
        listeners = tuple(self._listeners_for(type(event)))
        for handler in listeners:
            handler(event)
        if not listeners:
            logger.debug("strip_event_unheard type=%s", type(event).__name__)
        return len(listeners)

    def listener_count(self, event_type: type) -> int:
        return len(self._listeners_for(event_type))

    def _listeners_for(self, event_type: type) -> list[Callable[[Any], None]]:
        listeners = self._listeners.get(event_type)
        if listeners is None:
            raise TypeError(f"not a strip event type: {event_type!r}")
        return listeners
