"""Public day strip API contracts."""

from daystrip.api.day import Day, DayInput
from daystrip.api.events import (
    DaySelected,
    HeaderLabelChanged,
    ScrollRequested,
    StripEvent,
    StripEventBus,
    create_strip_event_bus,
)
from daystrip.api.logging import JsonFormatter, StripLoggingConfig, configure_logging
from daystrip.api.strip import (
    DEFAULT_DAYS_AFTER,
    DEFAULT_DAYS_BEFORE,
    ScrollSurface,
    StripConfig,
    StripPhase,
    create_day_strip,
)
from daystrip.runtime.errors import (
    IndexOutOfRangeError,
    InvalidMeasurementError,
    InvalidRangeError,
    NotReadyError,
    StripError,
)

__all__ = [
    "DEFAULT_DAYS_AFTER",
    "DEFAULT_DAYS_BEFORE",
    "Day",
    "DayInput",
    "DaySelected",
    "HeaderLabelChanged",
    "IndexOutOfRangeError",
    "InvalidMeasurementError",
    "InvalidRangeError",
    "JsonFormatter",
    "NotReadyError",
    "ScrollRequested",
    "ScrollSurface",
    "StripConfig",
    "StripError",
    "StripEvent",
    "StripEventBus",
    "StripLoggingConfig",
    "StripPhase",
    "configure_logging",
    "create_day_strip",
    "create_strip_event_bus",
]
