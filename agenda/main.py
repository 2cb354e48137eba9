"""Headless agenda preview entry point."""

from __future__ import annotations

import logging
from pathlib import Path

from agenda.app.controller import AgendaController
from agenda.infra.config import load_agenda_config, load_default_env_files
from agenda.infra.events_source import load_events_file
from agenda.infra.logging import setup_logging
from daystrip.runtime.logging import stop_strip_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Lay out the strip with uniform cells and log header and selection."""
    load_default_env_files()
    setup_logging()
    try:
        config = load_agenda_config()
        events = load_events_file(Path(config.events_file)) if config.events_file else ()
        controller = AgendaController(events, config=config.strip, viewport_width=config.viewport_width)
        for index in range(config.strip.day_count):
            controller.handle_cell_layout(index, config.cell_width)
        state = controller.ui_state()
        if state.scroll_target is not None:
            controller.handle_scroll(state.scroll_target)
            state = controller.ui_state()
        logger.info(
            "agenda_preview header=%s selected=%s events=%d",
            state.header,
            state.selected_day.calendar_label(),
            len(state.events),
        )
        for event in state.events:
            logger.info("agenda_event title=%s", event.title, extra={"event_date": event.date.iso()})
    finally:
        stop_strip_logging()


if __name__ == "__main__":
    main()
