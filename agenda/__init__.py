"""Agenda app: day strip header plus events for the selected day."""
