"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from daystrip.api import StripConfig
from daystrip.runtime.config import env_float, env_raw, load_strip_config, load_viewport_width

DEFAULT_CELL_WIDTH = 60.0

DEFAULT_ENV_FILES: tuple[str, ...] = (
    ".env.daystrip",
    ".env.daystrip.local",
    ".env.agenda",
    ".env.agenda.local",
)


@dataclass(frozen=True, slots=True)
class AgendaConfig:
    """Resolved agenda preview configuration."""

    strip: StripConfig
    viewport_width: float
    cell_width: float
    events_file: str | None = None


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load split env files with optional local overrides.

    Precedence is left-to-right because later loads may overwrite previous values.
    """
    to_load = tuple(paths) if paths is not None else DEFAULT_ENV_FILES
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_agenda_config(*, env: Mapping[str, str] | None = None) -> AgendaConfig:
    """Build preview configuration from env vars."""
    events_file = (env_raw("AGENDA_EVENTS_FILE", env=env) or "").strip() or None
    return AgendaConfig(
        strip=load_strip_config(env=env),
        viewport_width=load_viewport_width(env=env),
        cell_width=env_float("AGENDA_CELL_WIDTH", DEFAULT_CELL_WIDTH, minimum=0.0, env=env),
        events_file=events_file,
    )
