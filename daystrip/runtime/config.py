"""Environment-sourced strip configuration."""

from __future__ import annotations

import os
from typing import Mapping

from daystrip.api.strip import DEFAULT_DAYS_AFTER, DEFAULT_DAYS_BEFORE, StripConfig

DEFAULT_VIEWPORT_WIDTH = 360.0


def env_raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def env_flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = env_raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def env_int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = env_raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def env_float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = env_raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with strip-prefixed override."""
    value = env_raw("DAYSTRIP_LOG_LEVEL", env=env)
    if value is None:
        value = env_raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_strip_config(*, env: Mapping[str, str] | None = None) -> StripConfig:
    """Load strip construction parameters from env vars.

    ``DAYSTRIP_CURRENT_DATE`` is an ISO date; unset or blank means today.
    Malformed dates raise ``InvalidRangeError`` rather than falling back.
    """
    current = (env_raw("DAYSTRIP_CURRENT_DATE", env=env) or "").strip() or None
    return StripConfig.build(
        current_date=current,
        days_before=env_int("DAYSTRIP_DAYS_BEFORE", DEFAULT_DAYS_BEFORE, minimum=0, env=env),
        days_after=env_int("DAYSTRIP_DAYS_AFTER", DEFAULT_DAYS_AFTER, minimum=0, env=env),
    )


def load_viewport_width(*, env: Mapping[str, str] | None = None) -> float:
    return env_float("DAYSTRIP_VIEWPORT_WIDTH", DEFAULT_VIEWPORT_WIDTH, minimum=0.0, env=env)


def debug_strip_enabled(*, env: Mapping[str, str] | None = None) -> bool:
    return env_flag("DAYSTRIP_DEBUG", False, env=env)
