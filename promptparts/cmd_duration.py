"""Rendering of the last command's duration."""

from __future__ import annotations

_SUFFIXES = ("d", "h", "m", "s")


def render_time(raw_seconds: int) -> str:
    """Render a number of seconds as e.g. "2h48m30s", leaving out zero parts."""
    if raw_seconds < 0:
        raise ValueError(f"duration must not be negative: {raw_seconds}")
    raw_minutes, seconds = divmod(raw_seconds, 60)
    raw_hours, minutes = divmod(raw_minutes, 60)
    days, hours = divmod(raw_hours, 24)
    components = (days, hours, minutes, seconds)
    return "".join(
        f"{value}{suffix}" for value, suffix in zip(components, _SUFFIXES) if value
    )