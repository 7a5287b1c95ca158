"""Reading of a configured environment variable."""

from __future__ import annotations

import os


def get_env_value(name: str, default: str | None = None) -> str | None:
    """Return the variable's value, ``default`` if unset, or None if it is not valid text."""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value