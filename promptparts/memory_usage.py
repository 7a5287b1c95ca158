"""Formatting of memory amounts for the memory usage display."""

from __future__ import annotations

_BINARY_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def format_kib(n_kib: int) -> str:
    """Render an amount in KiB using the largest fitting binary unit, e.g. "7GiB".

    Negative amounts are rendered as zero bytes.
    """
    total_bytes = n_kib * 1024 if n_kib > 0 else 0
    if total_bytes < 1024:
        return f"{total_bytes}B"

    unit = _BINARY_UNITS[0]
    value = total_bytes / 1024
    for next_unit in _BINARY_UNITS[1:]:
        if value < 1024:
            break
        value /= 1024
        unit = next_unit
    return f"{value:.0f}{unit}"